"""
Module: builder.factory

Purpose:
    Fixed recipes for creating questions. Each recipe decorates the text
    with its answer-format suffix and binds the exact-match grader.

Key Classes:
    - QuestionFactory: create_multiple_choice(), create_true_false()

Dependencies:
    - core.models: Question, EXACT_MATCH

Used By:
    - builder.exam_builder.ExamBuilder
"""

from __future__ import annotations

from exam_toolkit.core.models import EXACT_MATCH, Question

MULTIPLE_CHOICE_SUFFIX = " (A/B/C/D)"
TRUE_FALSE_SUFFIX = " (True/False)"


class QuestionFactory:
    """Creates questions of the supported answer formats."""

    @staticmethod
    def create_multiple_choice(text: str, key: str) -> Question:
        """
        Create a multiple-choice question.

        Example:
            >>> QuestionFactory.create_multiple_choice("2+2?", "4").text
            '2+2? (A/B/C/D)'
        """
        return Question(text + MULTIPLE_CHOICE_SUFFIX, key, EXACT_MATCH)

    @staticmethod
    def create_true_false(text: str, key: str) -> Question:
        return Question(text + TRUE_FALSE_SUFFIX, key, EXACT_MATCH)
