"""
Module: builder

Purpose:
    Construction helpers for exam trees.

Key Classes:
    - ExamBuilder: Chainable exam assembly
    - QuestionFactory: Question recipes (multiple choice, true/false)
"""

from .factory import QuestionFactory, MULTIPLE_CHOICE_SUFFIX, TRUE_FALSE_SUFFIX
from .exam_builder import ExamBuilder

__all__ = [
    "ExamBuilder",
    "QuestionFactory",
    "MULTIPLE_CHOICE_SUFFIX",
    "TRUE_FALSE_SUFFIX",
]
