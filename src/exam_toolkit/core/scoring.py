"""
Module: core.scoring

Purpose:
    Grade a session's answers against an exam tree. Questions are numbered
    in pre-order, the same order display() prints them, and question i is
    graded against the session's answer at index i.

Key Functions:
    - grade_session(): Produce a SessionResult

Key Classes:
    - SessionResult: Per-question outcomes with calculated totals

Dependencies:
    - dataclasses (std)
    - functools (std)
    - .models: ExamComponent, ExamSession

Used By:
    - cli: Demo driver
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Tuple

from .models.components import ExamComponent
from .models.session import ExamSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionResult:
    """
    Outcome of grading a session.

    Attributes:
        outcomes: One flag per question in pre-order, True if correct

    Example:
        >>> result = SessionResult((True, False, False))
        >>> result.correct, result.total
        (1, 3)
    """

    outcomes: Tuple[bool, ...]

    @cached_property
    def correct(self) -> int:
        return sum(1 for ok in self.outcomes if ok)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @cached_property
    def score_percent(self) -> float:
        """Percentage of questions answered correctly (0.0 for an empty exam)."""
        if not self.outcomes:
            return 0.0
        return 100.0 * self.correct / self.total


def grade_session(exam: ExamComponent, session: ExamSession) -> SessionResult:
    """
    Grade every question of an exam against a session's answers.

    Unanswered questions count as incorrect and are never passed to a
    grader.

    Args:
        exam: Root of the exam tree (a single Question is also accepted)
        session: Session holding answers in question order

    Returns:
        SessionResult with one outcome per question
    """
    answered = len(session.answers)
    outcomes = []
    for index, question in enumerate(exam.iter_questions()):
        if index >= answered:
            outcomes.append(False)
            continue
        outcomes.append(question.check_answer(session.get_answer(index)))

    result = SessionResult(tuple(outcomes))
    logger.debug(f"Graded session: {result.correct}/{result.total} correct")
    return result
