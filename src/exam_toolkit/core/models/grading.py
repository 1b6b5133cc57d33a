"""
Module: grading

Purpose:
    Pluggable answer grading. A grader decides whether a submitted answer
    matches a question's key. Questions hold a grader instead of comparing
    strings themselves, so grading can be swapped without touching Question.

Key Classes:
    - GradingStrategy: Abstract interface every grader implements
    - ExactMatchGrader: Case-sensitive string equality

Dependencies:
    - abc (std)
    - dataclasses (std)

Used By:
    - core.models.components.Question
    - builder.factory.QuestionFactory
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class GradingStrategy(ABC):
    """
    Maps (answer, key) to a pass/fail decision.

    Implementations must be pure and total: no side effects and no
    exceptions for any pair of strings.
    """

    @property
    def name(self) -> str:
        """Short identifier used in dict views and logs."""
        return type(self).__name__

    @abstractmethod
    def grade(self, answer: str, key: str) -> bool:
        """
        Decide whether an answer satisfies a key.

        Args:
            answer: Candidate answer as submitted
            key: Expected answer stored on the question

        Returns:
            True if the answer is accepted
        """


@dataclass(frozen=True)
class ExactMatchGrader(GradingStrategy):
    """
    Grader that accepts only an answer identical to the key.

    Comparison is case-sensitive and whitespace-sensitive.

    Example:
        >>> ExactMatchGrader().grade("4", "4")
        True
        >>> ExactMatchGrader().grade("four", "4")
        False
    """

    @property
    def name(self) -> str:
        return "exact"

    def grade(self, answer: str, key: str) -> bool:
        return answer == key


# Shared instance; the grader is stateless
EXACT_MATCH = ExactMatchGrader()
