"""
Module: session

Purpose:
    Tracks a candidate's progress through an exam and lets that progress be
    checkpointed and rolled back. ExamSession is the mutable progress
    record; SessionSnapshot is an immutable copy of it at one instant.

Key Classes:
    - ExamSession: Current position plus ordered answers
    - SessionSnapshot: Frozen copy of a session's progress

Dependencies:
    - dataclasses (std)
    - logging (std)

Used By:
    - core.scoring.grade_session
    - cli: Demo driver

Invariants:
    - position == len(answers), except right after restore() where both
      fields come from the snapshot
    - A snapshot never shares its answer storage with any session, so
      mutating either side after save()/restore() leaves the other intact
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Tuple

logger = logging.getLogger(__name__)

# Returned by get_answer() for indices with no recorded answer
NO_ANSWER = "(no answer)"


@dataclass(frozen=True)
class SessionSnapshot:
    """
    Immutable copy of session progress.

    Answers are held as a tuple, so a snapshot cannot be changed after
    creation and can be restored any number of times.

    Attributes:
        position: Index of the next question to be answered
        answers: Recorded answers in submission order

    Example:
        >>> snap = SessionSnapshot(2, ("4", "10"))
        >>> snap.answer_count
        2
    """

    position: int
    answers: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate snapshot on construction."""
        if self.position < 0:
            raise ValueError(f"position must be non-negative: {self.position}")
        # Accept any sequence but always store an owned tuple
        if not isinstance(self.answers, tuple):
            object.__setattr__(self, "answers", tuple(self.answers))
        if self.position > len(self.answers):
            raise ValueError(
                f"position {self.position} is past the recorded answers "
                f"({len(self.answers)})"
            )

    @property
    def answer_count(self) -> int:
        return len(self.answers)

    def to_dict(self) -> dict[str, Any]:
        return {"position": self.position, "answers": list(self.answers)}


class ExamSession:
    """
    Mutable progress record for one candidate sitting one exam.

    The session does not hold the exam tree: answers are indexed by
    submission order and matched to questions by the caller (see
    core.scoring.grade_session).

    Example:
        >>> session = ExamSession()
        >>> session.answer_question("4")
        >>> session.answer_question("10")
        >>> checkpoint = session.save()
        >>> session.answer_question("X")
        >>> session.restore(checkpoint)
        >>> session.get_current_index()
        2
        >>> session.get_answer(2)
        '(no answer)'
    """

    def __init__(self) -> None:
        self._position = 0
        self._answers: List[str] = []

    # ─────────────────────────────────────────────────────────────────────────
    # Progress
    # ─────────────────────────────────────────────────────────────────────────

    def answer_question(self, answer: str) -> None:
        """
        Record an answer at the current position and advance.

        At or past the end of the recorded answers the answer is appended;
        at an earlier position (after a restore to a shorter snapshot) it
        overwrites the entry there without shifting later answers.

        Args:
            answer: Answer text as submitted
        """
        if self._position >= len(self._answers):
            self._answers.append(answer)
        else:
            self._answers[self._position] = answer
        self._position += 1

    def get_answer(self, index: int) -> str:
        """
        Get the answer recorded at an index.

        Args:
            index: Submission index (0-based)

        Returns:
            The recorded answer, or NO_ANSWER if index is out of range
        """
        if 0 <= index < len(self._answers):
            return self._answers[index]
        return NO_ANSWER

    def get_current_index(self) -> int:
        return self._position

    @property
    def answers(self) -> Tuple[str, ...]:
        """Copy of the recorded answers."""
        return tuple(self._answers)

    # ─────────────────────────────────────────────────────────────────────────
    # Checkpointing
    # ─────────────────────────────────────────────────────────────────────────

    def save(self) -> SessionSnapshot:
        """Capture the current progress as an independent snapshot."""
        snapshot = SessionSnapshot(self._position, tuple(self._answers))
        logger.debug(
            f"Saved session snapshot at position {snapshot.position} "
            f"({snapshot.answer_count} answers)"
        )
        return snapshot

    def restore(self, snapshot: SessionSnapshot) -> None:
        """
        Replace progress with a snapshot's contents.

        Both fields are replaced together; the answer list is a fresh copy
        so later answers never reach the snapshot.

        Args:
            snapshot: Snapshot produced by save()
        """
        self._position = snapshot.position
        self._answers = list(snapshot.answers)
        logger.debug(
            f"Restored session to position {snapshot.position} "
            f"({snapshot.answer_count} answers)"
        )

    def __repr__(self) -> str:
        return f"ExamSession(position={self._position}, answers={len(self._answers)})"
