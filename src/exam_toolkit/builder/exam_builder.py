"""
Module: builder.exam_builder

Purpose:
    Assemble an exam tree from a flat sequence of chained calls.

Key Classes:
    - ExamBuilder: add_section(), add_question(), add_true_false(), build()

Dependencies:
    - logging (std)
    - core.models: Section, ExamComponent
    - builder.factory: QuestionFactory

Used By:
    - cli: Demo driver

Note:
    The scope questions and sections are added to never changes. A section
    created by add_section() is NOT entered: later questions and sections
    land beside it under the root, not inside it. Nested trees must be
    built with Section.add() directly.
"""

from __future__ import annotations

import logging

from exam_toolkit.core.models import ExamComponent, Section

from .factory import QuestionFactory

logger = logging.getLogger(__name__)


class ExamBuilder:
    """
    Incremental exam builder with a chainable interface.

    Attributes:
        root: Section holding everything added
        current_scope: Section that receives new children (always root)

    Example:
        >>> exam = (
        ...     ExamBuilder("Final Exam")
        ...     .add_section("Logic")
        ...     .add_question("What is 2+2?", "4")
        ...     .build()
        ... )
        >>> [type(c).__name__ for c in exam.children]
        ['Section', 'Question']
    """

    def __init__(self, title: str):
        self.root = Section(title)
        self.current_scope: ExamComponent = self.root

    def add_section(self, name: str) -> ExamBuilder:
        """Append a new empty section to the current scope."""
        self.current_scope.add(Section(name))
        logger.debug(f"Added section {name!r} to {self.root.title!r}")
        return self

    def add_question(self, text: str, key: str) -> ExamBuilder:
        """Append a multiple-choice question to the current scope."""
        self.current_scope.add(QuestionFactory.create_multiple_choice(text, key))
        return self

    def add_true_false(self, text: str, key: str) -> ExamBuilder:
        """Append a true/false question to the current scope."""
        self.current_scope.add(QuestionFactory.create_true_false(text, key))
        return self

    def build(self) -> Section:
        """
        Return the accumulated root section.

        Repeated calls return the same object; builder state is not reset.
        """
        return self.root
