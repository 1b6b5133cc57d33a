"""
Module: components

Purpose:
    Provides the exam content tree. An exam is a Section whose children are
    Questions (leaves) and further Sections (composites). Insertion order is
    traversal order everywhere: display, iteration and scoring all walk the
    tree depth-first, pre-order.

Key Classes:
    - ExamComponent: Common base of both node kinds
    - Question: Immutable leaf holding text, key and grader
    - Section: Ordered container of child components
    - ComponentIterator: Single-pass forward cursor over a Section's children
    - UnsupportedOperation: Raised when a leaf is asked to act as a container

Key Functions:
    - ExamComponent.display(depth, sink): Write indented lines to a sink
    - ExamComponent.iter_lines(depth): Same lines as a generator
    - ExamComponent.iter_all() / iter_questions(): Pre-order traversal
    - Section.add(component): Append a child
    - Section.create_iterator(): Fresh cursor over immediate children

Dependencies:
    - abc (std)
    - dataclasses (std)
    - enum (std)
    - .grading.GradingStrategy

Used By:
    - builder.exam_builder.ExamBuilder
    - builder.factory.QuestionFactory
    - core.scoring.grade_session
    - output.renderer.render_exam_to_pdf
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator, List, Sequence

from .grading import GradingStrategy

INDENT = "  "

Sink = Callable[[str], None]


class ComponentKind(str, Enum):
    """Variant tag for exam tree nodes."""
    QUESTION = "question"
    SECTION = "section"

    def __str__(self) -> str:
        return self.value


class UnsupportedOperation(Exception):
    """
    Raised when a structural operation is invoked on a leaf.

    Signals a usage error in the calling code. Never caught inside the
    package.

    Attributes:
        operation: Name of the rejected operation (e.g. "add")
        component: The leaf the operation was invoked on
    """

    def __init__(self, operation: str, component: "ExamComponent"):
        super().__init__(
            f"Cannot {operation} on a {component.kind}: leaves have no children"
        )
        self.operation = operation
        self.component = component


def _indent(depth: int) -> str:
    if depth < 0:
        raise ValueError(f"depth must be non-negative: {depth}")
    return INDENT * depth


class ExamComponent(ABC):
    """
    Base class of exam tree nodes.

    Operations meaningful for both variants (display, traversal) are
    defined here. Container operations default to raising
    UnsupportedOperation and are overridden by Section only.
    """

    # ─────────────────────────────────────────────────────────────────────────
    # Variant Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    @abstractmethod
    def kind(self) -> ComponentKind:
        """Which variant this node is."""

    @property
    def is_leaf(self) -> bool:
        return self.kind == ComponentKind.QUESTION

    # ─────────────────────────────────────────────────────────────────────────
    # Display
    # ─────────────────────────────────────────────────────────────────────────

    @abstractmethod
    def iter_lines(self, depth: int = 0) -> Iterator[str]:
        """
        Yield the display lines for this subtree.

        Args:
            depth: Indentation level of this node (two spaces per level)

        Yields:
            Formatted lines in pre-order

        Raises:
            ValueError: If depth is negative
        """

    def display(self, depth: int = 0, sink: Sink = print) -> None:
        """
        Write this subtree to a display sink.

        Args:
            depth: Indentation level of this node
            sink: Callable receiving one formatted line per call

        Example:
            >>> lines = []
            >>> exam.display(sink=lines.append)
        """
        for line in self.iter_lines(depth):
            sink(line)

    # ─────────────────────────────────────────────────────────────────────────
    # Traversal
    # ─────────────────────────────────────────────────────────────────────────

    def iter_all(self) -> Iterator[ExamComponent]:
        """Iterate over this node and all descendants (pre-order)."""
        yield self

    def iter_questions(self) -> Iterator[Question]:
        """Iterate over Question leaves in pre-order."""
        for component in self.iter_all():
            if isinstance(component, Question):
                yield component

    @property
    def question_count(self) -> int:
        """Count of Question leaves in this subtree."""
        return sum(1 for _ in self.iter_questions())

    # ─────────────────────────────────────────────────────────────────────────
    # Container Operations (Section only)
    # ─────────────────────────────────────────────────────────────────────────

    def add(self, component: ExamComponent) -> None:
        raise UnsupportedOperation("add", self)

    def create_iterator(self) -> ComponentIterator:
        raise UnsupportedOperation("create_iterator", self)

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view of this subtree."""


@dataclass(frozen=True)
class Question(ExamComponent):
    """
    Exam question (immutable leaf).

    Attributes:
        text: Question text as displayed
        key: Expected answer
        grader: Strategy deciding whether an answer matches the key

    Example:
        >>> q = Question("2+2?", "4", EXACT_MATCH)
        >>> q.check_answer("4")
        True
        >>> q.add(Section("x"))
        Traceback (most recent call last):
        ...
        UnsupportedOperation: Cannot add on a question: leaves have no children
    """

    text: str
    key: str
    grader: GradingStrategy

    @property
    def kind(self) -> ComponentKind:
        return ComponentKind.QUESTION

    def check_answer(self, candidate: str) -> bool:
        """Grade a candidate answer against this question's key."""
        return self.grader.grade(candidate, self.key)

    def iter_lines(self, depth: int = 0) -> Iterator[str]:
        yield f"{_indent(depth)}Question: {self.text}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": str(self.kind),
            "text": self.text,
            "key": self.key,
            "grader": getattr(self.grader, "name", type(self.grader).__name__),
        }

    def __repr__(self) -> str:
        return f"Question({self.text!r})"


@dataclass
class Section(ExamComponent):
    """
    Exam section (ordered composite).

    Children keep insertion order, which is also display and iteration
    order. Sections are mutated only while an exam is being built and are
    treated as read-only once handed to a session or renderer.

    Attributes:
        title: Section heading
        children: Child components in insertion order
    """

    title: str
    children: List[ExamComponent] = field(default_factory=list)

    @property
    def kind(self) -> ComponentKind:
        return ComponentKind.SECTION

    def add(self, component: ExamComponent) -> None:
        """Append a child to the end of this section."""
        self.children.append(component)

    def create_iterator(self) -> ComponentIterator:
        """
        Create a fresh forward cursor over the immediate children.

        Each call returns an independent cursor starting at the first child.
        The tree must not be mutated while a cursor over it is in use.
        """
        return ComponentIterator(self.children)

    def iter_lines(self, depth: int = 0) -> Iterator[str]:
        yield f"{_indent(depth)}--- SECTION: {self.title} ---"
        for child in self.children:
            yield from child.iter_lines(depth + 1)

    def iter_all(self) -> Iterator[ExamComponent]:
        yield self
        for child in self.children:
            yield from child.iter_all()

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": str(self.kind),
            "title": self.title,
            "children": [child.to_dict() for child in self.children],
        }

    def __repr__(self) -> str:
        return f"Section({self.title!r}, children={len(self.children)})"


class ComponentIterator:
    """
    Single-pass forward cursor over a sequence of components.

    Exposes explicit has_next()/next() and also the Python iterator
    protocol, so it can drive a for loop.

    Example:
        >>> it = exam.create_iterator()
        >>> while it.has_next():
        ...     it.next().display()
    """

    def __init__(self, components: Sequence[ExamComponent]):
        self._components = components
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._components)

    def next(self) -> ExamComponent:
        """
        Return the next component and advance.

        Raises:
            StopIteration: If the cursor is exhausted
        """
        if not self.has_next():
            raise StopIteration
        component = self._components[self._index]
        self._index += 1
        return component

    def __iter__(self) -> ComponentIterator:
        return self

    def __next__(self) -> ExamComponent:
        return self.next()
