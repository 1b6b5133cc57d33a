"""
Unit Tests for Exam Tree Components

Tests for Question, Section and ComponentIterator.
"""

import pytest

from exam_toolkit.core.models.components import (
    ComponentIterator,
    ComponentKind,
    Question,
    Section,
    UnsupportedOperation,
)
from exam_toolkit.core.models.grading import EXACT_MATCH


def _question(text: str = "What is 2+2?", key: str = "4") -> Question:
    return Question(text, key, EXACT_MATCH)


class TestQuestion:
    """Tests for the Question leaf."""

    def test_check_answer_when_key_then_true(self):
        """The stored key should always be accepted."""
        q = _question(key="Many forms")
        assert q.check_answer("Many forms") is True

    def test_check_answer_when_key_with_suffix_then_false(self):
        """Any extra character should be rejected."""
        q = _question(key="4")
        assert q.check_answer("4x") is False

    def test_check_answer_when_called_repeatedly_then_stable(self):
        """Grading should not mutate the question."""
        q = _question()
        assert [q.check_answer("4") for _ in range(3)] == [True, True, True]
        assert q.key == "4"

    def test_add_when_called_then_raises_unsupported_operation(self):
        """Leaves must never accept children."""
        q = _question()
        with pytest.raises(UnsupportedOperation, match="Cannot add") as exc_info:
            q.add(Section("Extra"))
        assert exc_info.value.operation == "add"
        assert exc_info.value.component is q

    def test_create_iterator_when_called_then_raises_unsupported_operation(self):
        """Leaves have no children to iterate."""
        with pytest.raises(UnsupportedOperation, match="create_iterator"):
            _question().create_iterator()

    def test_init_when_frozen_then_cannot_reassign(self):
        """Questions are immutable after construction."""
        q = _question()
        with pytest.raises(AttributeError):
            q.text = "changed"

    def test_kind_when_question_then_leaf(self):
        q = _question()
        assert q.kind == ComponentKind.QUESTION
        assert q.is_leaf is True

    def test_to_dict_when_question_then_includes_grader_name(self):
        d = _question().to_dict()
        assert d == {
            "kind": "question",
            "text": "What is 2+2?",
            "key": "4",
            "grader": "exact",
        }


class TestSection:
    """Tests for the Section composite."""

    # ─────────────────────────────────────────────────────────────────────────
    # Structure Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_add_when_multiple_children_then_keeps_insertion_order(self):
        """Children should appear in the order they were added."""
        section = Section("Root")
        first, second, third = _question("a"), Section("b"), _question("c")
        section.add(first)
        section.add(second)
        section.add(third)
        assert section.children == [first, second, third]

    def test_kind_when_section_then_not_leaf(self):
        section = Section("Root")
        assert section.kind == ComponentKind.SECTION
        assert section.is_leaf is False

    # ─────────────────────────────────────────────────────────────────────────
    # Display Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_display_when_nested_then_indents_two_spaces_per_level(self):
        """Headers come first and children are indented one level deeper."""
        inner = Section("Logic")
        inner.add(_question("What is 2+2?"))
        inner.add(_question("What is 3*3?"))
        root = Section("Final Exam")
        root.add(inner)
        root.add(Section("Empty"))

        lines = []
        root.display(sink=lines.append)

        assert lines == [
            "--- SECTION: Final Exam ---",
            "  --- SECTION: Logic ---",
            "    Question: What is 2+2?",
            "    Question: What is 3*3?",
            "  --- SECTION: Empty ---",
        ]

    def test_display_when_called_twice_then_same_output(self):
        """Display should not change the tree."""
        root = Section("Root")
        root.add(_question())
        first, second = [], []
        root.display(sink=first.append)
        root.display(sink=second.append)
        assert first == second

    def test_display_when_depth_given_then_starts_indented(self):
        lines = []
        _question().display(2, sink=lines.append)
        assert lines == ["    Question: What is 2+2?"]

    def test_iter_lines_when_negative_depth_then_raises_error(self):
        with pytest.raises(ValueError, match="non-negative"):
            list(Section("Root").iter_lines(-1))

    # ─────────────────────────────────────────────────────────────────────────
    # Traversal Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_iter_all_when_nested_then_pre_order(self):
        """Traversal should visit a node before its children."""
        q1, q2 = _question("1"), _question("2")
        inner = Section("Inner", [q1])
        root = Section("Root", [inner, q2])
        assert list(root.iter_all()) == [root, inner, q1, q2]

    def test_iter_questions_when_nested_then_leaves_only(self):
        q1, q2 = _question("1"), _question("2")
        root = Section("Root", [Section("Inner", [q1]), Section("Empty"), q2])
        assert list(root.iter_questions()) == [q1, q2]
        assert root.question_count == 2

    def test_to_dict_when_nested_then_recurses(self):
        root = Section("Root", [Section("Inner", [_question()])])
        d = root.to_dict()
        assert d["title"] == "Root"
        assert d["children"][0]["children"][0]["text"] == "What is 2+2?"


class TestComponentIterator:
    """Tests for the forward cursor over a section's children."""

    def test_next_when_children_then_front_to_back(self):
        q1, q2 = _question("1"), _question("2")
        it = Section("Root", [q1, q2]).create_iterator()
        seen = []
        while it.has_next():
            seen.append(it.next())
        assert seen == [q1, q2]

    def test_next_when_exhausted_then_raises_stop_iteration(self):
        """Advancing past the end is an error."""
        it = Section("Root", [_question()]).create_iterator()
        it.next()
        assert it.has_next() is False
        with pytest.raises(StopIteration):
            it.next()

    def test_create_iterator_when_called_twice_then_independent(self):
        """Each call should start a fresh pass."""
        section = Section("Root", [_question("1"), _question("2")])
        first = section.create_iterator()
        first.next()
        second = section.create_iterator()
        assert second.next() is section.children[0]
        assert first.next() is section.children[1]

    def test_create_iterator_when_nested_then_immediate_children_only(self):
        inner = Section("Inner", [_question()])
        it = Section("Root", [inner]).create_iterator()
        assert list(it) == [inner]

    def test_iter_when_used_in_for_loop_then_yields_all(self):
        it = ComponentIterator([_question("1"), _question("2")])
        assert [q.text for q in it] == ["1", "2"]

    def test_has_next_when_empty_section_then_false(self):
        assert Section("Empty").create_iterator().has_next() is False
