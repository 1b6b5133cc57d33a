"""
Core Models Package

The exam tree, graders and session state.

| Type | Role |
|------|------|
| `Question` | Immutable leaf: text, key, grader |
| `Section` | Ordered composite of components |
| `GradingStrategy` | Pluggable answer comparison |
| `ExamSession` | Mutable progress: position + answers |
| `SessionSnapshot` | Frozen copy of session progress |
"""

from .grading import GradingStrategy, ExactMatchGrader, EXACT_MATCH
from .components import (
    ComponentIterator,
    ComponentKind,
    ExamComponent,
    Question,
    Section,
    UnsupportedOperation,
)
from .session import ExamSession, SessionSnapshot, NO_ANSWER

__all__ = [
    "GradingStrategy",
    "ExactMatchGrader",
    "EXACT_MATCH",
    "ComponentIterator",
    "ComponentKind",
    "ExamComponent",
    "Question",
    "Section",
    "UnsupportedOperation",
    "ExamSession",
    "SessionSnapshot",
    "NO_ANSWER",
]
