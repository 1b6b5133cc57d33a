"""
Exam Toolkit Core Package

Shared data models for exam content and candidate progress.

**DESIGN NOTES:**

1. **Leaves Are Immutable**
   - `Question` is a frozen dataclass; only `Section` accepts children
   - Container operations on a `Question` raise `UnsupportedOperation`

2. **Snapshots Never Alias Sessions**
   - `ExamSession.save()` copies answers into a tuple
   - `ExamSession.restore()` copies them back into a fresh list

3. **Scores Are Calculated, Never Stored**
   - `grade_session()` walks the tree on demand
"""

from .models import (
    EXACT_MATCH,
    NO_ANSWER,
    ComponentIterator,
    ComponentKind,
    ExactMatchGrader,
    ExamComponent,
    ExamSession,
    GradingStrategy,
    Question,
    Section,
    SessionSnapshot,
    UnsupportedOperation,
)
from .scoring import SessionResult, grade_session

__all__ = [
    "EXACT_MATCH",
    "NO_ANSWER",
    "ComponentIterator",
    "ComponentKind",
    "ExactMatchGrader",
    "ExamComponent",
    "ExamSession",
    "GradingStrategy",
    "Question",
    "Section",
    "SessionSnapshot",
    "UnsupportedOperation",
    "SessionResult",
    "grade_session",
]
