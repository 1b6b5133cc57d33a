import logging
import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import exam_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from exam_toolkit.builder import ExamBuilder
from exam_toolkit.core.models import ExamSession
from exam_toolkit.timer import reset_exam_timer


# Common test fixtures
@pytest.fixture
def sample_exam():
    """Exam built the way the demo builds it (flat under the root)."""
    return (
        ExamBuilder("Final Exam")
        .add_section("Logic")
        .add_question("What is 2+2?", "4")
        .add_question("What is 3*3?", "9")
        .add_section("Object Orientation")
        .add_question("What is polymorphism?", "Many forms")
        .build()
    )


@pytest.fixture
def answered_session():
    """Session with answers "4" and "10" recorded."""
    session = ExamSession()
    session.answer_question("4")
    session.answer_question("10")
    return session


@pytest.fixture(autouse=True)
def fresh_exam_timer():
    """Each test starts without a process-wide timer."""
    reset_exam_timer()
    yield
    reset_exam_timer()


@pytest.fixture(autouse=True)
def restore_package_log_level():
    """The CLI sets the package log level; put it back after each test."""
    package_logger = logging.getLogger("exam_toolkit")
    original = package_logger.level
    yield
    package_logger.setLevel(original)
