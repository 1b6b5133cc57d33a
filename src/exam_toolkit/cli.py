"""
Module: cli

Purpose:
    Command-line demo of the exam toolkit. Builds a sample exam, displays
    it, walks its top-level components, drives a session through two
    answers, checkpoints it, simulates a crash, restores the checkpoint and
    reports what was recovered.

Key Functions:
    - main(): Entry point, returns a process exit code
    - build_sample_exam(): The exam used by the demo
    - configure_logging(): Log level from ExamConfig.verbose

Dependencies:
    - argparse (std)
    - json (std)
    - logging (std)

Usage:
    exam-toolkit [--title TITLE] [--duration SECONDS] [--pdf PATH] [--json] [-v]
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from exam_toolkit.builder import ExamBuilder
from exam_toolkit.config import DEFAULT_TITLE, ExamConfig
from exam_toolkit.core import ExamSession, Section, UnsupportedOperation, grade_session
from exam_toolkit.output import render_exam_to_pdf
from exam_toolkit.timer import DEFAULT_DURATION_SECONDS, get_exam_timer

logger = logging.getLogger(__name__)


def build_sample_exam(title: str = DEFAULT_TITLE) -> Section:
    """Build the demo exam: two sections and three multiple-choice questions."""
    return (
        ExamBuilder(title)
        .add_section("Logic")
        .add_question("What is 2+2?", "4")
        .add_question("What is 3*3?", "9")
        .add_section("Object Orientation")
        .add_question("What is polymorphism?", "Many forms")
        .build()
    )


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="exam-toolkit",
        description="Build a sample exam and checkpoint/restore a session over it",
    )
    parser.add_argument("--title", default=DEFAULT_TITLE, help="Exam title")
    parser.add_argument(
        "--duration", type=int, default=DEFAULT_DURATION_SECONDS,
        help="Exam duration in seconds (default: %(default)s)",
    )
    parser.add_argument("--pdf", type=Path, help="Also render the exam to this PDF file")
    parser.add_argument("--json", action="store_true", help="Print exam tree and checkpoint as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def configure_logging(config: ExamConfig) -> None:
    """Send package logs to stderr, at debug level when config.verbose is set."""
    level = logging.DEBUG if config.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(message)s")
    logging.getLogger(__package__).setLevel(level)


def run(config: ExamConfig) -> int:
    """Run the demo sequence for a validated configuration."""
    timer = get_exam_timer(config.duration_seconds)
    exam = build_sample_exam(config.title)

    exam.display()

    print("\nWalking top-level components:")
    it = exam.create_iterator()
    while it.has_next():
        it.next().display()

    session = ExamSession()
    session.answer_question("4")
    session.answer_question("10")  # Deliberately wrong

    print("\n[Saving checkpoint...]")
    checkpoint = session.save()

    session.answer_question("X")
    print("[System crashed... restoring checkpoint...]")
    session.restore(checkpoint)
    print(f"Restored to index: {session.get_current_index()}")

    print("Recorded answers:")
    for index in range(session.get_current_index()):
        print(session.get_answer(index))

    result = grade_session(exam, session)
    print(f"\nScore: {result.correct}/{result.total} ({result.score_percent:.1f}%)")
    print(f"Time remaining: {timer.get_remaining_seconds()}s")

    if config.emit_json:
        payload = {"exam": exam.to_dict(), "checkpoint": checkpoint.to_dict()}
        print(json.dumps(payload, indent=2))

    if config.pdf_path is not None:
        pages = render_exam_to_pdf(exam, config.pdf_path, title=config.title)
        print(f"Wrote {pages} page(s) to {config.pdf_path}")

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)

    try:
        config = ExamConfig(
            title=args.title,
            duration_seconds=args.duration,
            pdf_path=args.pdf,
            emit_json=args.json,
            verbose=args.verbose,
        )
        configure_logging(config)
        return run(config)
    except (UnsupportedOperation, ValueError, OSError) as e:
        logger.error(f"Exam run failed: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
