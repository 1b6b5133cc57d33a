"""
Module: config

Purpose:
    Configuration dataclass for a demo exam run. Immutable configuration
    with validation on construction.

Key Classes:
    - ExamConfig: Settings collected by the CLI

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - cli: Demo driver
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from exam_toolkit.timer import DEFAULT_DURATION_SECONDS

DEFAULT_TITLE = "Final Exam"


@dataclass(frozen=True)
class ExamConfig:
    """
    Configuration for a demo exam run (immutable).

    Attributes:
        title: Title of the root section
        duration_seconds: Countdown length for the process-wide timer
        pdf_path: If set, also render the exam to this PDF file
        emit_json: Print the exam tree and restored snapshot as JSON
        verbose: Enable debug logging

    Example:
        >>> config = ExamConfig(title="Mock Exam", duration_seconds=1800)
    """

    title: str = DEFAULT_TITLE
    duration_seconds: int = DEFAULT_DURATION_SECONDS
    pdf_path: Optional[Path] = None
    emit_json: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.title or not self.title.strip():
            raise ValueError(f"title must not be empty: {self.title!r}")
        if self.duration_seconds <= 0:
            raise ValueError(f"duration_seconds must be positive: {self.duration_seconds}")
        if self.pdf_path is not None and self.pdf_path.suffix.lower() != ".pdf":
            raise ValueError(f"pdf_path must end in .pdf: {self.pdf_path}")
