"""
Module: output.renderer

Purpose:
    Render an exam tree to a printable PDF using ReportLab. The PDF holds
    exactly the lines ExamComponent.display() prints, one per row, with
    page breaks when a page fills up.

Key Functions:
    - render_exam_to_pdf(): Main rendering function

Dependencies:
    - reportlab: PDF generation
    - core.models: ExamComponent

Used By:
    - cli: --pdf option
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from exam_toolkit.core.models import ExamComponent

logger = logging.getLogger(__name__)

# Constants
A4_WIDTH, A4_HEIGHT = A4
MARGIN = 50
LINE_HEIGHT = 18
TITLE_FONT = ("Helvetica-Bold", 14)
BODY_FONT = ("Helvetica", 11)
TEXT_WIDTH = A4_WIDTH - 2 * MARGIN


def _wrap_line(line: str, max_width: float = TEXT_WIDTH) -> List[str]:
    """
    Split a display line into rows that fit max_width.

    Continuation rows repeat the line's indentation so wrapped question
    text stays at its depth.
    """
    body = line.lstrip(" ")
    indent = line[: len(line) - len(body)]
    available = max_width - stringWidth(indent, *BODY_FONT)
    rows = simpleSplit(body, BODY_FONT[0], BODY_FONT[1], available)
    return [indent + row for row in rows] or [line]


def _paginate(lines: List[str], rows_per_page: int) -> List[List[str]]:
    """Split lines into page-sized chunks (at least one, possibly empty, page)."""
    if not lines:
        return [[]]
    return [lines[i:i + rows_per_page] for i in range(0, len(lines), rows_per_page)]


def render_exam_to_pdf(
    exam: ExamComponent,
    output_path: Path,
    *,
    title: Optional[str] = None,
) -> int:
    """
    Render an exam tree to a PDF file.

    Lines wider than the page are wrapped onto extra rows.

    Args:
        exam: Root of the exam tree
        output_path: Path to write PDF (parent directories are created)
        title: Optional heading drawn at the top of every page

    Returns:
        Number of pages written

    Raises:
        OSError: If the PDF cannot be written

    Example:
        >>> render_exam_to_pdf(exam, Path("output/exam.pdf"), title="Final Exam")
        1
    """
    lines = list(exam.iter_lines())
    rows = [row for line in lines for row in _wrap_line(line)]
    if exam.question_count == 0:
        logger.warning("Exam has no questions, rendering headers only")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    top = A4_HEIGHT - MARGIN
    if title:
        top -= LINE_HEIGHT * 2
    rows_per_page = max(1, int((top - MARGIN) // LINE_HEIGHT))
    pages = _paginate(rows, rows_per_page)

    c = canvas.Canvas(str(output_path), pagesize=A4)
    for page_number, page_lines in enumerate(pages, start=1):
        if title:
            c.setFont(*TITLE_FONT)
            c.drawString(MARGIN, A4_HEIGHT - MARGIN, title)
        c.setFont(*BODY_FONT)
        y = top
        for row in page_lines:
            # Leading spaces carry the depth; drawString keeps them
            c.drawString(MARGIN, y, row)
            y -= LINE_HEIGHT
        c.drawRightString(A4_WIDTH - MARGIN, MARGIN / 2, f"Page {page_number} of {len(pages)}")
        c.showPage()
    c.save()

    logger.info(f"Rendered {len(lines)} lines on {len(pages)} pages to {output_path}")
    return len(pages)
