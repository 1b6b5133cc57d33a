"""
Module: output

Purpose:
    Printable output for exam trees.

Key Functions:
    - render_exam_to_pdf(): Write the exam's display lines to a PDF

Dependencies:
    - reportlab: PDF generation
"""

from .renderer import render_exam_to_pdf

__all__ = ["render_exam_to_pdf"]
