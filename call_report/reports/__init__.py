"""Report generation package.

- markdown.py: Markdown report rendering
- charts.py: reportlab chart drawings
- pdf.py: printable PDF report
- generator.py: writes every format for one report view
"""

from .generator import ReportGenerator
from .markdown import render_markdown
from .pdf import generate_pdf_report

__all__ = [
    "ReportGenerator",
    "generate_pdf_report",
    "render_markdown",
]
