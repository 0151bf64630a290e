"""Coordinate writing the report in every output format."""

import json
from pathlib import Path

from loguru import logger

from ..constants import JSON_INDENT
from ..presentation import ReportView
from .markdown import render_markdown
from .pdf import generate_pdf_report


class ReportGenerator:
    """Write a report view as Markdown, a JSON summary and a PDF."""

    def __init__(self, view: ReportView):
        """Initialize report generator.

        Args:
            view: Report view for the current selection.
        """
        self.view = view

    def generate_report(self, output_path: Path) -> list[Path]:
        """Generate the report files.

        The Markdown report is written to ``output_path``; the JSON summary and
        the PDF share its stem.

        Args:
            output_path: Path where the Markdown report should be saved.

        Returns:
            list[Path]: The files written.
        """
        logger.info("Generating call center report...")
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with output_path.open("w") as f:
            f.write(render_markdown(self.view))
        logger.success(f"Report saved to {output_path}")

        json_path = output_path.with_suffix(".json")
        with json_path.open("w") as f:
            json.dump(self.view.to_dict(), f, indent=JSON_INDENT, default=str)
        logger.success(f"Summary JSON saved to {json_path}")

        pdf_path = output_path.with_suffix(".pdf")
        generate_pdf_report(self.view, pdf_path)

        return [output_path, json_path, pdf_path]
