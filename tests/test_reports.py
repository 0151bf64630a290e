from call_report.presentation import build_report_view
from call_report.reports import ReportGenerator, render_markdown


def test_markdown_contains_every_section(store):
    text = render_markdown(build_report_view(store))

    for heading in [
        "# Call Center Performance Analysis",
        "## Executive Summary",
        "## Key Metrics",
        "## Call Volume Breakdown",
        "## Call Disposition Summary",
        "## Weekly Trends",
        "## Detailed Weekly Performance",
        "## Strategic Action Plan",
        "## Summary of Key Insights",
    ]:
        assert heading in text

    assert "| Required Agents | 3 |" in text
    assert "| 04/21-04/25 | 1039 | 604 | 212 | 223 | 3.76 min |" in text
    assert "**Selection:** All weeks (3 week(s))" in text


def test_markdown_for_single_week(store):
    text = render_markdown(build_report_view(store, "04/14-04/18"))

    assert "**Selection:** 04/14-04/18 (1 week(s))" in text
    assert "| Avg Handle Time | 4.23 min |" in text
    # trend table still lists every week
    assert "| 04/07-04/11 | 703 | 187 | 256 |" in text


def test_generate_report_writes_all_formats(store, tmp_path):
    output = tmp_path / "reports" / "summary_report.md"

    written = ReportGenerator(build_report_view(store)).generate_report(output)

    assert written == [output, output.with_suffix(".json"), output.with_suffix(".pdf")]
    assert all(path.exists() for path in written)
    assert output.with_suffix(".pdf").read_bytes().startswith(b"%PDF")


def test_generate_report_for_empty_store(empty_store, tmp_path):
    output = tmp_path / "summary_report.md"

    ReportGenerator(build_report_view(empty_store)).generate_report(output)

    assert "0 full-time dedicated operators" in output.read_text()
    assert output.with_suffix(".pdf").exists()
