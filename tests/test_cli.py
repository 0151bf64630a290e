import json

from typer.testing import CliRunner

from call_report.cli import app
from call_report.session import ReportSession

runner = CliRunner()


def test_weeks_lists_labels():
    result = runner.invoke(app, ["weeks"])

    assert result.exit_code == 0
    assert "04/07-04/11" in result.output
    assert "04/21-04/25" in result.output


def test_summary_prints_recommendation():
    result = runner.invoke(app, ["summary"])

    assert result.exit_code == 0
    assert "Required Agents" in result.output
    assert "3252" in result.output


def test_summary_unknown_week_fails():
    result = runner.invoke(app, ["summary", "--week", "nope"])

    assert result.exit_code == 1


def test_summary_with_import(tmp_path):
    path = tmp_path / "weeks.csv"
    path.write_text(
        "Week,Inbound,Answered,Abandoned,Missed,Avg Handle Time\n"
        "04/28-05/02,1000,650,150,180,4.00\n"
    )

    result = runner.invoke(app, ["summary", "--import", str(path), "--week", "04/28-05/02"])

    assert result.exit_code == 0
    assert "1000" in result.output


def test_report_writes_files(tmp_path):
    result = runner.invoke(app, ["report", "--output-dir", str(tmp_path)])

    assert result.exit_code == 0
    assert (tmp_path / "summary_report.md").exists()
    assert (tmp_path / "summary_report.pdf").exists()
    summary = json.loads((tmp_path / "summary_report.json").read_text())
    assert summary["metrics"]["required_agents"] == 3


def test_export_uses_output_dir_envvar(tmp_path):
    result = runner.invoke(
        app, ["export", "--week", "04/07-04/11"], env={"CALL_REPORT_OUTPUT_DIR": str(tmp_path)}
    )

    assert result.exit_code == 0
    metrics = json.loads((tmp_path / "metrics.json").read_text())
    assert metrics["totals"]["inbound"] == 1148
    assert (tmp_path / "weekly_performance.csv").exists()


def test_summary_with_corrupt_workbook_keeps_seed_weeks(tmp_path):
    path = tmp_path / "weeks.xlsx"
    path.write_bytes(b"PK\x03\x04" + b"\x00" * 64)

    result = runner.invoke(app, ["summary", "--import", str(path)])

    assert result.exit_code == 0
    assert "3252" in result.output


def test_unexpected_import_failure_exits_with_error(tmp_path, monkeypatch):
    def _fail(self, path, *, replace=False):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(ReportSession, "import_file", _fail)

    result = runner.invoke(app, ["summary", "--import", str(tmp_path / "weeks.csv")])

    assert result.exit_code == 1
