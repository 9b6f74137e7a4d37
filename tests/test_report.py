"""Tests for ValidationReport and its formatters."""

from __future__ import annotations

import json

from guidebook.pipeline.report import StageResult, ValidationReport, format_json, format_table


def _report(*results: StageResult) -> ValidationReport:
    report = ValidationReport(mode="check")
    for r in results:
        report.add(r)
    return report


def test_empty_report_passes():
    assert _report().exit_code == 0


def test_exit_code_ignores_advisory_failures():
    report = _report(
        StageResult("format-check", "prettier", True),
        StageResult("prose-lint", "vale", False, "warn\n", 1, advisory=True),
    )
    assert report.exit_code == 0
    assert report.passed
    assert len(report.failures) == 1


def test_failure_with_zero_returncode_still_fails():
    report = _report(StageResult("structural-lint", "markdownlint", False, "", 0))
    assert report.exit_code == 1


def test_table_lists_each_stage():
    report = _report(
        StageResult("format-check", "prettier", True),
        StageResult("structural-lint", "markdownlint", False, "MD001\n", 1),
        StageResult("prose-lint", "vale", False, "", 1, advisory=True),
    )
    table = format_table(report)

    assert "Validation Report (check)" in table
    lines = table.splitlines()
    assert any(line.startswith("format-check") and " ok " in f"{line} " for line in lines)
    assert any(line.startswith("structural-lint") and "FAIL" in line for line in lines)
    assert any(line.startswith("prose-lint") and "warn" in line for line in lines)
    assert lines[-1] == "Result: failed (exit 1)"


def test_json_round_trips_stage_fields():
    report = _report(StageResult("format-check", "prettier", False, "[warn] a.md\n", 2))
    payload = json.loads(format_json(report))

    assert payload["mode"] == "check"
    assert payload["exit_code"] == 2
    assert payload["stages"][0] == {
        "stage": "format-check",
        "tool_name": "prettier",
        "passed": False,
        "detail": "[warn] a.md\n",
        "returncode": 2,
        "advisory": False,
    }
