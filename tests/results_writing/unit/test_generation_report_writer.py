"""Generation report workbook writer tests."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from decision_table_testgen.code_generation import (
    GeneratedFile,
    TestCodeGenerationRequest,
    TestCodeGenerationResult,
    TestFramework,
)
from decision_table_testgen.results_writing import ReportMetadata, write_generation_report
from openpyxl import load_workbook


def _request(tmp_path: Path) -> TestCodeGenerationRequest:
    return TestCodeGenerationRequest(
        test_cases=(), steps=(), framework=TestFramework.BOTH, output_path=tmp_path / "out"
    )


def _metadata() -> ReportMetadata:
    return ReportMetadata(
        generated_at=datetime(2025, 1, 2, 3, 4, 5, tzinfo=UTC),
        table_path="/tables/login.csv",
        steps_path=None,
    )


def test_report_lists_files_summary_and_issues(tmp_path: Path) -> None:
    result = TestCodeGenerationResult(
        files_generated=(
            GeneratedFile(
                path=tmp_path / "out" / "login.spec.ts",
                content="",
                test_count=2,
                framework=TestFramework.PLAYWRIGHT,
            ),
            GeneratedFile(
                path=tmp_path / "out" / "api.spec.ts",
                content="",
                test_count=1,
                framework=TestFramework.API,
            ),
        ),
        total_tests=4,
        success=False,
        errors=("Failed to generate broken: disk full",),
        warnings=("No steps found for test case TC004; it was not generated.",),
    )
    report_path = tmp_path / "reports" / "generation.xlsx"

    written = write_generation_report(report_path, _request(tmp_path), result, _metadata())

    assert written == report_path.resolve()
    workbook = load_workbook(report_path)
    assert workbook.sheetnames == ["Files", "Summary", "Issues"]

    files = list(workbook["Files"].iter_rows(values_only=True))
    assert files[0] == ("Path", "Framework", "Tests")
    assert files[1] == (str(tmp_path / "out" / "login.spec.ts"), "playwright", 2)
    assert files[2][1:] == ("api", 1)

    summary = dict(workbook["Summary"].iter_rows(values_only=True))
    assert summary["generated_at"] == "2025-01-02T03:04:05+00:00"
    assert summary["table_path"] == "/tables/login.csv"
    assert summary["framework"] == "both"
    assert summary["total_tests"] == 4
    assert summary["rendered_tests"] == 3
    assert summary["files"] == 2
    assert summary["success"] is False

    issues = list(workbook["Issues"].iter_rows(values_only=True))
    assert issues[1:] == [
        ("ERROR", "Failed to generate broken: disk full"),
        ("WARNING", "No steps found for test case TC004; it was not generated."),
    ]


def test_report_for_clean_run_has_empty_issues_sheet(tmp_path: Path) -> None:
    result = TestCodeGenerationResult(files_generated=(), total_tests=0, success=True)

    write_generation_report(tmp_path / "report.xlsx", _request(tmp_path), result, _metadata())

    workbook = load_workbook(tmp_path / "report.xlsx")
    assert list(workbook["Issues"].iter_rows(values_only=True)) == [("Severity", "Message")]
    summary = dict(workbook["Summary"].iter_rows(values_only=True))
    assert summary["steps_path"] is None or summary["steps_path"] == ""
