"""Generation report workbook writer service."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from decision_table_testgen.code_generation.generation_models import (
    TestCodeGenerationRequest,
    TestCodeGenerationResult,
)

from .report_models import IssueSeverity, ReportMetadata

FILES_SHEET_NAME = "Files"
SUMMARY_SHEET_NAME = "Summary"
ISSUES_SHEET_NAME = "Issues"

_FILES_COLUMNS: tuple[str, ...] = ("Path", "Framework", "Tests")
_ISSUES_COLUMNS: tuple[str, ...] = ("Severity", "Message")


def write_generation_report(
    output_path: Path | str,
    request: TestCodeGenerationRequest,
    result: TestCodeGenerationResult,
    metadata: ReportMetadata,
) -> Path:
    """Write a workbook listing generated files, run summary and issues."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    sheet.title = FILES_SHEET_NAME

    _write_header(sheet, _FILES_COLUMNS)
    for row, generated in enumerate(result.files_generated, start=2):
        sheet.cell(row=row, column=1, value=str(generated.path))
        sheet.cell(row=row, column=2, value=generated.framework.value)
        sheet.cell(row=row, column=3, value=generated.test_count)

    _write_summary_sheet(workbook, request, result, metadata)
    _write_issues_sheet(workbook, result)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_header(sheet, columns: tuple[str, ...]) -> None:
    for column_index, name in enumerate(columns, start=1):
        cell = sheet.cell(row=1, column=column_index, value=name)
        cell.style = "Headline 1"
        sheet.column_dimensions[get_column_letter(column_index)].width = max(12, len(name) + 6)
    sheet.freeze_panes = "A2"


def _write_summary_sheet(
    workbook: Workbook,
    request: TestCodeGenerationRequest,
    result: TestCodeGenerationResult,
    metadata: ReportMetadata,
) -> None:
    sheet = workbook.create_sheet(SUMMARY_SHEET_NAME)
    entries = (
        ("generated_at", metadata.generated_at.isoformat()),
        ("table_path", metadata.table_path or ""),
        ("steps_path", metadata.steps_path or ""),
        ("output_path", str(request.output_path)),
        ("framework", request.framework.value),
        ("language", request.language.value),
        ("style", request.style.value),
        ("total_tests", result.total_tests),
        ("rendered_tests", result.rendered_tests),
        ("files", len(result.files_generated)),
        ("errors", len(result.errors)),
        ("warnings", len(result.warnings)),
        ("success", result.success),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)


def _write_issues_sheet(workbook: Workbook, result: TestCodeGenerationResult) -> None:
    sheet = workbook.create_sheet(ISSUES_SHEET_NAME)
    _write_header(sheet, _ISSUES_COLUMNS)
    issues = [(IssueSeverity.ERROR, message) for message in result.errors]
    issues.extend((IssueSeverity.WARNING, message) for message in result.warnings)
    for row, (severity, message) in enumerate(issues, start=2):
        sheet.cell(row=row, column=1, value=severity.value)
        sheet.cell(row=row, column=2, value=message)
