"""Decision table parsing service."""

from __future__ import annotations

import logging
from pathlib import Path

from .csv_reader import read_csv_rows
from .format_detection import resolve_format
from .ingestion_errors import TableReadError
from .json_reader import (
    canonical_test_cases,
    is_canonical_document,
    load_json_document,
    rule_test_cases,
)
from .markdown_reader import scan_markdown
from .row_classification import derive_feature_name, row_to_test_case
from .table_models import DecisionTable, TableFormat, TableMetadata, TestCase

LOGGER = logging.getLogger(__name__)


def parse_decision_table(
    table_path: Path | str, table_format: TableFormat | str | None = None
) -> DecisionTable:
    """Read a CSV, JSON or Markdown decision table into the canonical model.

    Args:
      table_path: File to read.
      table_format: Explicit format; detected from the file extension when omitted.

    Raises:
      UnsupportedFormatError: If the format cannot be determined.
      InvalidFormatError: If a JSON document has no recognized shape.
      TableReadError: If the file cannot be read as UTF-8 text.
    """
    resolved_format = resolve_format(table_path, table_format)
    source = str(table_path)
    text = _read_text(Path(table_path))
    LOGGER.debug("parsing %s as %s", source, resolved_format.value)

    if resolved_format is TableFormat.CSV:
        table = _assemble_csv(text, source)
    elif resolved_format is TableFormat.JSON:
        table = _assemble_json(text, source)
    else:
        table = _assemble_markdown(text, source)
    LOGGER.debug("parsed %d test cases from %s", len(table.test_cases), source)
    return table


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise TableReadError(f"Decision table file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise TableReadError(f"Failed to read decision table {path}: {exc}") from exc


def _assemble_csv(text: str, source: str) -> DecisionTable:
    rows = read_csv_rows(text)
    test_cases = [row_to_test_case(row, position) for position, row in enumerate(rows, start=1)]
    return DecisionTable(
        feature=derive_feature_name(source),
        test_cases=tuple(test_cases),
        metadata=TableMetadata(source=source, format=TableFormat.CSV, row_count=len(rows)),
    )


def _assemble_json(text: str, source: str) -> DecisionTable:
    document = load_json_document(text, source)
    if is_canonical_document(document):
        test_cases = canonical_test_cases(document["test_cases"], source)
    else:
        test_cases = rule_test_cases(document["rules"], source)
    description = document.get("description")
    return DecisionTable(
        feature=str(document["feature"]),
        description=None if description is None else str(description),
        test_cases=tuple(test_cases),
        metadata=TableMetadata(source=source, format=TableFormat.JSON),
    )


def _assemble_markdown(text: str, source: str) -> DecisionTable:
    """Build one table from every pipe table in the document.

    Auto-assigned ids continue across tables (TC001, TC002, ... over the whole
    document) rather than restarting at TC001 for each table, so ids stay unique.
    """
    document = scan_markdown(text)
    test_cases: list[TestCase] = []
    for table in document.tables:
        for row in table.row_mappings():
            test_cases.append(row_to_test_case(row, len(test_cases) + 1))
    return DecisionTable(
        feature=document.title or derive_feature_name(source),
        description=document.description,
        test_cases=tuple(test_cases),
        metadata=TableMetadata(source=source, format=TableFormat.MARKDOWN),
    )
