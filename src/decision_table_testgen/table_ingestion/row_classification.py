"""Row classification and condition value coercion."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from pathlib import Path

from .table_models import (
    UNDEFINED,
    ConditionValue,
    Priority,
    TestCase,
    auto_test_id,
    display_value,
)

ID_COLUMNS: tuple[str, ...] = ("id", "test id", "test_id")
NAME_COLUMNS: tuple[str, ...] = ("name", "test name", "test_name")
DESCRIPTION_COLUMNS: tuple[str, ...] = ("description",)
ACTION_COLUMNS: tuple[str, ...] = ("action", "actions")
EXPECTED_COLUMNS: tuple[str, ...] = ("expected result", "expected_result", "expected")
PRIORITY_COLUMNS: tuple[str, ...] = ("priority",)
TAG_COLUMNS: tuple[str, ...] = ("tags",)

STRUCTURAL_COLUMNS = frozenset(
    ID_COLUMNS
    + NAME_COLUMNS
    + DESCRIPTION_COLUMNS
    + ACTION_COLUMNS
    + EXPECTED_COLUMNS
    + PRIORITY_COLUMNS
    + TAG_COLUMNS
)

_KEYWORD_VALUES: dict[str, ConditionValue] = {
    "true": True,
    "false": False,
    "null": None,
    "undefined": UNDEFINED,
}
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_DECISION_TABLE_SUFFIX = re.compile(r"-decision-table$")


def row_to_test_case(row: Mapping[str, object], position: int) -> TestCase:
    """Split one raw row into structural fields and condition entries.

    Args:
      row: Column header to raw cell text. Headers are matched case-insensitively.
      position: 1-based row position used when the row carries no id.
    """
    structural: dict[str, str] = {}
    conditions: dict[str, ConditionValue] = {}
    for raw_key, raw_value in row.items():
        key = str(raw_key).strip()
        value = _cell_text(raw_value)
        normalized = key.lower()
        if normalized in STRUCTURAL_COLUMNS:
            if not structural.get(normalized):
                structural[normalized] = value.strip()
            continue
        if value.strip():
            conditions[key] = coerce_condition_value(value)

    expected_results = split_multi_value(_first_present(structural, EXPECTED_COLUMNS))
    name = _first_present(structural, NAME_COLUMNS) or synthesize_test_name(
        conditions, expected_results
    )
    return TestCase(
        id=_first_present(structural, ID_COLUMNS) or auto_test_id(position),
        name=name,
        description=_first_present(structural, DESCRIPTION_COLUMNS) or None,
        conditions=conditions,
        actions=split_multi_value(_first_present(structural, ACTION_COLUMNS)),
        expected_results=expected_results,
        priority=parse_priority(_first_present(structural, PRIORITY_COLUMNS)),
        tags=split_multi_value(_first_present(structural, TAG_COLUMNS)),
    )


def coerce_condition_value(text: str) -> ConditionValue:
    """Infer the scalar type of a condition cell."""
    if text in _KEYWORD_VALUES:
        return _KEYWORD_VALUES[text]
    stripped = text.strip()
    if _INTEGER_PATTERN.fullmatch(stripped):
        return int(stripped)
    if _DECIMAL_PATTERN.fullmatch(stripped):
        return float(stripped)
    return text


def split_multi_value(text: str) -> tuple[str, ...]:
    """Split a comma separated cell, dropping empty fragments."""
    if not text:
        return ()
    return tuple(filter(None, (item.strip() for item in text.split(","))))


def parse_priority(text: str) -> Priority | str:
    """Map a priority cell to a known priority, passing unknown labels through."""
    lowered = text.strip().lower()
    if not lowered:
        return Priority.MEDIUM
    try:
        return Priority(lowered)
    except ValueError:
        return lowered


def synthesize_test_name(
    conditions: Mapping[str, ConditionValue], expected_results: Sequence[str]
) -> str:
    """Build a readable name from the first two conditions and the first expectation."""
    summary = ", ".join(
        f"{key}: {display_value(value)}" for key, value in list(conditions.items())[:2]
    )
    if expected_results:
        return f"{summary} → {expected_results[0]}"
    return summary


def derive_feature_name(path: Path | str) -> str:
    """Turn ``user_login-decision-table.csv`` into ``User Login``."""
    stem = Path(path).stem
    stem = _DECISION_TABLE_SUFFIX.sub("", stem)
    words = stem.replace("_", " ").replace("-", " ")
    return re.sub(r"\b\w", lambda match: match.group(0).upper(), words)


def _first_present(structural: Mapping[str, str], columns: Sequence[str]) -> str:
    for column in columns:
        value = structural.get(column, "")
        if value:
            return value
    return ""


def _cell_text(value: object) -> str:
    if value is None:
        return ""
    return str(value)
