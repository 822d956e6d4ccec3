"""JSON decision table reader."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from .ingestion_errors import InvalidFormatError
from .row_classification import parse_priority, synthesize_test_name
from .table_models import ConditionValue, Priority, TestCase, auto_test_id

_SHAPE_HINT = 'Expected "feature" and "test_cases" or "rules"'


def load_json_document(text: str, source: str) -> Mapping[str, Any]:
    """Decode ``text`` and ensure it is one of the accepted document shapes."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidFormatError(f"Invalid JSON format in {source}: {exc}. {_SHAPE_HINT}") from exc
    if not isinstance(document, Mapping) or not document.get("feature"):
        raise InvalidFormatError(f"Invalid JSON format in {source}. {_SHAPE_HINT}")
    if not _has_entries(document, "test_cases") and not _has_entries(document, "rules"):
        raise InvalidFormatError(f"Invalid JSON format in {source}. {_SHAPE_HINT}")
    return document


def is_canonical_document(document: Mapping[str, Any]) -> bool:
    """Return whether the document already carries canonical ``test_cases``."""
    return _has_entries(document, "test_cases")


def canonical_test_cases(entries: Sequence[Any], source: str) -> list[TestCase]:
    """Build test cases from an already canonical ``test_cases`` list."""
    test_cases = []
    for position, entry in enumerate(entries, start=1):
        mapping = _require_mapping(entry, "test_cases", position, source)
        test_cases.append(
            TestCase(
                id=_text(mapping.get("id")) or auto_test_id(position),
                name=_text(mapping.get("name")),
                description=_optional_text(mapping.get("description")),
                conditions=dict(_conditions(mapping.get("conditions"))),
                actions=_string_tuple(mapping.get("actions")),
                expected_results=_string_tuple(mapping.get("expected_results")),
                priority=_priority(mapping.get("priority")),
                tags=_string_tuple(mapping.get("tags")),
            )
        )
    return test_cases


def rule_test_cases(entries: Sequence[Any], source: str) -> list[TestCase]:
    """Build test cases from the simplified ``rules`` list."""
    test_cases = []
    for position, entry in enumerate(entries, start=1):
        rule = _require_mapping(entry, "rules", position, source)
        conditions = dict(_conditions(rule.get("conditions")))
        expected_results = _string_tuple(rule.get("expected"))
        test_cases.append(
            TestCase(
                id=_text(rule.get("id")) or auto_test_id(position),
                name=_text(rule.get("name")) or synthesize_test_name(conditions, expected_results),
                description=_optional_text(rule.get("description")),
                conditions=conditions,
                actions=_string_tuple(rule.get("actions")),
                expected_results=expected_results,
                priority=_priority(rule.get("priority")),
                tags=_string_tuple(rule.get("tags")),
            )
        )
    return test_cases


def _has_entries(document: Mapping[str, Any], key: str) -> bool:
    value = document.get(key)
    return isinstance(value, list)


def _require_mapping(entry: Any, section: str, position: int, source: str) -> Mapping[str, Any]:
    if not isinstance(entry, Mapping):
        raise InvalidFormatError(
            f"Invalid JSON format in {source}: {section}[{position - 1}] must be an object."
        )
    return entry


def _conditions(value: Any) -> Mapping[str, ConditionValue]:
    if not isinstance(value, Mapping):
        return {}
    return {str(key): item for key, item in value.items()}


def _string_tuple(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Sequence):
        return tuple(str(item) for item in value)
    return (str(value),)


def _priority(value: Any) -> Priority | str:
    if value is None:
        return Priority.MEDIUM
    return parse_priority(str(value))


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)
