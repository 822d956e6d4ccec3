"""Decision table entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class _Undefined:
    """Marker for a condition cell that explicitly reads ``undefined``."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()

ConditionValue = str | int | float | bool | None | _Undefined


class TableFormat(str, Enum):
    """Supported decision table source formats."""

    CSV = "csv"
    JSON = "json"
    MARKDOWN = "markdown"


class Priority(str, Enum):
    """Known test case priorities."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class TestCase:  # pylint: disable=too-many-instance-attributes
    """Canonical representation of one decision table row."""

    __test__ = False

    id: str
    name: str
    description: str | None = None
    conditions: Mapping[str, ConditionValue] = field(default_factory=dict)
    actions: tuple[str, ...] = ()
    expected_results: tuple[str, ...] = ()
    priority: Priority | str = Priority.MEDIUM
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Test case id must not be empty.")


@dataclass(frozen=True)
class TableMetadata:
    """Where a decision table came from."""

    source: str
    format: TableFormat
    row_count: int | None = None


@dataclass(frozen=True)
class DecisionTable:
    """Normalized decision table shared by all source formats."""

    feature: str
    test_cases: tuple[TestCase, ...]
    metadata: TableMetadata
    description: str | None = None


def auto_test_id(position: int) -> str:
    """Return the generated id for the 1-based row ``position``."""
    return f"TC{position:03d}"


def display_value(value: object) -> str:
    """Render a scalar the way it reads in JavaScript source and test names."""
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def decision_table_to_dict(table: DecisionTable) -> dict[str, Any]:
    """Return a JSON-ready mapping in the canonical document shape."""
    document: dict[str, Any] = {"feature": table.feature}
    if table.description is not None:
        document["description"] = table.description
    document["test_cases"] = [serialize_test_case(test_case) for test_case in table.test_cases]
    metadata: dict[str, Any] = {
        "source": table.metadata.source,
        "format": table.metadata.format.value,
    }
    if table.metadata.row_count is not None:
        metadata["row_count"] = table.metadata.row_count
    document["metadata"] = metadata
    return document


def serialize_test_case(test_case: TestCase) -> dict[str, Any]:
    """Return a JSON-ready mapping for one test case."""
    document: dict[str, Any] = {"id": test_case.id, "name": test_case.name}
    if test_case.description is not None:
        document["description"] = test_case.description
    document["conditions"] = {
        key: value for key, value in test_case.conditions.items() if value is not UNDEFINED
    }
    document["actions"] = list(test_case.actions)
    document["expected_results"] = list(test_case.expected_results)
    document["priority"] = _enum_value(test_case.priority)
    document["tags"] = list(test_case.tags)
    return document


def _enum_value(value: Priority | str) -> str:
    return value.value if isinstance(value, Priority) else value
