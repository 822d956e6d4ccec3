"""Decision table ingestion exports."""

from .format_detection import detect_format
from .ingestion_errors import (
    DecisionTableError,
    InvalidFormatError,
    TableReadError,
    UnsupportedFormatError,
)
from .row_classification import coerce_condition_value, derive_feature_name
from .table_models import (
    UNDEFINED,
    DecisionTable,
    Priority,
    TableFormat,
    TableMetadata,
    TestCase,
    decision_table_to_dict,
    serialize_test_case,
)
from .table_parser import parse_decision_table

__all__ = [
    "UNDEFINED",
    "DecisionTable",
    "DecisionTableError",
    "InvalidFormatError",
    "Priority",
    "TableFormat",
    "TableMetadata",
    "TableReadError",
    "TestCase",
    "UnsupportedFormatError",
    "coerce_condition_value",
    "decision_table_to_dict",
    "derive_feature_name",
    "detect_format",
    "parse_decision_table",
    "serialize_test_case",
]
