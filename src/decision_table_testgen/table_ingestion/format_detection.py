"""Decision table format detection."""

from __future__ import annotations

from pathlib import Path

from .ingestion_errors import UnsupportedFormatError
from .table_models import TableFormat

_EXTENSION_FORMATS: dict[str, TableFormat] = {
    ".csv": TableFormat.CSV,
    ".json": TableFormat.JSON,
    ".md": TableFormat.MARKDOWN,
    ".markdown": TableFormat.MARKDOWN,
}


def detect_format(table_path: Path | str) -> TableFormat:
    """Map the file extension of ``table_path`` to a table format."""
    path = Path(table_path)
    extension = path.suffix.lower()
    try:
        return _EXTENSION_FORMATS[extension]
    except KeyError:
        raise UnsupportedFormatError(
            f"Cannot detect format from extension '{extension}': {path}"
        ) from None


def resolve_format(table_path: Path | str, table_format: TableFormat | str | None) -> TableFormat:
    """Return the explicit format when given, otherwise detect it from the path."""
    if table_format is None:
        return detect_format(table_path)
    try:
        return TableFormat(table_format)
    except ValueError:
        raise UnsupportedFormatError(f"Unsupported format: {table_format}") from None
