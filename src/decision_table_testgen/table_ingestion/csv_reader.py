"""CSV decision table reader."""

from __future__ import annotations

import csv
import io


def read_csv_rows(text: str) -> list[dict[str, str]]:
    """Return one header-keyed mapping per non-blank data row.

    The first non-blank line is the header row. Cells beyond the header width are
    ignored and missing trailing cells read as empty strings.
    """
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff")))
    headers: list[str] | None = None
    rows: list[dict[str, str]] = []
    for record in reader:
        if _is_blank(record):
            continue
        if headers is None:
            headers = [cell.strip() for cell in record]
            continue
        padded = record + [""] * (len(headers) - len(record))
        rows.append(dict(zip(headers, padded, strict=False)))
    return rows


def _is_blank(record: list[str]) -> bool:
    return all(not cell.strip() for cell in record)
