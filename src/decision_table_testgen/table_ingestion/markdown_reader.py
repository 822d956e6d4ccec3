"""Markdown decision table scanner.

Only the block structure needed for decision tables is recognized: ATX and setext
headings, paragraphs and pipe tables. Fenced code blocks are skipped so that example
tables inside them are not picked up; list items, block quotes and thematic breaks
terminate paragraphs but are otherwise ignored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEADING = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?(?:[ \t]+#+)?[ \t]*$")
_FENCE = re.compile(r"^ {0,3}(`{3,}|~{3,})")
_SETEXT_UNDERLINE = re.compile(r"^ {0,3}(=+|-+)[ \t]*$")
_DELIMITER_CELL = re.compile(r"^:?-+:?$")
_OTHER_BLOCK = re.compile(r"^ {0,3}(?:[-+*][ \t]|\d{1,9}[.)][ \t]|>|(?:[-*_][ \t]*){3,}$)")
_CELL_SPLIT = re.compile(r"(?<!\\)\|")


@dataclass(frozen=True)
class MarkdownTable:
    """One pipe table: lower-cased header keys and raw cell rows."""

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    def row_mappings(self) -> list[dict[str, str]]:
        """Zip every row against the headers; missing cells read as empty strings."""
        mappings = []
        for row in self.rows:
            mappings.append(
                {
                    header: row[index] if index < len(row) else ""
                    for index, header in enumerate(self.headers)
                }
            )
        return mappings


@dataclass(frozen=True)
class MarkdownDocument:
    """Blocks of interest from a Markdown decision table document."""

    title: str | None
    description: str | None
    tables: tuple[MarkdownTable, ...]


def scan_markdown(text: str) -> MarkdownDocument:
    """Scan ``text`` into the first H1 title, the first paragraph and all tables."""
    lines = text.splitlines()
    title: str | None = None
    description: str | None = None
    tables: list[MarkdownTable] = []
    paragraph: list[str] = []

    def flush_paragraph() -> None:
        nonlocal description
        if paragraph and description is None:
            description = "\n".join(paragraph)
        paragraph.clear()

    index = 0
    while index < len(lines):
        line = lines[index]
        stripped = line.strip()

        fence = _FENCE.match(line)
        if fence:
            flush_paragraph()
            index = _skip_fenced_block(lines, index, fence.group(1))
            continue

        if not stripped:
            flush_paragraph()
            index += 1
            continue

        underline = _SETEXT_UNDERLINE.match(line)
        if underline and paragraph:
            if underline.group(1)[0] == "=" and title is None:
                title = " ".join(paragraph)
            paragraph.clear()
            index += 1
            continue

        heading = _HEADING.match(line)
        if heading:
            flush_paragraph()
            if len(heading.group(1)) == 1 and title is None:
                title = (heading.group(2) or "").strip()
            index += 1
            continue

        if _starts_table(lines, index):
            flush_paragraph()
            table, index = _read_table(lines, index)
            tables.append(table)
            continue

        if _OTHER_BLOCK.match(line):
            flush_paragraph()
            index += 1
            continue

        paragraph.append(stripped)
        index += 1

    flush_paragraph()
    return MarkdownDocument(title=title or None, description=description, tables=tuple(tables))


def split_table_row(line: str) -> tuple[str, ...]:
    """Split a pipe table line into trimmed cells, honouring ``\\|`` escapes."""
    content = line.strip()
    if content.startswith("|"):
        content = content[1:]
    if content.endswith("|") and not content.endswith("\\|"):
        content = content[:-1]
    return tuple(cell.strip().replace("\\|", "|") for cell in _CELL_SPLIT.split(content))


def _starts_table(lines: list[str], index: int) -> bool:
    if index + 1 >= len(lines) or "|" not in lines[index]:
        return False
    header_cells = split_table_row(lines[index])
    delimiter_cells = _delimiter_cells(lines[index + 1])
    return delimiter_cells is not None and len(delimiter_cells) == len(header_cells)


def _delimiter_cells(line: str) -> tuple[str, ...] | None:
    if "-" not in line:
        return None
    cells = split_table_row(line)
    if all(_DELIMITER_CELL.match(cell) for cell in cells):
        return cells
    return None


def _read_table(lines: list[str], index: int) -> tuple[MarkdownTable, int]:
    headers = tuple(cell.lower().strip() for cell in split_table_row(lines[index]))
    index += 2
    rows: list[tuple[str, ...]] = []
    while index < len(lines):
        line = lines[index]
        if not line.strip() or "|" not in line or _HEADING.match(line) or _FENCE.match(line):
            break
        rows.append(split_table_row(line))
        index += 1
    return MarkdownTable(headers=headers, rows=tuple(rows)), index


def _skip_fenced_block(lines: list[str], index: int, marker: str) -> int:
    index += 1
    while index < len(lines):
        closing = _FENCE.match(lines[index])
        if closing and closing.group(1)[0] == marker[0] and len(closing.group(1)) >= len(marker):
            return index + 1
        index += 1
    return index
