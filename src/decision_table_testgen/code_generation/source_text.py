"""Helpers for embedding values into generated JavaScript/TypeScript source."""

from __future__ import annotations

import json
import re
from enum import Enum

from decision_table_testgen.table_ingestion.table_models import display_value

_NON_SLUG_CHARACTERS = re.compile(r"[^a-z0-9]+")


def escape_literal(text: str) -> str:
    """Escape text for a single-quoted string literal.

    Only single quotes and newlines are escaped. Backslashes and other
    metacharacters are emitted unchanged.
    """
    return text.replace("'", "\\'").replace("\n", "\\n")


def quoted(value: object) -> str:
    """Return ``value`` stringified as a single-quoted literal."""
    return f"'{escape_literal(display_value(value))}'"


def label_text(value: object) -> str:
    """Return the plain value of an enum member, or ``value`` stringified."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def comment_text(text: str) -> str:
    """Fold line breaks so text stays on one ``//`` comment line."""
    return " ".join(text.splitlines())


def json_literal(value: object, indent: str) -> str:
    """Render ``value`` as a pretty-printed JSON literal continued at ``indent``."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=str).replace("\n", "\n" + indent)


def slugify(name: str) -> str:
    """Lower-case ``name`` and collapse runs of other characters into single hyphens."""
    return _NON_SLUG_CHARACTERS.sub("-", name.lower()).strip("-")


IMPORT_PREAMBLE = "import { test, expect } from '@playwright/test';"
INDENT = "  "


def render_test_block(
    test_name: str, fixture: str, summary: str, statements: list[str]
) -> list[str]:
    """Render one ``test(...)`` block; ``statements`` are lines relative to the test body."""
    body = [INDENT * 2 + f"// {comment_text(summary)}"]
    lines = "\n".join(statements).split("\n") if statements else []
    body.extend(INDENT * 2 + line if line else line for line in lines)
    return [
        INDENT + f"test('{escape_literal(test_name)}', async ({{ {fixture} }}) => {{",
        *body,
        INDENT + "});",
    ]


def render_suite(suite_name: str, test_blocks: list[list[str]], prologue: list[str]) -> str:
    """Assemble the import preamble, optional module prologue and the describe block."""
    lines = [IMPORT_PREAMBLE, ""]
    if prologue:
        lines.extend([*prologue, ""])
    lines.append(f"test.describe('{escape_literal(suite_name)}', () => {{")
    for index, block in enumerate(test_blocks):
        if index:
            lines.append("")
        lines.extend(block)
    lines.append("});")
    return "\n".join(lines) + "\n"
