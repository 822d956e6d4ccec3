"""Generated test file naming and persistence."""

from __future__ import annotations

import logging
from pathlib import Path

from .generation_models import CodeLanguage
from .source_text import slugify

LOGGER = logging.getLogger(__name__)


def spec_file_name(bucket_name: str, language: CodeLanguage) -> str:
    """Return ``<slug>.spec.ts`` (or ``.spec.js`` for JavaScript)."""
    extension = "js" if language is CodeLanguage.JAVASCRIPT else "ts"
    return f"{slugify(bucket_name)}.spec.{extension}"


def ensure_output_directory(output_path: Path) -> Path:
    """Create ``output_path`` and its parents when missing."""
    output_path.mkdir(parents=True, exist_ok=True)
    return output_path


def write_test_file(output_path: Path, file_name: str, content: str) -> Path:
    """Write ``content`` below ``output_path`` and return the written file path."""
    destination = ensure_output_directory(output_path) / file_name
    destination.write_text(content, encoding="utf-8")
    LOGGER.debug("wrote %s (%d bytes)", destination, len(content))
    return destination
