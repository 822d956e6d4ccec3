"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from decision_table_testgen.code_generation.generation_models import (
    CodeLanguage,
    CodeStyle,
    TestFramework,
)


@dataclass(frozen=True)
class GenerationSettings:
    """Validated options for one test code generation run."""

    path: Path | None
    framework: TestFramework
    output_path: Path
    language: CodeLanguage = CodeLanguage.TYPESCRIPT
    style: CodeStyle = CodeStyle.STANDARD
