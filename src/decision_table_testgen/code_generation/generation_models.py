"""Test code generation entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from decision_table_testgen.step_definitions.step_models import TestSteps
from decision_table_testgen.table_ingestion.table_models import TestCase


class TestFramework(str, Enum):
    """Target execution backend for generated files."""

    __test__ = False

    PLAYWRIGHT = "playwright"
    API = "api"
    BOTH = "both"


class CodeLanguage(str, Enum):
    """Language flavour of generated files."""

    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"


class CodeStyle(str, Enum):
    """Code organisation style. Every style currently renders as ``standard``."""

    STANDARD = "standard"
    PAGE_OBJECT = "page-object"
    SCREENPLAY = "screenplay"


@dataclass(frozen=True)
class TestCodeGenerationRequest:
    """Input contract for one generation call."""

    __test__ = False

    test_cases: tuple[TestCase, ...]
    steps: tuple[TestSteps, ...]
    framework: TestFramework
    output_path: Path
    language: CodeLanguage = CodeLanguage.TYPESCRIPT
    style: CodeStyle = CodeStyle.STANDARD

    def __post_init__(self) -> None:
        # Accept plain strings and lists from callers; store the normalized forms.
        object.__setattr__(self, "test_cases", tuple(self.test_cases))
        object.__setattr__(self, "steps", tuple(self.steps))
        object.__setattr__(self, "framework", TestFramework(self.framework))
        object.__setattr__(self, "output_path", Path(self.output_path))
        object.__setattr__(self, "language", CodeLanguage(self.language))
        object.__setattr__(self, "style", CodeStyle(self.style))


@dataclass(frozen=True)
class GeneratedFile:
    """One rendered and written test module."""

    path: Path
    content: str
    test_count: int
    framework: TestFramework


@dataclass(frozen=True)
class TestCodeGenerationResult:
    """Output contract for one generation call."""

    __test__ = False

    files_generated: tuple[GeneratedFile, ...]
    total_tests: int
    success: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def rendered_tests(self) -> int:
        """Number of test cases that made it into a generated file."""
        return sum(generated.test_count for generated in self.files_generated)


def generation_result_to_dict(result: TestCodeGenerationResult) -> dict[str, Any]:
    """Return a JSON-ready mapping for a generation result."""
    document: dict[str, Any] = {
        "files_generated": [
            {
                "path": str(generated.path),
                "content": generated.content,
                "test_count": generated.test_count,
                "framework": generated.framework.value,
            }
            for generated in result.files_generated
        ],
        "total_tests": result.total_tests,
        "success": result.success,
    }
    if result.errors:
        document["errors"] = list(result.errors)
    if result.warnings:
        document["warnings"] = list(result.warnings)
    return document
