"""Test code generation exports."""

from .bucket_grouping import (
    DEFAULT_BUCKET,
    GroupingOutcome,
    PlannedTest,
    TestBucket,
    group_test_cases,
)
from .file_writer import spec_file_name
from .generation_models import (
    CodeLanguage,
    CodeStyle,
    GeneratedFile,
    TestCodeGenerationRequest,
    TestCodeGenerationResult,
    TestFramework,
    generation_result_to_dict,
)
from .generation_use_case import generate_test_code
from .source_text import escape_literal, slugify

__all__ = [
    "DEFAULT_BUCKET",
    "CodeLanguage",
    "CodeStyle",
    "GeneratedFile",
    "GroupingOutcome",
    "PlannedTest",
    "TestBucket",
    "TestCodeGenerationRequest",
    "TestCodeGenerationResult",
    "TestFramework",
    "escape_literal",
    "generate_test_code",
    "generation_result_to_dict",
    "group_test_cases",
    "slugify",
    "spec_file_name",
]
