"""Test code generation use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .api_renderer import render_api_module
from .bucket_grouping import TestBucket, group_test_cases
from .file_writer import ensure_output_directory, spec_file_name, write_test_file
from .generation_models import (
    CodeLanguage,
    CodeStyle,
    GeneratedFile,
    TestCodeGenerationRequest,
    TestCodeGenerationResult,
    TestFramework,
)
from .playwright_renderer import render_playwright_module

LOGGER = logging.getLogger(__name__)

ModuleRenderer = Callable[[TestBucket, CodeLanguage], str]

_RENDERERS: dict[TestFramework, ModuleRenderer] = {
    TestFramework.PLAYWRIGHT: render_playwright_module,
    TestFramework.API: render_api_module,
}


def generate_test_code(request: TestCodeGenerationRequest) -> TestCodeGenerationResult:
    """Render and write one spec file per bucket of matched test cases.

    Failures writing one bucket are collected in ``errors`` and do not stop the
    remaining buckets; callers inspect ``success`` rather than catching exceptions.
    """
    total_tests = len(request.test_cases)
    if request.style is not CodeStyle.STANDARD:
        LOGGER.debug("style %s renders as standard", request.style.value)

    grouping = group_test_cases(request.test_cases, request.steps)
    warnings = tuple(
        f"No steps found for test case {test_case_id}; it was not generated."
        for test_case_id in grouping.unmatched_test_case_ids
    )

    try:
        ensure_output_directory(request.output_path)
    except OSError as exc:
        LOGGER.error("cannot create output directory %s: %s", request.output_path, exc)
        return TestCodeGenerationResult(
            files_generated=(),
            total_tests=total_tests,
            success=False,
            errors=(f"Failed to create output directory {request.output_path}: {exc}",),
            warnings=warnings,
        )

    generated: list[GeneratedFile] = []
    errors: list[str] = []
    for bucket in grouping.buckets:
        try:
            generated.append(_generate_bucket_file(bucket, request))
        except (OSError, TypeError, ValueError) as exc:
            LOGGER.error("failed to generate %s: %s", bucket.name, exc)
            errors.append(f"Failed to generate {bucket.name}: {exc}")

    return TestCodeGenerationResult(
        files_generated=tuple(generated),
        total_tests=total_tests,
        success=not errors,
        errors=tuple(errors),
        warnings=warnings,
    )


def resolve_framework(bucket: TestBucket, framework: TestFramework) -> TestFramework:
    """Pick the renderer for ``bucket``; ``both`` follows the bucket's step types."""
    if framework is not TestFramework.BOTH:
        return framework
    if bucket.api_only:
        return TestFramework.API
    return TestFramework.PLAYWRIGHT


def _generate_bucket_file(bucket: TestBucket, request: TestCodeGenerationRequest) -> GeneratedFile:
    framework = resolve_framework(bucket, request.framework)
    content = _RENDERERS[framework](bucket, request.language)
    path = write_test_file(
        request.output_path, spec_file_name(bucket.name, request.language), content
    )
    return GeneratedFile(
        path=path,
        content=content,
        test_count=len(bucket.tests),
        framework=framework,
    )
