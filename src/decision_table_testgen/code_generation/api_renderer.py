"""Playwright API test rendering."""

from __future__ import annotations

from decision_table_testgen.step_definitions.step_models import ApiStep, Step

from .bucket_grouping import PlannedTest, TestBucket
from .generation_models import CodeLanguage
from .source_text import (
    INDENT,
    comment_text,
    escape_literal,
    label_text,
    json_literal,
    render_suite,
    render_test_block,
)

SAVED_RESPONSES = "savedResponses"


def render_api_module(bucket: TestBucket, language: CodeLanguage) -> str:
    """Render one API test module for ``bucket``.

    Every module declares a ``savedResponses`` memory; steps with ``save_response``
    store their parsed body there for later steps to read at test run time.
    """
    if language is CodeLanguage.TYPESCRIPT:
        memory = f"let {SAVED_RESPONSES}: Record<string, any> = {{}};"
    else:
        memory = f"let {SAVED_RESPONSES} = {{}};"
    blocks = [_render_test(planned) for planned in bucket.tests]
    return render_suite(f"{bucket.name} API", blocks, prologue=[memory])


def _render_test(planned: PlannedTest) -> list[str]:
    test_case = planned.test_case
    steps = planned.steps.setup + planned.steps.steps + planned.steps.teardown
    statements: list[str] = []
    for step in steps:
        statements.append(f"// {comment_text(step.description)}")
        statements.extend(render_api_statement(step))
    return render_test_block(
        test_case.name, "request", test_case.description or test_case.name, statements
    )


def render_api_statement(step: Step) -> list[str]:
    """Return the lines of one request block, relative to the test body.

    Each step is wrapped in its own block so ``response`` can be declared per step.
    """
    if not isinstance(step, ApiStep):
        return [f"// TODO: Implement {comment_text(label_text(step.action))}"]

    inner = INDENT * 2
    options = [f"{inner}method: '{step.method.value}',"]
    if step.headers:
        options.append(f"{inner}headers: {json_literal(dict(step.headers), inner)},")
    if step.query:
        options.append(f"{inner}params: {json_literal(dict(step.query), inner)},")
    if step.body is not None:
        options.append(f"{inner}data: {json_literal(step.body, inner)},")

    lines = [
        "{",
        f"{INDENT}const response = await request.fetch('{escape_literal(step.endpoint)}', {{",
        *options,
        f"{INDENT}}});",
        f"{INDENT}expect(response.status()).toBe({step.expected_status});",
    ]
    if step.save_response:
        lines.append(
            f"{INDENT}{SAVED_RESPONSES}['{escape_literal(step.save_response)}']"
            " = await response.json();"
        )
    if step.expected_body is not None:
        lines.append(
            f"{INDENT}expect(await response.json())"
            f".toMatchObject({json_literal(step.expected_body, INDENT)});"
        )
    lines.append("}")
    return lines
