"""Playwright browser test rendering."""

from __future__ import annotations

from decision_table_testgen.step_definitions.step_models import Step, WebAction, WebStep
from decision_table_testgen.table_ingestion.table_models import display_value

from .bucket_grouping import PlannedTest, TestBucket
from .generation_models import CodeLanguage
from .source_text import (
    comment_text,
    label_text,
    quoted,
    render_suite,
    render_test_block,
    slugify,
)


def render_playwright_module(bucket: TestBucket, language: CodeLanguage) -> str:
    """Render one browser test module for ``bucket``.

    TypeScript and JavaScript output are identical for browser tests.
    """
    del language
    blocks = [_render_test(planned) for planned in bucket.tests]
    return render_suite(bucket.name, blocks, prologue=[])


def _render_test(planned: PlannedTest) -> list[str]:
    test_case = planned.test_case
    steps = planned.steps.setup + planned.steps.steps + planned.steps.teardown
    screenshot_prefix = slugify(test_case.id) or "step"
    statements: list[str] = []
    for index, step in enumerate(steps, start=1):
        statements.append(f"// {comment_text(step.description)}")
        statements.append(render_web_statement(step, f"{screenshot_prefix}-step-{index}"))
    return render_test_block(
        test_case.name, "page", test_case.description or test_case.name, statements
    )


def render_web_statement(step: Step, screenshot_name: str) -> str:
    """Return the Playwright statement for one browser step."""
    if not isinstance(step, WebStep):
        return f"// TODO: Implement {step.method.value}"

    selector = quoted(step.selector or "")
    action = step.action
    if action == WebAction.NAVIGATE:
        return f"await page.goto({quoted(step.target or '')});"
    if action == WebAction.CLICK:
        return f"await page.click({selector});"
    if action == WebAction.FILL:
        return f"await page.fill({selector}, {quoted(step.value)});"
    if action == WebAction.SELECT:
        return f"await page.selectOption({selector}, {quoted(step.value)});"
    if action == WebAction.CHECK:
        return f"await page.check({selector});"
    if action == WebAction.UNCHECK:
        return f"await page.uncheck({selector});"
    if action == WebAction.WAIT:
        return _render_wait(step)
    if action == WebAction.ASSERT:
        if step.value is not None:
            return (
                f"await expect(page.locator({selector})).toContainText({quoted(step.value)});"
            )
        return f"await expect(page.locator({selector})).toBeVisible();"
    if action == WebAction.SCREENSHOT:
        return f"await page.screenshot({{ path: 'screenshots/{screenshot_name}.png' }});"
    return f"// TODO: Implement {comment_text(label_text(action))}"


def _render_wait(step: WebStep) -> str:
    if step.selector:
        return f"await page.waitForSelector({quoted(step.selector)}, {{ state: 'visible' }});"
    if step.value:
        return f"await page.waitForTimeout({display_value(step.value)});"
    return "await page.waitForLoadState('domcontentloaded');"
