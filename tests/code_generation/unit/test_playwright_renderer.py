"""Playwright browser renderer tests."""

from __future__ import annotations

import pytest
from decision_table_testgen.code_generation import CodeLanguage, PlannedTest, TestBucket
from decision_table_testgen.code_generation.playwright_renderer import (
    render_playwright_module,
    render_web_statement,
)
from decision_table_testgen.step_definitions import (
    ApiStep,
    HttpMethod,
    StepType,
    TestSteps,
    WebAction,
    WebStep,
)
from decision_table_testgen.table_ingestion import TestCase


@pytest.mark.parametrize(
    ("step", "expected"),
    [
        (
            WebStep(action=WebAction.NAVIGATE, description="d", target="https://x.test"),
            "await page.goto('https://x.test');",
        ),
        (
            WebStep(action=WebAction.CLICK, description="d", selector="#go"),
            "await page.click('#go');",
        ),
        (
            WebStep(action=WebAction.FILL, description="d", selector="#q", value="it's"),
            "await page.fill('#q', 'it\\'s');",
        ),
        (
            WebStep(action=WebAction.SELECT, description="d", selector="#c", value="EU"),
            "await page.selectOption('#c', 'EU');",
        ),
        (
            WebStep(action=WebAction.CHECK, description="d", selector="#t"),
            "await page.check('#t');",
        ),
        (
            WebStep(action=WebAction.UNCHECK, description="d", selector="#t"),
            "await page.uncheck('#t');",
        ),
        (
            WebStep(action=WebAction.WAIT, description="d", selector="#ready"),
            "await page.waitForSelector('#ready', { state: 'visible' });",
        ),
        (
            WebStep(action=WebAction.WAIT, description="d", value=500),
            "await page.waitForTimeout(500);",
        ),
        (
            WebStep(action=WebAction.WAIT, description="d"),
            "await page.waitForLoadState('domcontentloaded');",
        ),
        (
            WebStep(action=WebAction.ASSERT, description="d", selector="h1", value="Welcome"),
            "await expect(page.locator('h1')).toContainText('Welcome');",
        ),
        (
            WebStep(action=WebAction.ASSERT, description="d", selector="h1"),
            "await expect(page.locator('h1')).toBeVisible();",
        ),
        (
            WebStep(action=WebAction.SCREENSHOT, description="d"),
            "await page.screenshot({ path: 'screenshots/shot.png' });",
        ),
        (WebStep(action="hover", description="d"), "// TODO: Implement hover"),
        (
            ApiStep(method=HttpMethod.DELETE, endpoint="/x", description="d"),
            "// TODO: Implement DELETE",
        ),
    ],
)
def test_render_web_statement(step: object, expected: str) -> None:
    assert render_web_statement(step, "shot") == expected


def test_render_playwright_module_orders_setup_steps_and_teardown() -> None:
    test_case = TestCase(id="TC001", name="Valid login", description="Admin logs in")
    steps = TestSteps(
        test_case_id="TC001",
        type=StepType.WEB,
        setup=(WebStep(action=WebAction.NAVIGATE, description="Open", target="/login"),),
        steps=(WebStep(action=WebAction.SCREENSHOT, description="Capture\npage"),),
        teardown=(WebStep(action=WebAction.CLICK, description="Log out", selector="#logout"),),
    )
    bucket = TestBucket("Login Flow", (PlannedTest(test_case, steps),))

    source = render_playwright_module(bucket, CodeLanguage.TYPESCRIPT)

    assert source == (
        "import { test, expect } from '@playwright/test';\n"
        "\n"
        "test.describe('Login Flow', () => {\n"
        "  test('Valid login', async ({ page }) => {\n"
        "    // Admin logs in\n"
        "    // Open\n"
        "    await page.goto('/login');\n"
        "    // Capture page\n"
        "    await page.screenshot({ path: 'screenshots/tc001-step-2.png' });\n"
        "    // Log out\n"
        "    await page.click('#logout');\n"
        "  });\n"
        "});\n"
    )
    assert render_playwright_module(bucket, CodeLanguage.JAVASCRIPT) == source
