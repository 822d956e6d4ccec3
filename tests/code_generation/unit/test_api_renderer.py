"""Playwright API renderer tests."""

from __future__ import annotations

from decision_table_testgen.code_generation import CodeLanguage, PlannedTest, TestBucket
from decision_table_testgen.code_generation.api_renderer import (
    render_api_module,
    render_api_statement,
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


def test_minimal_request_block() -> None:
    step = ApiStep(method=HttpMethod.GET, endpoint="/health", description="d")

    lines = render_api_statement(step)

    assert lines == [
        "{",
        "  const response = await request.fetch('/health', {",
        "    method: 'GET',",
        "  });",
        "  expect(response.status()).toBe(200);",
        "}",
    ]


def test_full_request_block() -> None:
    step = ApiStep(
        method=HttpMethod.POST,
        endpoint="/api/users",
        description="Create user",
        headers={"Authorization": "Bearer t"},
        query={"dry": "1"},
        body={"name": "Ann"},
        expected_status=201,
        expected_body={"id": 7},
        save_response="user",
    )

    lines = render_api_statement(step)

    assert "\n".join(lines).split("\n") == [
        "{",
        "  const response = await request.fetch('/api/users', {",
        "    method: 'POST',",
        "    headers: {",
        '      "Authorization": "Bearer t"',
        "    },",
        "    params: {",
        '      "dry": "1"',
        "    },",
        "    data: {",
        '      "name": "Ann"',
        "    },",
        "  });",
        "  expect(response.status()).toBe(201);",
        "  savedResponses['user'] = await response.json();",
        "  expect(await response.json()).toMatchObject({",
        '    "id": 7',
        "  });",
        "}",
    ]


def test_falsy_body_is_still_sent() -> None:
    lines = render_api_statement(
        ApiStep(method=HttpMethod.PUT, endpoint="/flag", description="d", body=False)
    )

    assert "    data: false," in lines


def test_web_step_in_api_bucket_becomes_placeholder() -> None:
    lines = render_api_statement(WebStep(action=WebAction.CLICK, description="d", selector="#x"))

    assert lines == ["// TODO: Implement click"]


def _bucket() -> TestBucket:
    test_case = TestCase(id="TC001", name="Health check")
    steps = TestSteps(
        test_case_id="TC001",
        type=StepType.API,
        steps=(ApiStep(method=HttpMethod.GET, endpoint="/health", description="Ping"),),
    )
    return TestBucket("smoke", (PlannedTest(test_case, steps),))


def test_typescript_module_declares_typed_memory() -> None:
    source = render_api_module(_bucket(), CodeLanguage.TYPESCRIPT)

    assert source == (
        "import { test, expect } from '@playwright/test';\n"
        "\n"
        "let savedResponses: Record<string, any> = {};\n"
        "\n"
        "test.describe('smoke API', () => {\n"
        "  test('Health check', async ({ request }) => {\n"
        "    // Health check\n"
        "    // Ping\n"
        "    {\n"
        "      const response = await request.fetch('/health', {\n"
        "        method: 'GET',\n"
        "      });\n"
        "      expect(response.status()).toBe(200);\n"
        "    }\n"
        "  });\n"
        "});\n"
    )


def test_javascript_module_declares_untyped_memory() -> None:
    source = render_api_module(_bucket(), CodeLanguage.JAVASCRIPT)

    assert "let savedResponses = {};\n" in source
    assert "Record<string, any>" not in source


def test_unknown_web_action_in_api_bucket_keeps_its_name() -> None:
    lines = render_api_statement(WebStep(action="hover", description="d"))

    assert lines == ["// TODO: Implement hover"]
