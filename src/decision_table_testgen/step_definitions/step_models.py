"""Executable step entities supplied alongside decision tables."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT_STEP_TIMEOUT_MS = 30000
DEFAULT_EXPECTED_STATUS = 200


class StepType(str, Enum):
    """Execution backend a step sequence targets."""

    WEB = "web"
    API = "api"


class WebAction(str, Enum):
    """Browser interactions understood by the Playwright renderer."""

    NAVIGATE = "navigate"
    CLICK = "click"
    FILL = "fill"
    SELECT = "select"
    CHECK = "check"
    UNCHECK = "uncheck"
    WAIT = "wait"
    ASSERT = "assert"
    SCREENSHOT = "screenshot"


class HttpMethod(str, Enum):
    """HTTP methods accepted for API steps."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass(frozen=True)
class WebStep:  # pylint: disable=too-many-instance-attributes
    """One browser interaction."""

    action: WebAction | str
    description: str
    selector: str | None = None
    target: str | None = None
    value: Any = None
    timeout: int = DEFAULT_STEP_TIMEOUT_MS
    screenshot_on_failure: bool = True


@dataclass(frozen=True)
class ApiStep:  # pylint: disable=too-many-instance-attributes
    """One HTTP call with its expected outcome."""

    method: HttpMethod
    endpoint: str
    description: str
    headers: Mapping[str, str] | None = None
    body: Any = None
    query: Mapping[str, str] | None = None
    expected_status: int = DEFAULT_EXPECTED_STATUS
    expected_body: Any = None
    save_response: str | None = None


Step = WebStep | ApiStep


@dataclass(frozen=True)
class TestSteps:
    """Ordered steps implementing one test case, matched by ``test_case_id``."""

    __test__ = False

    test_case_id: str
    type: StepType
    steps: tuple[Step, ...]
    setup: tuple[Step, ...] = ()
    teardown: tuple[Step, ...] = ()
