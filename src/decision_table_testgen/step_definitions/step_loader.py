"""Step definition loading and validation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .step_models import (
    DEFAULT_EXPECTED_STATUS,
    DEFAULT_STEP_TIMEOUT_MS,
    ApiStep,
    HttpMethod,
    Step,
    StepType,
    TestSteps,
    WebAction,
    WebStep,
)


class StepDefinitionError(Exception):
    """Raised when a step definition document is invalid."""


def load_test_steps(steps_path: Path | str) -> tuple[TestSteps, ...]:
    """Load step definitions from a YAML or JSON file.

    The document is either a list of step sequences or a mapping holding that list
    under ``steps``.
    """
    path = Path(steps_path)
    if not path.exists():
        raise StepDefinitionError(f"Steps file not found: {path}")
    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise StepDefinitionError(f"Failed to parse steps file {path}: {exc}") from exc

    if parsed is None:
        return ()
    if isinstance(parsed, Mapping):
        parsed = parsed.get("steps")
    if not isinstance(parsed, list):
        raise StepDefinitionError(
            "Steps document must be a list of step sequences or a mapping with 'steps'."
        )
    return tuple(steps_from_dict(entry, position) for position, entry in enumerate(parsed))


def steps_from_dict(entry: Any, position: int = 0) -> TestSteps:
    """Convert one step sequence mapping into ``TestSteps``."""
    label = f"steps[{position}]"
    if not isinstance(entry, Mapping):
        raise StepDefinitionError(f"{label} must be a mapping.")
    test_case_id = entry.get("test_case_id")
    if not isinstance(test_case_id, str) or not test_case_id:
        raise StepDefinitionError(f"{label}.test_case_id must be a non-empty string.")
    raw_type = entry.get("type")
    try:
        step_type = StepType(raw_type)
    except ValueError:
        raise StepDefinitionError(
            f"{label}.type must be 'web' or 'api', got {raw_type!r}."
        ) from None

    return TestSteps(
        test_case_id=test_case_id,
        type=step_type,
        steps=_parse_step_list(entry.get("steps"), step_type, f"{label}.steps", required=True),
        setup=_parse_step_list(entry.get("setup"), step_type, f"{label}.setup"),
        teardown=_parse_step_list(entry.get("teardown"), step_type, f"{label}.teardown"),
    )


def _parse_step_list(
    value: Any, step_type: StepType, label: str, *, required: bool = False
) -> tuple[Step, ...]:
    if value is None and not required:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise StepDefinitionError(f"{label} must be a list.")
    parser = _parse_web_step if step_type is StepType.WEB else _parse_api_step
    return tuple(parser(item, f"{label}[{index}]") for index, item in enumerate(value))


def _parse_web_step(value: Any, label: str) -> WebStep:
    step = _require_mapping(value, label)
    action = _require_string(step.get("action"), f"{label}.action")
    try:
        known_action: WebAction | str = WebAction(action)
    except ValueError:
        known_action = action
    timeout = step.get("timeout", DEFAULT_STEP_TIMEOUT_MS)
    if isinstance(timeout, bool) or not isinstance(timeout, int):
        raise StepDefinitionError(f"{label}.timeout must be an integer.")
    return WebStep(
        action=known_action,
        description=_require_string(step.get("description"), f"{label}.description"),
        selector=_optional_string(step.get("selector"), f"{label}.selector"),
        target=_optional_string(step.get("target"), f"{label}.target"),
        value=step.get("value"),
        timeout=timeout,
        screenshot_on_failure=bool(step.get("screenshot_on_failure", True)),
    )


def _parse_api_step(value: Any, label: str) -> ApiStep:
    step = _require_mapping(value, label)
    raw_method = _require_string(step.get("method"), f"{label}.method")
    try:
        method = HttpMethod(raw_method.upper())
    except ValueError:
        raise StepDefinitionError(
            f"{label}.method must be one of GET, POST, PUT, PATCH, DELETE, got {raw_method!r}."
        ) from None
    expected_status = step.get("expected_status", DEFAULT_EXPECTED_STATUS)
    if isinstance(expected_status, bool) or not isinstance(expected_status, int):
        raise StepDefinitionError(f"{label}.expected_status must be an integer.")
    return ApiStep(
        method=method,
        endpoint=_require_string(step.get("endpoint"), f"{label}.endpoint"),
        description=_require_string(step.get("description"), f"{label}.description"),
        headers=_string_mapping(step.get("headers"), f"{label}.headers"),
        body=step.get("body"),
        query=_string_mapping(step.get("query"), f"{label}.query"),
        expected_status=expected_status,
        expected_body=step.get("expected_body"),
        save_response=_optional_string(step.get("save_response"), f"{label}.save_response"),
    )


def _require_mapping(value: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise StepDefinitionError(f"{label} must be a mapping.")
    return value


def _require_string(value: Any, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise StepDefinitionError(f"{label} must be a non-empty string.")
    return value


def _optional_string(value: Any, label: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise StepDefinitionError(f"{label} must be a string.")
    return value or None


def _string_mapping(value: Any, label: str) -> Mapping[str, str] | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise StepDefinitionError(f"{label} must be a mapping.")
    return {str(key): str(item) for key, item in value.items()}
