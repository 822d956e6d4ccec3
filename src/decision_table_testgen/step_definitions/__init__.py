"""Step definition exports."""

from .step_loader import StepDefinitionError, load_test_steps, steps_from_dict
from .step_models import (
    ApiStep,
    HttpMethod,
    Step,
    StepType,
    TestSteps,
    WebAction,
    WebStep,
)

__all__ = [
    "ApiStep",
    "HttpMethod",
    "Step",
    "StepDefinitionError",
    "StepType",
    "TestSteps",
    "WebAction",
    "WebStep",
    "load_test_steps",
    "steps_from_dict",
]
