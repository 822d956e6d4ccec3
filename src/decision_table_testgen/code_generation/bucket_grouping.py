"""Partition test cases with their steps into named buckets."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from decision_table_testgen.step_definitions.step_models import StepType, TestSteps
from decision_table_testgen.table_ingestion.table_models import TestCase

LOGGER = logging.getLogger(__name__)

DEFAULT_BUCKET = "general"


@dataclass(frozen=True)
class PlannedTest:
    """A test case joined with the steps that implement it."""

    test_case: TestCase
    steps: TestSteps


@dataclass(frozen=True)
class TestBucket:
    """Tests that share a first tag and therefore a generated file."""

    __test__ = False

    name: str
    tests: tuple[PlannedTest, ...]

    @property
    def api_only(self) -> bool:
        """Whether every test in the bucket is implemented with API steps."""
        return all(planned.steps.type is StepType.API for planned in self.tests)


@dataclass(frozen=True)
class GroupingOutcome:
    """Buckets in first-seen order plus the test cases that had no steps."""

    buckets: tuple[TestBucket, ...]
    unmatched_test_case_ids: tuple[str, ...]


def group_test_cases(
    test_cases: Sequence[TestCase], steps: Sequence[TestSteps]
) -> GroupingOutcome:
    """Join test cases with their steps and bucket them by first tag."""
    steps_by_id: dict[str, TestSteps] = {}
    for test_steps in steps:
        steps_by_id.setdefault(test_steps.test_case_id, test_steps)

    buckets: dict[str, list[PlannedTest]] = {}
    unmatched: list[str] = []
    for test_case in test_cases:
        test_steps = steps_by_id.get(test_case.id)
        if test_steps is None:
            LOGGER.warning("No steps found for test case %s", test_case.id)
            unmatched.append(test_case.id)
            continue
        bucket_name = test_case.tags[0] if test_case.tags and test_case.tags[0] else DEFAULT_BUCKET
        buckets.setdefault(bucket_name, []).append(PlannedTest(test_case, test_steps))

    return GroupingOutcome(
        buckets=tuple(TestBucket(name, tuple(tests)) for name, tests in buckets.items()),
        unmatched_test_case_ids=tuple(unmatched),
    )
