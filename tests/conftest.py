"""Shared fixtures and helpers for the formvalidator test suite."""

from __future__ import annotations

from typing import Any, List, Tuple

import pytest
import structlog

from formvalidator.config import get_settings
from formvalidator.form import FormValidation
from formvalidator.models.validation import Validation, ValidationType
from formvalidator.services.task_queue import TaskQueue
from formvalidator.validators.base import ChangeNotifier


class FakeValidator:
    """Hand-driven Validatable: the test decides the result and emptiness.

    Implements the protocol directly (no shared base class) and records calls.
    """

    def __init__(self, result: Validation | None = None, value: Any = ""):
        self.value = value
        self.result = result or Validation.success()
        self.validate_calls = 0
        self.trigger_calls: List[Tuple[bool, bool]] = []
        self._listeners = ChangeNotifier()

    @property
    def is_empty(self) -> bool:
        return self.value in ("", None)

    def validate(self) -> Validation:
        self.validate_calls += 1
        return self.result

    def observe_change(self, listener) -> None:
        self._listeners.add(listener)

    def trigger_validation(self, is_disabled: bool, should_show_error: bool) -> None:
        self.validate()
        self.trigger_calls.append((is_disabled, should_show_error))

    def change(self, value: Any, result: Validation) -> None:
        """Simulate a value change and publish the new result."""
        self.value = value
        self.result = result
        self._listeners.notify(result)


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Keep settings and structlog config from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def task_queue() -> TaskQueue:
    return TaskQueue()


@pytest.fixture
def make_form(task_queue: TaskQueue):
    """Factory for forms sharing the test's task queue."""

    def _make(validation_type=ValidationType.DEFERRED, **kwargs) -> FormValidation:
        kwargs.setdefault("task_queue", task_queue)
        return FormValidation(validation_type, **kwargs)

    return _make
