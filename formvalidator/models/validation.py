"""Validation models — the result of a single rule and the form-level error policy.

A validation outcome is a value, never an exception: either a success or a
failure carrying a human-readable message. An empty failure message means
"invalid, but nothing to show".
"""

from enum import Enum

from pydantic import BaseModel


class Validation(BaseModel):
    """Outcome of validating one value. Use `Success` / `Failure`."""

    model_config = {"frozen": True}

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @staticmethod
    def success() -> "Success":
        return SUCCESS

    @staticmethod
    def failure(message: str = "") -> "Failure":
        return Failure(message=message)


class Success(Validation):
    """The value satisfies the rule."""

    @property
    def message(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "Success()"


class Failure(Validation):
    """The value violates the rule.

    An empty `message` is "invalid but silent": it still fails the form but
    never shows up in the collected error messages.
    """

    message: str = ""

    def __repr__(self) -> str:
        return f"Failure(message={self.message!r})"


SUCCESS = Success()


class ValidationType(str, Enum):
    """Form validation type.

    - immediate: errors are surfaced every time a field changes.
    - deferred: errors are surfaced only once `FormValidation.trigger_validation()`
      is called.
    - silent: errors are never surfaced by the validators; read them from
      `FormValidation.validation_messages` and display them yourself.
    """

    IMMEDIATE = "immediate"
    DEFERRED = "deferred"
    SILENT = "silent"

    def should_show_error(self) -> bool:
        return self is not ValidationType.SILENT
