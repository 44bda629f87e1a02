"""Default messages used by the bundled validators.

Override fields of `DefaultValidationMessages`, or hand `FormValidation` any
object implementing `ValidationMessagesProtocol`.
"""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel


@runtime_checkable
class ValidationMessagesProtocol(Protocol):
    """Message templates, formatted with `str.format`."""

    invalid_count: str   # {comparison}, {count}
    invalid_prefix: str  # {prefix}
    invalid_value: str
    invalid_date: str    # {after}, {before}


class DefaultValidationMessages(BaseModel):
    """English defaults."""

    invalid_count: str = "Length must be {comparison} {count} characters"
    invalid_prefix: str = "Must start with '{prefix}'"
    invalid_value: str = "Invalid value"
    invalid_date: str = "Date must be between {after} and {before}"
