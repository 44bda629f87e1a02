"""Inline Validator — validates a string with an arbitrary predicate."""

from typing import Callable, Union

from formvalidator.models.validation import Validation
from formvalidator.validators.base import StringProducer, ValueValidator

ValidationCallback = Callable[[str], bool]


class InlineValidator(ValueValidator[str]):
    """Valid when `condition(value)` is true.

    The condition must not depend on anything but the value, or the form's
    aggregate state will go stale between changes.
    """

    def __init__(
        self,
        condition: ValidationCallback,
        value: str = "",
        message: Union[str, StringProducer, None] = None,
    ):
        super().__init__(value, message)
        self.condition = condition

    def validate(self) -> Validation:
        return self._result(bool(self.condition(self.value)))
