"""Count Validator — compares the trimmed length of a string against a count."""

import operator
from enum import Enum
from typing import Union

from formvalidator.models.validation import Validation
from formvalidator.validators.base import StringProducer, ValueValidator, trimmed


class CountComparison(str, Enum):
    """How the trimmed length is compared against the configured count."""

    EQUALS = "equals"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUALS = "less_than_or_equals"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUALS = "greater_than_or_equals"

    @property
    def phrase(self) -> str:
        """Human-readable form, used in default messages."""
        return self.value.replace("_", " ").replace("equals", "equal to")


_OPERATORS = {
    CountComparison.EQUALS: operator.eq,
    CountComparison.LESS_THAN: operator.lt,
    CountComparison.LESS_THAN_OR_EQUALS: operator.le,
    CountComparison.GREATER_THAN: operator.gt,
    CountComparison.GREATER_THAN_OR_EQUALS: operator.ge,
}


class CountValidator(ValueValidator[str]):
    """Valid when `len(trimmed(value))` compares to `count` as `comparison` says."""

    def __init__(
        self,
        count: int,
        comparison: Union[CountComparison, str] = CountComparison.EQUALS,
        value: str = "",
        message: Union[str, StringProducer, None] = None,
    ):
        super().__init__(value, message)
        self.count = count
        self.comparison = CountComparison(comparison)

    def validate(self) -> Validation:
        compare = _OPERATORS[self.comparison]
        return self._result(compare(len(trimmed(self.value)), self.count))
