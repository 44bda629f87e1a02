"""Date Validator — checks that a date falls strictly between `after` and `before`."""

from datetime import date
from typing import Optional, TypeVar, Union

from formvalidator.models.validation import Validation
from formvalidator.validators.base import StringProducer, ValueValidator

D = TypeVar("D", bound=date)


class DateValidator(ValueValidator[Optional[D]]):
    """Valid when `after < value < before`. Works with `date` or `datetime`.

    An unset value (None) is empty and invalid.
    """

    def __init__(
        self,
        before: D,
        after: D,
        value: Optional[D] = None,
        message: Union[str, StringProducer, None] = None,
    ):
        super().__init__(value, message)
        self.before = before
        self.after = after

    @property
    def is_empty(self) -> bool:
        return self.value is None

    def validate(self) -> Validation:
        if self.value is None:
            return Validation.failure(self.error_message())
        return self._result(self.after < self.value < self.before)
