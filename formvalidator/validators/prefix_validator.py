"""Prefix Validator — checks that a string starts with a given prefix."""

from typing import Union

from formvalidator.models.validation import Validation
from formvalidator.validators.base import StringProducer, ValueValidator


class PrefixValidator(ValueValidator[str]):
    """Valid when the value starts with `prefix`, case-insensitively by default."""

    def __init__(
        self,
        prefix: str,
        ignore_case: bool = True,
        value: str = "",
        message: Union[str, StringProducer, None] = None,
    ):
        super().__init__(value, message)
        self.ignore_case = ignore_case
        self.prefix = prefix.lower() if ignore_case else prefix

    def validate(self) -> Validation:
        text = self.value.lower() if self.ignore_case else self.value
        return self._result(text.startswith(self.prefix))
