"""Field validators — one value, one rule, change notification.

Usage:
    from formvalidator.validators import PrefixValidator

    title = PrefixValidator(prefix="Mr", message="Must start with Mr")
    title.value = "mr. smith"
    title.validate().is_success  # True
"""

from formvalidator.validators.base import (
    ChangeNotifier,
    OnValidationChange,
    StringProducer,
    Validatable,
    ValueValidator,
    trimmed,
)
from formvalidator.validators.count_validator import CountComparison, CountValidator
from formvalidator.validators.date_validator import DateValidator
from formvalidator.validators.inline_validator import InlineValidator, ValidationCallback
from formvalidator.validators.messages import DefaultValidationMessages, ValidationMessagesProtocol
from formvalidator.validators.prefix_validator import PrefixValidator

__all__ = [
    "ChangeNotifier",
    "CountComparison",
    "CountValidator",
    "DateValidator",
    "DefaultValidationMessages",
    "InlineValidator",
    "OnValidationChange",
    "PrefixValidator",
    "StringProducer",
    "Validatable",
    "ValidationCallback",
    "ValidationMessagesProtocol",
    "ValueValidator",
    "trimmed",
]
