"""Validator container — a validator plus the predicate that can switch it off."""

from dataclasses import dataclass, field
from typing import Callable

from formvalidator.validators.base import Validatable

DisableValidation = Callable[[], bool]


def never_disabled() -> bool:
    return False


@dataclass(frozen=True)
class ValidatorContainer:
    """Pairs a validator with a disable predicate.

    The predicate is evaluated on every aggregation pass and never cached, so
    it can depend on other form state (e.g. a field that is only required
    while a checkbox is ticked).
    """

    validator: Validatable
    disable_validation: DisableValidation = field(default=never_disabled)

    def is_disabled(self) -> bool:
        return bool(self.disable_validation())
