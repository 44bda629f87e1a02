"""Validatable contract and the shared value-holding validator.

Every validator owns one value and one rule. The form only talks to it
through the `Validatable` protocol, so any object with these five members can
join a form; the bundled validators get them from `ValueValidator`.

Contract:
    - validate() is pure: same value → same Validation
    - is_empty reflects only the value, never its validity
    - every listener registered with observe_change() runs on each value
      change, in registration order
    - trigger_validation() re-validates and decides what the display
      channel shows; the form never reads that channel
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, Protocol, TypeVar, Union, runtime_checkable

from formvalidator.models.validation import Validation

T = TypeVar("T")

OnValidationChange = Callable[[Validation], None]
StringProducer = Callable[[], str]


@runtime_checkable
class Validatable(Protocol):
    """Capability every validator added to a form must provide."""

    value: Any

    @property
    def is_empty(self) -> bool:
        ...

    def validate(self) -> Validation:
        ...

    def observe_change(self, listener: OnValidationChange) -> None:
        ...

    def trigger_validation(self, is_disabled: bool, should_show_error: bool) -> None:
        ...


class ChangeNotifier:
    """Ordered list of validation listeners."""

    def __init__(self):
        self._listeners: list[OnValidationChange] = []

    def add(self, listener: OnValidationChange) -> None:
        self._listeners.append(listener)

    def notify(self, validation: Validation) -> None:
        for listener in list(self._listeners):
            listener(validation)

    def __len__(self) -> int:
        return len(self._listeners)


def trimmed(value: str) -> str:
    """Value without surrounding spaces and tabs. Newlines are kept."""
    return value.strip(" \t")


def as_producer(message: Union[str, StringProducer, None]) -> StringProducer:
    """Wrap a fixed message in a producer; producers pass through."""
    if message is None:
        return lambda: ""
    if callable(message):
        return message
    return lambda: message


class ValueValidator(ABC, Generic[T]):
    """Holds a value, publishes its validation on change, and keeps display state.

    Subclasses implement `validate()` and, for non-string values, `is_empty`.
    """

    def __init__(self, value: T, message: Union[str, StringProducer, None] = None):
        self._value = value
        self.error_message: StringProducer = as_producer(message)
        self._on_change = ChangeNotifier()
        self._on_display = ChangeNotifier()
        self.latest_validation: Validation = Validation.failure("")
        self.displayed_validation: Validation = Validation.success()

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        if new_value == self._value:
            return
        self._value = new_value
        self.latest_validation = self.validate()
        self._on_change.notify(self.latest_validation)

    @property
    def is_empty(self) -> bool:
        return self._value == ""

    @abstractmethod
    def validate(self) -> Validation:
        """Validate the current value."""
        ...

    def observe_change(self, listener: OnValidationChange) -> None:
        self._on_change.add(listener)

    def observe_display(self, listener: OnValidationChange) -> None:
        """Listen to what the rendering layer should show for this field."""
        self._on_display.add(listener)

    @property
    def shown_error(self) -> Optional[str]:
        """Message currently surfaced for display, if any."""
        if self.displayed_validation.is_success:
            return None
        return self.displayed_validation.message

    def trigger_validation(self, is_disabled: bool, should_show_error: bool) -> None:
        self.latest_validation = self.validate()
        if is_disabled:
            self._display(Validation.success())
        elif should_show_error:
            self._display(self.latest_validation)

    def _display(self, validation: Validation) -> None:
        self.displayed_validation = validation
        self._on_display.notify(validation)

    def _result(self, is_valid: bool) -> Validation:
        return Validation.success() if is_valid else Validation.failure(self.error_message())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value!r})"
