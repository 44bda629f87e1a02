"""Form Validation — combines field validators into one form-level state.

Every appended validator reports its value changes here. Each change
recomputes `all_valid`, `all_filled` and `validation_messages` synchronously,
publishes the fields that changed, and queues one `on_form_changed(form)`
call. The callback is never run inside the mutation that caused it, so by the
time it runs every field subscriber has already seen the new values.

Usage:
    form = FormValidation(ValidationType.DEFERRED, on_form_changed=render)
    name = form.count(3, CountComparison.GREATER_THAN_OR_EQUALS)
    title = form.prefix("Mr", disabled=lambda: not wants_title)
    name.value = "Ada"
    if form.trigger_validation():
        submit()
"""

from datetime import date
from typing import Callable, Optional, Union

import structlog

from formvalidator.config import get_settings
from formvalidator.form.container import DisableValidation, ValidatorContainer, never_disabled
from formvalidator.models.state import FormState
from formvalidator.models.validation import Validation, ValidationType
from formvalidator.services.event_bus import FieldEventBus
from formvalidator.services.task_queue import TaskQueue
from formvalidator.validators.base import StringProducer, Validatable
from formvalidator.validators.count_validator import CountComparison, CountValidator
from formvalidator.validators.date_validator import DateValidator
from formvalidator.validators.inline_validator import InlineValidator, ValidationCallback
from formvalidator.validators.messages import DefaultValidationMessages, ValidationMessagesProtocol
from formvalidator.validators.prefix_validator import PrefixValidator

logger = structlog.get_logger()

OnFormChanged = Callable[["FormValidation"], None]


class FormValidation:
    """Owns a form's validators and its aggregate validation state.

    Single-threaded: mutate values and query the form from one thread only.
    """

    def __init__(
        self,
        validation_type: Union[ValidationType, str],
        messages: Optional[ValidationMessagesProtocol] = None,
        on_form_changed: Optional[OnFormChanged] = None,
        task_queue: Optional[TaskQueue] = None,
        fill_check_skips_disabled: Optional[bool] = None,
    ):
        """Initialize an empty form.

        Args:
            validation_type: Whether triggered validation should surface errors
            messages: Default messages for validators built by this form
            on_form_changed: Called (deferred) after any field changes
            task_queue: Where deferred notifications are queued
            fill_check_skips_disabled: Ignore disabled validators in `is_all_filled()`.
                If None, uses the configured default.
        """
        self._validation_type = ValidationType(validation_type)
        self.messages: ValidationMessagesProtocol = messages or DefaultValidationMessages()
        self._on_form_changed = on_form_changed
        self.task_queue = task_queue or TaskQueue()
        self.events = FieldEventBus(self.task_queue)
        if fill_check_skips_disabled is None:
            fill_check_skips_disabled = get_settings().FILL_CHECK_SKIPS_DISABLED
        self.fill_check_skips_disabled = fill_check_skips_disabled

        self.validators: list[ValidatorContainer] = []
        self.all_valid: bool = False
        self.all_filled: bool = False
        self.validation_messages: list[str] = []

    @property
    def validation_type(self) -> ValidationType:
        return self._validation_type

    # ── Registration ──

    def append(self, container: ValidatorContainer) -> None:
        """Add a validator container and start observing its value."""
        if self._validation_type is ValidationType.IMMEDIATE:
            container.validator.observe_change(lambda _: self._show_immediately(container))
        container.validator.observe_change(self._on_changed)
        self.validators.append(container)
        logger.debug(
            "validator_appended",
            validator=type(container.validator).__name__,
            position=len(self.validators) - 1,
        )

    def add(self, validator: Validatable, disabled: Optional[DisableValidation] = None) -> Validatable:
        """Wrap a validator in a container, append it, and return the validator."""
        self.append(ValidatorContainer(validator, disabled or never_disabled))
        return validator

    # ── Aggregate checks ──

    def is_all_valid(self) -> bool:
        """True unless an enabled validator fails. Stops at the first failure."""
        for container in self.validators:
            if container.is_disabled():
                continue
            if not container.validator.validate().is_success:
                return False
        return True

    def is_all_filled(self) -> bool:
        """True when every field is valid or has content.

        A field with text counts as filled even while invalid. Only emptiness
        is checked; values such as dates are filled once set.
        """
        return all(
            container.validator.validate().is_success or not container.validator.is_empty
            for container in self.validators
            if not (self.fill_check_skips_disabled and container.is_disabled())
        )

    def all_validation_messages(self) -> list[str]:
        """Messages of enabled, failing validators in insertion order.

        Empty failure messages are left out.
        """
        messages = []
        for container in self.validators:
            if container.is_disabled():
                continue
            validation = container.validator.validate()
            if not validation.is_success and validation.message:
                messages.append(validation.message)
        return messages

    def all_validation_messages_string(self) -> str:
        return "\n".join(self.all_validation_messages())

    def trigger_validation(self) -> bool:
        """Validate every field now, surfacing errors if the validation type allows.

        Disabled validators are triggered too so they can clear a previously
        shown error.

        Returns:
            Whether the form is valid.
        """
        should_show_error = self._validation_type.should_show_error()
        for container in self.validators:
            container.validator.trigger_validation(
                is_disabled=container.is_disabled(),
                should_show_error=should_show_error,
            )
        valid = self.is_all_valid()
        logger.info(
            "form_validation_triggered",
            validation_type=self._validation_type.value,
            validators=len(self.validators),
            valid=valid,
        )
        return valid

    def errors_description(self) -> str:
        """Cached `validation_messages` as one multiline string."""
        if not self.validation_messages:
            return ""
        return "\n".join(self.validation_messages)

    def snapshot(self) -> FormState:
        return FormState(
            all_valid=self.all_valid,
            all_filled=self.all_filled,
            validation_messages=list(self.validation_messages),
        )

    # ── Change handling ──

    def _show_immediately(self, container: ValidatorContainer) -> None:
        container.validator.trigger_validation(
            is_disabled=container.is_disabled(),
            should_show_error=True,
        )

    def _on_changed(self, validation: Validation) -> None:
        """Called every time a field changes."""
        self._set_field("all_valid", self.is_all_valid())
        self._set_field("all_filled", self.is_all_filled())
        self._set_field("validation_messages", self.all_validation_messages())

        logger.debug(
            "form_recomputed",
            all_valid=self.all_valid,
            all_filled=self.all_filled,
            errors=len(self.validation_messages),
        )

        # Queued after the field deliveries, so subscribers see the new values first
        if self._on_form_changed is not None:
            self.task_queue.call_soon(self._notify_form_changed)

    def _set_field(self, name: str, value) -> None:
        if getattr(self, name) == value:
            return
        setattr(self, name, value)
        self.events.publish(name, value)

    def _notify_form_changed(self) -> None:
        if self._on_form_changed is None:
            return
        try:
            self._on_form_changed(self)
        except Exception as e:
            logger.error(
                "form_changed_callback_failed",
                error=str(e),
                error_type=type(e).__name__,
            )

    # ── Validator factories ──

    def count(
        self,
        count: int,
        comparison: Union[CountComparison, str] = CountComparison.EQUALS,
        value: str = "",
        message: Union[str, StringProducer, None] = None,
        disabled: Optional[DisableValidation] = None,
    ) -> CountValidator:
        """Add a CountValidator whose default message comes from `messages`."""
        comparison = CountComparison(comparison)
        if message is None:
            message = lambda: self.messages.invalid_count.format(count=count, comparison=comparison.phrase)
        validator = CountValidator(count, comparison, value=value, message=message)
        self.add(validator, disabled)
        return validator

    def prefix(
        self,
        prefix: str,
        ignore_case: bool = True,
        value: str = "",
        message: Union[str, StringProducer, None] = None,
        disabled: Optional[DisableValidation] = None,
    ) -> PrefixValidator:
        """Add a PrefixValidator whose default message comes from `messages`."""
        if message is None:
            message = lambda: self.messages.invalid_prefix.format(prefix=prefix)
        validator = PrefixValidator(prefix, ignore_case, value=value, message=message)
        self.add(validator, disabled)
        return validator

    def inline(
        self,
        condition: ValidationCallback,
        value: str = "",
        message: Union[str, StringProducer, None] = None,
        disabled: Optional[DisableValidation] = None,
    ) -> InlineValidator:
        """Add an InlineValidator whose default message comes from `messages`."""
        if message is None:
            message = lambda: self.messages.invalid_value
        validator = InlineValidator(condition, value=value, message=message)
        self.add(validator, disabled)
        return validator

    def date(
        self,
        before: date,
        after: date,
        value: Optional[date] = None,
        message: Union[str, StringProducer, None] = None,
        disabled: Optional[DisableValidation] = None,
    ) -> DateValidator:
        """Add a DateValidator whose default message comes from `messages`."""
        if message is None:
            message = lambda: self.messages.invalid_date.format(after=after, before=before)
        validator = DateValidator(before, after, value=value, message=message)
        self.add(validator, disabled)
        return validator

    def __len__(self) -> int:
        return len(self.validators)
