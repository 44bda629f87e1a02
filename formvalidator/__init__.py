"""formvalidator — compose field validators into one reactive form state.

Usage:
    from formvalidator import FormValidation, ValidationType

    form = FormValidation(ValidationType.IMMEDIATE, on_form_changed=lambda f: print(f.all_valid))
    title = form.prefix("Mr")
    title.value = "Ms. Smith"
    form.validation_messages  # ["Must start with 'Mr'"]
    form.task_queue.run_pending()  # outside an asyncio loop, deliver notifications
"""

from formvalidator.form import FormValidation, ValidatorContainer
from formvalidator.log_config import configure_logging
from formvalidator.models import Failure, FormState, Success, Validation, ValidationType
from formvalidator.services import FieldEventBus, TaskQueue
from formvalidator.validators import (
    CountComparison,
    CountValidator,
    DateValidator,
    DefaultValidationMessages,
    InlineValidator,
    PrefixValidator,
    Validatable,
    ValidationMessagesProtocol,
)

__version__ = "1.0.0"

__all__ = [
    "CountComparison",
    "CountValidator",
    "DateValidator",
    "DefaultValidationMessages",
    "Failure",
    "FieldEventBus",
    "FormState",
    "FormValidation",
    "InlineValidator",
    "PrefixValidator",
    "Success",
    "TaskQueue",
    "Validatable",
    "Validation",
    "ValidationMessagesProtocol",
    "ValidationType",
    "ValidatorContainer",
    "configure_logging",
]
