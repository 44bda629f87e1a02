"""Value models shared by validators and forms."""

from formvalidator.models.state import FormState
from formvalidator.models.validation import Failure, Success, Validation, ValidationType

__all__ = ["Failure", "FormState", "Success", "Validation", "ValidationType"]
