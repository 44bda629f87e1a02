from formvalidator.form.container import DisableValidation, ValidatorContainer, never_disabled
from formvalidator.form.form_validation import FormValidation, OnFormChanged

__all__ = ["DisableValidation", "FormValidation", "OnFormChanged", "ValidatorContainer", "never_disabled"]
