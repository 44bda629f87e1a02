"""Form state snapshot — the aggregate fields of a form at one point in time."""

from pydantic import BaseModel, Field


class FormState(BaseModel):
    """Serialisable view of `FormValidation`'s aggregate fields."""

    model_config = {"frozen": True}

    all_valid: bool = Field(default=False, description="No enabled validator currently fails")
    all_filled: bool = Field(default=False, description="Every field is valid or has content")
    validation_messages: list[str] = Field(
        default_factory=list,
        description="Visible error messages of enabled, failing validators in insertion order",
    )

    @property
    def error_count(self) -> int:
        return len(self.validation_messages)
