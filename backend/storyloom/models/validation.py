"""
Validation outcome of a handler's validate() step.

A handler either allows the command, handing the objects and characters it
resolved to execute() through ``context``, or refuses it with a
RejectionCode and the sentence the player sees.

Example:
    >>> valid_result(subject="Silver Key").context
    {'subject': 'Silver Key'}
    >>> invalid_result(RejectionCode.CONTAINER_LOCKED, "It's locked.").valid
    False
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from storyloom.models.event import RejectionCode, RejectionEvent


class ValidationResult(BaseModel):
    """Allowed, or refused with a code and a reason.

    ``context`` carries resolved names for execute(); a refusal may carry
    ``subject`` there too, which becomes the rejection event's subject.
    """

    valid: bool
    rejection_code: RejectionCode | None = None
    rejection_reason: str | None = None
    context: dict[str, object] = Field(default_factory=dict)

    @model_validator(mode="after")
    def refusal_is_explained(self) -> "ValidationResult":
        if not self.valid and (self.rejection_code is None or self.rejection_reason is None):
            raise ValueError("a refusal needs both rejection_code and rejection_reason")
        return self

    def to_rejection_event(self) -> RejectionEvent:
        if self.valid or self.rejection_code is None or self.rejection_reason is None:
            raise ValueError("only a refusal has a rejection event")
        subject = self.context.get("subject")
        return RejectionEvent(
            subject=None if subject is None else str(subject),
            rejection_code=self.rejection_code,
            rejection_reason=self.rejection_reason,
        )


def valid_result(**context: object) -> ValidationResult:
    return ValidationResult(valid=True, context=context)


def invalid_result(code: RejectionCode, reason: str, **context: object) -> ValidationResult:
    """Refuse with ``reason`` shown to the player verbatim."""
    return ValidationResult(
        valid=False,
        rejection_code=code,
        rejection_reason=reason,
        context=context,
    )
