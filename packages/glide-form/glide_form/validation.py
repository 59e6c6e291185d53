"""Submit-time validation."""
from __future__ import annotations

from glide_form.rules import RULES
from glide_form.types import Accepted, FormInputs, Rejected, ValidationResult


def validate(inputs: FormInputs) -> ValidationResult:
    """Check fields in order and report the first failing rule.

    Failures are returned, never raised. On success the raw values are
    echoed back unchanged.
    """
    for rule in RULES:
        if not rule.check(getattr(inputs, rule.field)):
            return Rejected(rule.reason)
    return Accepted(
        username=inputs.username,
        email=inputs.name_or_email,
        age=inputs.age,
    )
