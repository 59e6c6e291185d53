"""glide-form - Sign-in form fields and their validation rules."""
from __future__ import annotations

from glide_form.rules import (
    RULES,
    Rule,
    is_email_shaped,
    is_positive_age,
    is_strong_password,
    is_username_present,
    parse_number,
)
from glide_form.types import (
    FIELD_NAMES,
    Accepted,
    FormInputs,
    Rejected,
    Rejection,
    ValidationResult,
)
from glide_form.validation import validate

__all__ = [
    "FIELD_NAMES",
    "FormInputs",
    "Accepted",
    "Rejected",
    "Rejection",
    "ValidationResult",
    "RULES",
    "Rule",
    "is_username_present",
    "is_strong_password",
    "is_email_shaped",
    "is_positive_age",
    "parse_number",
    "validate",
]
