"""Notifier titles and messages for each validation outcome."""
from __future__ import annotations

from glide_form import Accepted, Rejection, ValidationResult

SUCCESS_TITLE = "Success"

REJECTION_MESSAGES: dict[Rejection, tuple[str, str]] = {
    Rejection.USERNAME_EMPTY: ("Invalid Input", "Please enter a username."),
    Rejection.PASSWORD_WEAK: (
        "Invalid Password",
        "Password must be at least 8 characters long and contain at least "
        "one letter and one number.",
    ),
    Rejection.EMAIL_INVALID: ("Invalid Email", "Please enter a valid email address."),
    Rejection.AGE_INVALID: ("Invalid Age", "Please enter a valid age."),
}


def describe(result: ValidationResult) -> tuple[str, str]:
    if isinstance(result, Accepted):
        return SUCCESS_TITLE, (
            f"Signed in with:\nUsername: {result.username}"
            f"\nEmail: {result.email}\nAge: {result.age}"
        )
    return REJECTION_MESSAGES[result.reason]
