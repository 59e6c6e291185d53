"""Form input and validation result types."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

FIELD_NAMES = ("username", "password", "name_or_email", "age")


@dataclass
class FormInputs:
    """Raw field values, replaced wholesale on every keystroke."""

    username: str = ""
    password: str = ""
    name_or_email: str = ""
    age: str = ""


class Rejection(Enum):
    USERNAME_EMPTY = "username_empty"
    PASSWORD_WEAK = "password_weak"
    EMAIL_INVALID = "email_invalid"
    AGE_INVALID = "age_invalid"


@dataclass(frozen=True)
class Accepted:
    username: str
    email: str
    age: str


@dataclass(frozen=True)
class Rejected:
    reason: Rejection


ValidationResult = Union[Accepted, Rejected]
