"""Named field predicates and the ordered rule table.

Character classes follow the web form conventions the screen was designed
against: "letters" and "digits" are ASCII only, and whitespace is the
ECMAScript whitespace and line-terminator set.
"""
from __future__ import annotations

import math
import re
import string
from dataclasses import dataclass
from typing import Callable

from glide_form.types import Rejection

MIN_PASSWORD_LENGTH = 8

WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WHITESPACE_SET = frozenset(WHITESPACE)

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX_LITERALS = {
    "0x": (16, re.compile(r"[0-9a-fA-F]+")),
    "0o": (8, re.compile(r"[0-7]+")),
    "0b": (2, re.compile(r"[01]+")),
}
_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


def parse_number(text: str) -> float | None:
    """Parse a numeric form string, or return None if it is not a number.

    Accepts decimal literals with optional sign, fraction and exponent,
    unsigned ``0x``/``0o``/``0b`` integers, and signed ``Infinity``.
    Surrounding whitespace is ignored; blank input is not a number.
    """
    s = trim(text)
    if not s:
        return None
    if _DECIMAL.fullmatch(s):
        return float(s)
    if s in _INFINITIES:
        return _INFINITIES[s]
    literal = _RADIX_LITERALS.get(s[:2].lower())
    if literal is not None:
        base, digits = literal
        if digits.fullmatch(s[2:]):
            return float(int(s[2:], base))
    return None


def is_username_present(username: str) -> bool:
    return bool(trim(username))


def is_strong_password(password: str) -> bool:
    """At least 8 ASCII letters/digits, with at least one of each."""
    if len(password) < MIN_PASSWORD_LENGTH:
        return False
    if not all(ch in _LETTERS or ch in _DIGITS for ch in password):
        return False
    return any(ch in _LETTERS for ch in password) and any(ch in _DIGITS for ch in password)


def is_email_shaped(value: str) -> bool:
    """``local@domain.tld``: one ``@``, no whitespace, a dot inside the domain."""
    if any(ch in _WHITESPACE_SET for ch in value):
        return False
    local, at, domain = value.partition("@")
    if not at or not local or "@" in domain:
        return False
    return any(ch == "." and 0 < i < len(domain) - 1 for i, ch in enumerate(domain))


def is_positive_age(age: str) -> bool:
    """Any number greater than zero. No upper bound; decimals allowed."""
    value = parse_number(age)
    return value is not None and value > 0


@dataclass(frozen=True)
class Rule:
    field: str
    check: Callable[[str], bool]
    reason: Rejection


# Evaluation order decides which single reason is reported.
RULES: tuple[Rule, ...] = (
    Rule("username", is_username_present, Rejection.USERNAME_EMPTY),
    Rule("password", is_strong_password, Rejection.PASSWORD_WEAK),
    Rule("name_or_email", is_email_shaped, Rejection.EMAIL_INVALID),
    Rule("age", is_positive_age, Rejection.AGE_INVALID),
)
