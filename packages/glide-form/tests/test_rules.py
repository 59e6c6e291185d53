"""Tests for the individual field predicates."""

import math

import pytest
from glide_form import (
    RULES,
    Rejection,
    is_email_shaped,
    is_positive_age,
    is_strong_password,
    is_username_present,
    parse_number,
)


class TestUsername:

    @pytest.mark.parametrize("value", ["alice", " a ", "0"])
    def test_present(self, value):
        assert is_username_present(value)

    @pytest.mark.parametrize("value", ["", "   ", "\t\n", "\u00a0\u3000"])
    def test_blank(self, value):
        assert not is_username_present(value)


class TestPassword:

    @pytest.mark.parametrize("value", ["abc12345", "A1b2C3d4", "1234567a", "password1"])
    def test_strong(self, value):
        assert is_strong_password(value)

    def test_too_short(self):
        assert not is_strong_password("abc123")
        assert not is_strong_password("abc1234")

    def test_letters_only(self):
        assert not is_strong_password("abcdefgh")

    def test_digits_only(self):
        assert not is_strong_password("12345678")

    @pytest.mark.parametrize("value", ["abc 12345", "abc12345!", "abc_12345"])
    def test_symbols_and_spaces(self, value):
        assert not is_strong_password(value)

    @pytest.mark.parametrize("value", ["abcdéfg1", "abcdefg\u0661"])
    def test_non_ascii_letters_and_digits(self, value):
        """Only ASCII letters and digits count."""
        assert not is_strong_password(value)

    def test_trailing_newline(self):
        assert not is_strong_password("abc12345\n")


class TestEmail:

    @pytest.mark.parametrize("value", [
        "a@b.com",
        "first.last@example.co.uk",
        "x@y.z",
        "a@.b.c",
        "user+tag@host.io",
    ])
    def test_shaped(self, value):
        assert is_email_shaped(value)

    @pytest.mark.parametrize("value", [
        "",
        "not-an-email",
        "@b.com",
        "a@",
        "a@b",
        "a@b.",
        "a@.com",
        "a@@b.com",
        "a@b@c.com",
        "a b@c.com",
        "a@b.com ",
        "a@b. com",
    ])
    def test_not_shaped(self, value):
        assert not is_email_shaped(value)

    def test_case_is_not_normalized(self):
        assert is_email_shaped("Alice@Example.COM")


class TestParseNumber:

    @pytest.mark.parametrize("text,expected", [
        ("30", 30.0),
        (" 30 ", 30.0),
        ("-5", -5.0),
        ("+2", 2.0),
        ("1.5", 1.5),
        ("1.", 1.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("2E-1", 0.2),
        ("0x1F", 31.0),
        ("0o17", 15.0),
        ("0B101", 5.0),
    ])
    def test_numbers(self, text, expected):
        assert parse_number(text) == pytest.approx(expected)

    def test_infinity(self):
        assert parse_number("Infinity") == math.inf
        assert parse_number("-Infinity") == -math.inf

    @pytest.mark.parametrize("text", [
        "", "   ", "abc", "12abc", ".", "1.2.3", "inf", "nan", "NaN",
        "1_000", "-0x10", "0x", "0xZZ", "\u0663",
    ])
    def test_not_numbers(self, text):
        assert parse_number(text) is None


class TestAge:

    @pytest.mark.parametrize("value", ["1", "30", " 42 ", "0.5", "150000", "1e2", "Infinity"])
    def test_positive(self, value):
        assert is_positive_age(value)

    @pytest.mark.parametrize("value", ["", "  ", "0", "-0", "-5", "0.0", "abc", "-Infinity"])
    def test_not_positive(self, value):
        assert not is_positive_age(value)


def test_rule_order():
    """Rules run username, password, email, age."""
    assert [rule.field for rule in RULES] == ["username", "password", "name_or_email", "age"]
    assert [rule.reason for rule in RULES] == [
        Rejection.USERNAME_EMPTY,
        Rejection.PASSWORD_WEAK,
        Rejection.EMAIL_INVALID,
        Rejection.AGE_INVALID,
    ]
