import pytest

from src.commonUtils.validationUtil import (
    EMAIL_ERROR,
    NAME_ERROR,
    PHONE_ERROR,
    first_validation_error,
    validate_email,
    validate_name,
    validate_phone,
)


@pytest.mark.parametrize("name", ["", " ", "\t\n  "])
def test_blank_name_fails(name):
    assert validate_name(name) is False


def test_name_with_surrounding_spaces_passes():
    assert validate_name("  Ada ") is True


@pytest.mark.parametrize("email", ["a@b.c", "ada@example.com", "first.last@sub.domain.io", "a+b@c.d.e"])
def test_email_shape_passes(email):
    assert validate_email(email) is True


@pytest.mark.parametrize("email", [
    "",
    "plainaddress",
    "a@b",
    "@b.com",
    "a@.com",
    "a@b.",
    "a b@c.com",
    "a@@b.com",
    "a@b@c.com",
    " a@b.com",
    "a@b.com ",
])
def test_email_shape_fails(email):
    assert validate_email(email) is False


@pytest.mark.parametrize("phone, expected", [
    ("123456", False),
    ("1234567", True),
    ("+91 98765 43210", True),
    ("123-456-7890", True),
    ("123456789012345", True),
    ("1234567890123456", False),
    ("", False),
    ("+ - ( )", False),
])
def test_phone_digit_count_range(phone, expected):
    assert validate_phone(phone) is expected


def test_only_ascii_digits_are_counted():
    # Arabic-Indic digits do not count towards the range
    assert validate_phone("١٢٣٤٥٦٧") is False


def test_first_error_follows_field_order():
    assert first_validation_error("", "bad", "1") == NAME_ERROR
    assert first_validation_error("Ada", "bad", "1") == EMAIL_ERROR
    assert first_validation_error("Ada", "ada@example.com", "1") == PHONE_ERROR
    assert first_validation_error("Ada", "ada@example.com", "0211234567") is None
