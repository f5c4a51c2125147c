"""Tests for field validators."""

import datetime

import pytest

from pyqt_formdelegate.forms.validators import (
    DateRangeValidator, DateValidator, DoubleValidator, IntValidator,
    LengthValidator, RegExpValidator, ValidationResult, ValidationState, Validator,
)


def test_base_validator_accepts_anything_unless_mandatory():
    assert Validator().validate("").is_valid
    assert Validator().validate("whatever").is_valid

    result = Validator(mandatory=True).validate("   ")
    assert result.state is ValidationState.INVALID_EMPTY
    assert result.message


@pytest.mark.parametrize("text, state", [
    ("-5", ValidationState.INVALID),
    ("0", ValidationState.VALID),
    ("30", ValidationState.VALID),
    ("3.5", ValidationState.INVALID),
    ("abc", ValidationState.INVALID),
    ("", ValidationState.VALID),
])
def test_int_validator_with_bottom(text, state):
    assert IntValidator(bottom=0).validate(text).state is state


def test_int_validator_top_message():
    result = IntValidator(top=10).validate("11")
    assert not result.is_valid
    assert "10" in result.message


def test_range_validator_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        IntValidator(bottom=10, top=1)


def test_double_validator():
    validator = DoubleValidator(bottom=0.0, top=1.0)
    assert validator.validate("0.5").is_valid
    assert not validator.validate("1.5").is_valid
    assert not validator.validate("nan").is_valid
    assert not validator.validate("inf").is_valid


def test_date_validator_range():
    validator = DateValidator(bottom=datetime.date(2024, 1, 1))
    assert validator.validate("2024-06-01").is_valid
    assert not validator.validate("2023-12-31").is_valid
    assert not validator.validate("June 1st").is_valid


def test_date_validator_accepts_datetime_text():
    """A datetime stored in the model is validated by its date."""
    validator = DateValidator(bottom=datetime.date(2001, 1, 1))
    assert validator.validate("2001-02-03T04:05:00").is_valid
    assert not validator.validate("2000-12-31T23:59:00").is_valid
    assert not validator.validate("2001-02-03Tnoon").is_valid


def test_length_validator():
    validator = LengthValidator(min_length=2, max_length=4)
    assert validator.validate("abc").is_valid
    assert not validator.validate("a").is_valid
    assert not validator.validate("abcde").is_valid


def test_regexp_validator_requires_full_match():
    validator = RegExpValidator(r"[A-Z]{3}", message="Three capitals")
    assert validator.validate("ABC").is_valid
    result = validator.validate("ABCD")
    assert result == ValidationResult(ValidationState.INVALID, "Three capitals")


def test_date_range_validator(form_config):
    validator = DateRangeValidator()
    assert validator.validate("2024-01-01/2024-01-31").is_valid
    assert validator.validate("2024-01-01/2024-01-01").is_valid
    assert not validator.validate("2024-02-01/2024-01-01").is_valid
    assert not validator.validate("2024-01-01/").is_valid
    assert not validator.validate("2024-01-01").is_valid
    assert not validator.validate("2024-13-01/2024-01-01").is_valid
    assert validator.validate("").is_valid


def test_date_range_validator_custom_separator(form_config):
    form_config.date_range_separator = ".."
    assert DateRangeValidator().validate("2024-01-01..2024-01-31").is_valid
