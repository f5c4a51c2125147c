"""
Field validators consumed by FormModel.validate_field().

A validator sees the field's text form (FormModel.value_text) and returns a
ValidationResult. Invalid input is ordinary data, never an exception.

Design:
- Validator base handles the mandatory/empty case once
- Subclasses implement _validate_text() for non-empty input only
- Messages are plain strings; rendering them is the view's business
"""

import datetime
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Pattern, Union

from pyqt_formdelegate.protocols import get_form_config

logger = logging.getLogger(__name__)


class ValidationState(Enum):
    """Outcome of validating one field value."""
    INVALID = "invalid"
    INVALID_EMPTY = "invalid_empty"
    VALID = "valid"


@dataclass(frozen=True)
class ValidationResult:
    """Immutable validation outcome with an optional message."""
    state: ValidationState
    message: str = ""

    @property
    def is_valid(self) -> bool:
        return self.state is ValidationState.VALID

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(ValidationState.VALID)

    @classmethod
    def invalid(cls, message: str) -> "ValidationResult":
        return cls(ValidationState.INVALID, message)


class Validator:
    """
    Base validator.

    Accepts everything except empty input on a mandatory field. Subclasses
    override _validate_text() to constrain non-empty input.

    Example:
        validator = IntValidator(bottom=0, mandatory=True)
        validator.validate("")    # INVALID_EMPTY
        validator.validate("-5")  # INVALID
        validator.validate("30")  # VALID
    """

    empty_message = "This field cannot be empty"

    def __init__(self, mandatory: bool = False):
        self.mandatory = mandatory

    def validate(self, text: str) -> ValidationResult:
        """
        Validate a field's text form.

        Args:
            text: The value as produced by FormModel.value_text()

        Returns:
            ValidationResult describing the outcome
        """
        if not text.strip():
            if self.mandatory:
                return ValidationResult(ValidationState.INVALID_EMPTY, self.empty_message)
            return ValidationResult.valid()
        return self._validate_text(text.strip())

    def _validate_text(self, text: str) -> ValidationResult:
        return ValidationResult.valid()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mandatory={self.mandatory})"


class _RangeValidator(Validator):
    """Shared bottom/top handling for numeric and date validators."""

    type_message = "Invalid value"

    def __init__(self, bottom=None, top=None, mandatory: bool = False):
        super().__init__(mandatory)
        if bottom is not None and top is not None and bottom > top:
            raise ValueError(f"{type(self).__name__}: bottom {bottom!r} is greater than top {top!r}")
        self.bottom = bottom
        self.top = top

    def _parse(self, text: str):
        raise NotImplementedError

    def _validate_text(self, text: str) -> ValidationResult:
        try:
            value = self._parse(text)
        except ValueError:
            return ValidationResult.invalid(self.type_message)
        if self.bottom is not None and value < self.bottom:
            return ValidationResult.invalid(f"The value must be at least {self.bottom}")
        if self.top is not None and value > self.top:
            return ValidationResult.invalid(f"The value must be at most {self.top}")
        return ValidationResult.valid()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bottom={self.bottom!r}, top={self.top!r}, mandatory={self.mandatory})"


class IntValidator(_RangeValidator):
    """Whole numbers within an optional [bottom, top] range."""

    type_message = "Must be a whole number"

    def _parse(self, text: str) -> int:
        return int(text)


class DoubleValidator(_RangeValidator):
    """Finite floating point numbers within an optional [bottom, top] range."""

    type_message = "Must be a number"

    def _parse(self, text: str) -> float:
        value = float(text)
        if value != value or value in (float("inf"), float("-inf")):
            raise ValueError(text)
        return value


class DateValidator(_RangeValidator):
    """ISO 8601 dates (YYYY-MM-DD) within an optional [bottom, top] range."""

    type_message = "Must be a date (YYYY-MM-DD)"

    def _parse(self, text: str) -> datetime.date:
        try:
            return datetime.date.fromisoformat(text)
        except ValueError:
            # Text form of a datetime value, e.g. "2001-02-03T04:05:00"
            return datetime.datetime.fromisoformat(text).date()


class LengthValidator(Validator):
    """Text length within an optional [min_length, max_length] range."""

    def __init__(self, min_length: int = 0, max_length: Optional[int] = None, mandatory: bool = False):
        super().__init__(mandatory)
        self.min_length = min_length
        self.max_length = max_length

    def _validate_text(self, text: str) -> ValidationResult:
        if len(text) < self.min_length:
            return ValidationResult.invalid(f"Must be at least {self.min_length} characters")
        if self.max_length is not None and len(text) > self.max_length:
            return ValidationResult.invalid(f"Must be at most {self.max_length} characters")
        return ValidationResult.valid()


class RegExpValidator(Validator):
    """Text that matches a regular expression in full."""

    def __init__(self, pattern: Union[str, Pattern], message: str = "Invalid format", mandatory: bool = False):
        super().__init__(mandatory)
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        self.message = message

    def _validate_text(self, text: str) -> ValidationResult:
        if self.pattern.fullmatch(text) is None:
            return ValidationResult.invalid(self.message)
        return ValidationResult.valid()


class DateRangeValidator(Validator):
    """
    ISO 8601 date intervals ("2024-01-01/2024-01-31").

    Both ends must be present and parse as dates, and start must not come
    after end. The separator comes from FormDelegateConfig.
    """

    def _validate_text(self, text: str) -> ValidationResult:
        separator = get_form_config().date_range_separator
        start_text, sep, end_text = text.partition(separator)
        if not sep or not start_text or not end_text:
            return ValidationResult.invalid("Both start and end dates are required")
        try:
            start = datetime.date.fromisoformat(start_text)
            end = datetime.date.fromisoformat(end_text)
        except ValueError:
            return ValidationResult.invalid("Dates must be formatted as YYYY-MM-DD")
        if start > end:
            logger.debug(f"Rejected date range {text!r}: start after end")
            return ValidationResult.invalid("The start date must not be after the end date")
        return ValidationResult.valid()
