"""
Form model: the per-session staging store for edited field values.

One FormModel exists per form session and is shared by reference between
the view and every delegate of that form. Delegates only use it as a
key-value store keyed by field; the model never reads widgets itself.
"""

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Hashable, List, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from .exceptions import FieldNotFoundError
from .validators import ValidationResult, Validator

logger = logging.getLogger(__name__)


@dataclass
class FieldData:
    """Mutable per-field state held by the FormModel."""
    value: Any = None
    validator: Optional[Validator] = None
    validation: Optional[ValidationResult] = None
    validated: bool = False
    enabled: bool = True
    visible: bool = True
    label: str = ""
    info: str = ""


def value_to_text(value: Any) -> str:
    """
    Convert a stored field value to its text form.

    None becomes "", booleans become "true"/"false", dates and times use
    ISO 8601 and enum members use their name. Anything else goes through str().
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime.date, datetime.time)):
        # datetime.datetime is a date subclass
        return value.isoformat()
    if isinstance(value, Enum):
        return value.name
    return str(value)


class FormModel(QObject):
    """
    Field identifier → value/validation/flags mapping for one form session.

    Every accessor raises FieldNotFoundError for a field that was never
    added: using an unknown field is a form-construction bug.

    Signals:
        value_changed(field, value): emitted by set_value()
        validation_changed(field, result): emitted whenever a validation result is stored
    """

    value_changed = pyqtSignal(object, object)
    validation_changed = pyqtSignal(object, object)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._fields: Dict[Hashable, FieldData] = {}

    # ==================== Field registry ====================

    def add_field(self, field: Hashable, info: str = "", label: Optional[str] = None) -> None:
        """
        Add a field to the model.

        Args:
            field: Field identifier, unique within this model
            info: Optional help text for the field
            label: Display label. Derived from the identifier when omitted
        """
        if field in self._fields:
            logger.warning(f"Field {field!r} already in form model. Resetting its state.")
        if label is None:
            label = str(field).replace("_", " ").capitalize()
        self._fields[field] = FieldData(label=label, info=info)
        logger.debug(f"Added field {field!r} to form model")

    def remove_field(self, field: Hashable) -> None:
        self._data(field)
        del self._fields[field]

    def has_field(self, field: Hashable) -> bool:
        return field in self._fields

    def fields(self) -> List[Hashable]:
        """Field identifiers in insertion order."""
        return list(self._fields)

    def _data(self, field: Hashable) -> FieldData:
        try:
            return self._fields[field]
        except KeyError:
            raise FieldNotFoundError(field) from None

    # ==================== Values ====================

    def value(self, field: Hashable) -> Any:
        return self._data(field).value

    def set_value(self, field: Hashable, value: Any) -> None:
        """Store a raw value for field. The only way a value enters the model."""
        self._data(field).value = value
        self.value_changed.emit(field, value)

    def value_text(self, field: Hashable) -> str:
        """The field's value in text form (see value_to_text)."""
        return value_to_text(self.value(field))

    def reset(self) -> None:
        """Clear every value and validation result. Validators and flags are kept."""
        for data in self._fields.values():
            data.value = None
            data.validation = None
            data.validated = False
        logger.debug(f"Reset form model with {len(self._fields)} fields")

    # ==================== Validation ====================

    def validator(self, field: Hashable) -> Optional[Validator]:
        return self._data(field).validator

    def set_validator(self, field: Hashable, validator: Optional[Validator]) -> None:
        self._data(field).validator = validator

    def validate_field(self, field: Hashable) -> bool:
        """
        Validate one field and store the result.

        Invisible fields are skipped and count as valid. A field without a
        validator always validates as VALID.

        Returns:
            True if the field is valid
        """
        data = self._data(field)
        if not data.visible:
            return True

        if data.validator is None:
            result = ValidationResult.valid()
        else:
            result = data.validator.validate(self.value_text(field))
        self.set_validation(field, result)
        return result.is_valid

    def validate(self) -> bool:
        """Validate every field. Returns True only if all of them are valid."""
        # Validate all fields even after the first failure so each gets a result
        results = [self.validate_field(field) for field in self._fields]
        return all(results)

    def validation(self, field: Hashable) -> Optional[ValidationResult]:
        """Last stored validation result, or None if never validated."""
        return self._data(field).validation

    def set_validation(self, field: Hashable, result: ValidationResult) -> None:
        data = self._data(field)
        data.validation = result
        data.validated = True
        self.validation_changed.emit(field, result)

    def is_validated(self, field: Hashable) -> bool:
        return self._data(field).validated

    def set_validated(self, field: Hashable, validated: bool) -> None:
        self._data(field).validated = validated

    def is_valid(self) -> bool:
        """True if every visible field has been validated and is valid."""
        for data in self._fields.values():
            if not data.visible:
                continue
            if not data.validated or data.validation is None or not data.validation.is_valid:
                return False
        return True

    # ==================== Flags and labels ====================

    def is_enabled(self, field: Hashable) -> bool:
        return self._data(field).enabled

    def set_enabled(self, field: Hashable, enabled: bool) -> None:
        self._data(field).enabled = enabled

    def is_visible(self, field: Hashable) -> bool:
        return self._data(field).visible

    def set_visible(self, field: Hashable, visible: bool) -> None:
        self._data(field).visible = visible

    def label(self, field: Hashable) -> str:
        return self._data(field).label

    def info(self, field: Hashable) -> str:
        return self._data(field).info
