"""
Concrete form delegates for common field types.

Text-valued fields (str, int, float) use the default text path: the model
holds exactly what the widget shows. Typed fields (bool, date, Enum) and the
composite date range override both custom paths and store typed values.

| Delegate          | Widget           | Path   | Model value                    |
|-------------------|------------------|--------|--------------------------------|
| LineEditDelegate  | LineEditAdapter  | text   | str                            |
| TextAreaDelegate  | TextAreaAdapter  | text   | str                            |
| IntDelegate       | IntEditAdapter   | text   | str                            |
| FloatDelegate     | DoubleEditAdapter| text   | str                            |
| BoolDelegate      | CheckBoxAdapter  | custom | bool                           |
| DateDelegate      | DateEditAdapter  | custom | datetime.date or None          |
| EnumDelegate      | ComboBoxAdapter  | custom | enum member or None            |
| DateRangeDelegate | DateRangeWidget  | custom | "YYYY-MM-DD/YYYY-MM-DD" or ""  |
"""

from __future__ import annotations

import datetime
from typing import Any, Hashable, Optional, Tuple, Type

from pyqt_formdelegate.protocols import (
    CheckBoxAdapter, ComboBoxAdapter, DateEditAdapter, DoubleEditAdapter,
    IntEditAdapter, LineEditAdapter, TextAreaAdapter, get_form_config,
)
from pyqt_formdelegate.protocols.widget_adapters import TRUE_TEXTS
from pyqt_formdelegate.widgets import DateRangeWidget

from .form_delegate import AbstractFormDelegate, SyncResult
from .form_model import FormModel
from .validators import (
    DateRangeValidator, DateValidator, DoubleValidator, IntValidator,
    LengthValidator, Validator,
)


# ==================== Text path delegates ====================

class LineEditDelegate(AbstractFormDelegate):
    """
    Single-line text. Validated only when mandatory or length-limited.

    max_length is checked by the validator only. A QLineEdit maxLength would
    silently truncate longer model values when they are loaded into the view.
    """

    def __init__(self, mandatory: bool = False, max_length: Optional[int] = None):
        self.mandatory = mandatory
        self.max_length = max_length

    def create_form_widget(self) -> LineEditAdapter:
        return LineEditAdapter()

    def create_validator(self) -> Optional[Validator]:
        if not self.mandatory and self.max_length is None:
            return None
        return LengthValidator(max_length=self.max_length, mandatory=self.mandatory)


class TextAreaDelegate(AbstractFormDelegate):
    """Multi-line text."""

    def __init__(self, mandatory: bool = False):
        self.mandatory = mandatory

    def create_form_widget(self) -> TextAreaAdapter:
        return TextAreaAdapter()

    def create_validator(self) -> Optional[Validator]:
        return Validator(mandatory=True) if self.mandatory else None


class IntDelegate(AbstractFormDelegate):
    """
    Whole numbers edited as text.

    The model keeps the raw text so that out-of-range input like "-5"
    reaches the validator instead of being clamped by the widget.
    """

    def __init__(self, bottom: Optional[int] = None, top: Optional[int] = None, mandatory: bool = False):
        self.bottom = bottom
        self.top = top
        self.mandatory = mandatory

    def create_form_widget(self) -> IntEditAdapter:
        return IntEditAdapter()

    def create_validator(self) -> Validator:
        return IntValidator(self.bottom, self.top, mandatory=self.mandatory)


class FloatDelegate(AbstractFormDelegate):
    """Floating point numbers edited as text."""

    def __init__(self, bottom: Optional[float] = None, top: Optional[float] = None, mandatory: bool = False):
        self.bottom = bottom
        self.top = top
        self.mandatory = mandatory

    def create_form_widget(self) -> DoubleEditAdapter:
        return DoubleEditAdapter()

    def create_validator(self) -> Validator:
        return DoubleValidator(self.bottom, self.top, mandatory=self.mandatory)


# ==================== Custom path delegates ====================

class BoolDelegate(AbstractFormDelegate):
    """Check box storing a real bool in the model."""

    def create_form_widget(self) -> CheckBoxAdapter:
        return CheckBoxAdapter()

    def try_update_model_value(self, model: FormModel, field: Hashable, widget: Any) -> SyncResult:
        edit = self.require_widget(widget, CheckBoxAdapter)
        model.set_value(field, edit.isChecked())
        return SyncResult.HANDLED

    def try_update_view_value(self, model: FormModel, field: Hashable, widget: Any) -> SyncResult:
        edit = self.require_widget(widget, CheckBoxAdapter)
        value = model.value(field)
        if isinstance(value, str):
            # Loaded as text, e.g. from a query string
            value = value.strip().lower() in TRUE_TEXTS
        edit.setChecked(bool(value))
        return SyncResult.HANDLED


def _to_date(value: Any) -> Optional[datetime.date]:
    """Coerce a stored value (date, datetime, ISO text, None) to a date."""
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return datetime.date.fromisoformat(text)
        except ValueError:
            return datetime.datetime.fromisoformat(text).date()
    raise TypeError(f"Cannot interpret {type(value).__name__} {value!r} as a date")


class DateDelegate(AbstractFormDelegate):
    """Date edit storing datetime.date (or None when empty) in the model."""

    def __init__(self, bottom: Optional[datetime.date] = None, top: Optional[datetime.date] = None,
                 mandatory: bool = False):
        self.bottom = bottom
        self.top = top
        self.mandatory = mandatory

    def create_form_widget(self) -> DateEditAdapter:
        return DateEditAdapter()

    def create_validator(self) -> Optional[Validator]:
        if self.bottom is None and self.top is None and not self.mandatory:
            return None
        return DateValidator(self.bottom, self.top, mandatory=self.mandatory)

    def try_update_model_value(self, model: FormModel, field: Hashable, widget: Any) -> SyncResult:
        edit = self.require_widget(widget, DateEditAdapter)
        model.set_value(field, edit.date_value())
        return SyncResult.HANDLED

    def try_update_view_value(self, model: FormModel, field: Hashable, widget: Any) -> SyncResult:
        edit = self.require_widget(widget, DateEditAdapter)
        edit.set_date_value(_to_date(model.value(field)))
        return SyncResult.HANDLED


class EnumDelegate(AbstractFormDelegate):
    """
    Combo box over an Enum, storing the selected member itself.

    Selection is by member identity, not by display text. A member name stored as text is accepted when loading the view.
    """

    def __init__(self, enum_type: Type, mandatory: bool = False):
        self.enum_type = enum_type
        self.mandatory = mandatory

    def create_form_widget(self) -> ComboBoxAdapter:
        widget = ComboBoxAdapter()
        widget.populate_enum(self.enum_type)
        widget.setPlaceholderText(f"Select {self.enum_type.__name__}")
        return widget

    def create_validator(self) -> Optional[Validator]:
        return Validator(mandatory=True) if self.mandatory else None

    def try_update_model_value(self, model: FormModel, field: Hashable, widget: Any) -> SyncResult:
        edit = self.require_widget(widget, ComboBoxAdapter)
        model.set_value(field, edit.selected_data())
        return SyncResult.HANDLED

    def try_update_view_value(self, model: FormModel, field: Hashable, widget: Any) -> SyncResult:
        edit = self.require_widget(widget, ComboBoxAdapter)
        value = model.value(field)
        if isinstance(value, str) and not isinstance(value, self.enum_type):
            value = self.enum_type[value] if value else None
        edit.select_data(value)
        return SyncResult.HANDLED

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.enum_type.__name__})"


class DateRangeDelegate(AbstractFormDelegate):
    """
    Composite start/end date field.

    The model holds an ISO 8601 interval "YYYY-MM-DD/YYYY-MM-DD" (separator
    from FormDelegateConfig), an empty string when both ends are empty, and
    an empty side when only one end is set so the validator can reject it.
    A (start, end) tuple set programmatically is accepted when loading the view.
    """

    def __init__(self, mandatory: bool = False):
        self.mandatory = mandatory

    def create_form_widget(self) -> DateRangeWidget:
        return DateRangeWidget()

    def create_validator(self) -> Validator:
        return DateRangeValidator(mandatory=self.mandatory)

    def try_update_model_value(self, model: FormModel, field: Hashable, widget: Any) -> SyncResult:
        edit = self.require_widget(widget, DateRangeWidget)
        start, end = edit.date_range()
        model.set_value(field, self.merge(start, end))
        return SyncResult.HANDLED

    def try_update_view_value(self, model: FormModel, field: Hashable, widget: Any) -> SyncResult:
        edit = self.require_widget(widget, DateRangeWidget)
        value = model.value(field)
        if isinstance(value, tuple):
            start, end = (_to_date(part) for part in value)
        else:
            start, end = self.split(model.value_text(field))
        edit.set_date_range(start, end)
        return SyncResult.HANDLED

    @staticmethod
    def merge(start: Optional[datetime.date], end: Optional[datetime.date]) -> str:
        """Join two dates into the model's interval text."""
        if start is None and end is None:
            return ""
        separator = get_form_config().date_range_separator
        start_text = start.isoformat() if start is not None else ""
        end_text = end.isoformat() if end is not None else ""
        return f"{start_text}{separator}{end_text}"

    @staticmethod
    def split(text: str) -> Tuple[Optional[datetime.date], Optional[datetime.date]]:
        """Inverse of merge(). Raises ValueError for malformed dates."""
        if not text.strip():
            return None, None
        start_text, _, end_text = text.partition(get_form_config().date_range_separator)
        return _to_date(start_text), _to_date(end_text)
