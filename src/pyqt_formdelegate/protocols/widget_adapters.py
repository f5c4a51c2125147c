"""
Widget adapters that wrap Qt widgets to implement the form widget ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QPlainTextEdit.toPlainText() vs QDateEdit.date()
- QLineEdit.setText() vs QCheckBox.setChecked() vs QComboBox.setCurrentIndex()
- textChanged vs toggled vs currentIndexChanged vs dateChanged

All adapters implement a consistent interface via ABCs:
- value_text() / set_value_text() for the default synchronization path
- connect_change_signal() for live updates
"""

import datetime
from abc import ABCMeta
from enum import Enum
from typing import Any, Callable, Dict, Optional

from PyQt6.QtCore import QDate, QLocale, QObject, Qt
from PyQt6.QtGui import QDoubleValidator, QIntValidator
from PyQt6.QtWidgets import QCheckBox, QComboBox, QDateEdit, QLineEdit, QPlainTextEdit

from .form_config import get_form_config
from .widget_protocols import ChangeSignalEmitter, FormWidget

# PyQt-specific metaclass that combines ABCMeta with Qt's metaclass
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


TRUE_TEXTS = frozenset({"true", "1", "yes", "on"})

# Item role holding the key of a ComboBoxAdapter item's Python data
ITEM_DATA_KEY_ROLE = Qt.ItemDataRole.UserRole + 1

# Stand-in for "no date" in DateEditAdapter; Qt's lowest allowed editor date
EMPTY_DATE = datetime.date(100, 1, 1)


def _connect_change(widget: Any, signal: Any, callback: Callable[[Any], None]) -> None:
    """Connect callback to signal, remembering the slot so it can be disconnected."""
    if callback in widget._change_slots:
        return
    slot = widget._change_slots[callback] = lambda *_: callback(widget)
    signal.connect(slot)


def _disconnect_change(widget: Any, signal: Any, callback: Callable[[Any], None]) -> None:
    slot = widget._change_slots.pop(callback, None)
    if slot is None:
        # Never connected
        return
    signal.disconnect(slot)


class LineEditAdapter(QLineEdit, FormWidget, ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QLineEdit.

    The text is passed through untouched so that model → view → model
    round trips are exact. Do not set a maxLength on it: QLineEdit.setText
    would truncate longer model values. Length limits belong to a Validator.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._change_slots: Dict[Callable, Callable] = {}

    def value_text(self) -> str:
        """Implement ValueTextGettable ABC."""
        return self.text()

    def set_value_text(self, text: str) -> None:
        """Implement ValueTextSettable ABC."""
        self.setText(text)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        _connect_change(self, self.textChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        _disconnect_change(self, self.textChanged, callback)


class IntEditAdapter(LineEditAdapter):
    """
    QLineEdit restricted to integer typing.

    The QIntValidator only filters keystrokes. Text set programmatically is
    kept as-is, so range checks belong to the field's Validator.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setValidator(QIntValidator(self))


class DoubleEditAdapter(LineEditAdapter):
    """QLineEdit restricted to floating point typing in the C locale."""

    def __init__(self, parent=None):
        super().__init__(parent)
        validator = QDoubleValidator(self)
        validator.setLocale(QLocale(QLocale.Language.C))
        validator.setNotation(QDoubleValidator.Notation.StandardNotation)
        self.setValidator(validator)


class TextAreaAdapter(QPlainTextEdit, FormWidget, ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """Adapter for multi-line plain text."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._change_slots: Dict[Callable, Callable] = {}

    def value_text(self) -> str:
        """Implement ValueTextGettable ABC."""
        return self.toPlainText()

    def set_value_text(self, text: str) -> None:
        """Implement ValueTextSettable ABC."""
        self.setPlainText(text)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        _connect_change(self, self.textChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        _disconnect_change(self, self.textChanged, callback)


class CheckBoxAdapter(QCheckBox, FormWidget, ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QCheckBox.

    Text form is "true"/"false". Any text outside TRUE_TEXTS unchecks.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._change_slots: Dict[Callable, Callable] = {}

    def value_text(self) -> str:
        """Implement ValueTextGettable ABC."""
        return "true" if self.isChecked() else "false"

    def set_value_text(self, text: str) -> None:
        """Implement ValueTextSettable ABC."""
        self.setChecked(text.strip().lower() in TRUE_TEXTS)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        _connect_change(self, self.toggled, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        _disconnect_change(self, self.toggled, callback)


class ComboBoxAdapter(QComboBox, FormWidget, ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QComboBox.

    The text path selects by display text. Python data added through
    add_item() lives in a dict keyed by an int stored on the item itself
    (ITEM_DATA_KEY_ROLE), so it follows the item through the inherited
    insertItem/removeItem/addItem calls. Storing the object in a QVariant
    instead would convert int-like enums to plain ints. Items added
    without add_item() carry no data.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._change_slots: Dict[Callable, Callable] = {}
        self._item_data: Dict[int, Any] = {}
        self._next_key = 0

    def value_text(self) -> str:
        """Implement ValueTextGettable ABC."""
        if self.currentIndex() < 0:
            return ""
        return self.currentText()

    def set_value_text(self, text: str) -> None:
        """Implement ValueTextSettable ABC."""
        # findText returns -1 for unknown text, which clears the selection
        self.setCurrentIndex(self.findText(text))

    def add_item(self, text: str, data: Any = None) -> None:
        """Append an item carrying arbitrary Python data."""
        key = self._next_key
        self._next_key += 1
        self._item_data[key] = data
        self.addItem(text)
        self.setItemData(self.count() - 1, key, ITEM_DATA_KEY_ROLE)

    def clear_items(self) -> None:
        self._item_data.clear()
        self.clear()

    def populate_enum(self, enum_type: type) -> None:
        """
        Populate combobox with enum members, leaving nothing selected.

        Args:
            enum_type: The Enum class to populate from
        """
        if not isinstance(enum_type, type) or not issubclass(enum_type, Enum):
            raise TypeError(f"{enum_type} is not an Enum type")

        self.clear_items()
        for member in enum_type:
            self.add_item(member.name, member)
        self.setCurrentIndex(-1)

    def item_python_data(self, index: int) -> Any:
        """Data passed to add_item() for the item at index, or None."""
        key = self.itemData(index, ITEM_DATA_KEY_ROLE)
        if key is None:
            return None
        return self._item_data.get(key)

    def selected_data(self) -> Any:
        """Data of the current item, or None when nothing is selected."""
        index = self.currentIndex()
        if index < 0:
            return None
        return self.item_python_data(index)

    def select_data(self, data: Any) -> None:
        """Select the item whose data is `data` (identity), or clear the selection."""
        if data is not None:
            for index in range(self.count()):
                if self.item_python_data(index) is data:
                    self.setCurrentIndex(index)
                    return
        self.setCurrentIndex(-1)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        _connect_change(self, self.currentIndexChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        _disconnect_change(self, self.currentIndexChanged, callback)


class DateEditAdapter(QDateEdit, FormWidget, ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QDateEdit with an empty state.

    QDateEdit always holds a date, so EMPTY_DATE (set as the minimum date)
    doubles as "no date" and is shown blank through the special value text.
    Dates at or before EMPTY_DATE cannot be shown and raise ValueError
    rather than being clamped to the empty state. Text form is ISO 8601
    (YYYY-MM-DD) regardless of the display format.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._change_slots: Dict[Callable, Callable] = {}
        self.setMinimumDate(QDate(EMPTY_DATE.year, EMPTY_DATE.month, EMPTY_DATE.day))
        self.setCalendarPopup(True)
        self.setDisplayFormat(get_form_config().date_display_format)
        self.setSpecialValueText(" ")
        self.setDate(self.minimumDate())

    def date_value(self) -> Optional[datetime.date]:
        """Current date, or None when empty."""
        if self.date() == self.minimumDate():
            return None
        return self.date().toPyDate()

    def set_date_value(self, value: Optional[datetime.date]) -> None:
        """
        Set the current date. None clears the widget.

        Raises:
            ValueError: If value is at or before EMPTY_DATE
        """
        if value is None:
            self.setDate(self.minimumDate())
            return
        if value <= EMPTY_DATE:
            raise ValueError(
                f"{type(self).__name__} cannot display {value.isoformat()}: "
                f"dates must be after {EMPTY_DATE.isoformat()}"
            )
        self.setDate(QDate(value.year, value.month, value.day))

    def value_text(self) -> str:
        """Implement ValueTextGettable ABC."""
        value = self.date_value()
        return "" if value is None else value.isoformat()

    def set_value_text(self, text: str) -> None:
        """Implement ValueTextSettable ABC."""
        if not text.strip():
            self.set_date_value(None)
            return
        parsed = QDate.fromString(text.strip(), Qt.DateFormat.ISODate)
        if not parsed.isValid():
            raise ValueError(f"{type(self).__name__} cannot display {text!r}: not an ISO date")
        self.set_date_value(parsed.toPyDate())

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        _connect_change(self, self.dateChanged, callback)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        _disconnect_change(self, self.dateChanged, callback)
