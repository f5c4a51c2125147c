"""
Composite date range widget.

Two date edits side by side. The widget deliberately does not implement the
text ABCs: its value is a pair, and DateRangeDelegate owns the conversion
to and from the model's representation.
"""

import datetime
from typing import Any, Callable, Dict, Optional, Tuple

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QWidget

from pyqt_formdelegate.protocols import ChangeSignalEmitter, DateEditAdapter, PyQtWidgetMeta


class DateRangeWidget(QWidget, ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """Start and end date editors with a range accessor."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._relays: Dict[Callable, Callable] = {}
        self.start_edit = DateEditAdapter(self)
        self.end_edit = DateEditAdapter(self)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.start_edit)
        layout.addWidget(QLabel("to", self))
        layout.addWidget(self.end_edit)

    def date_range(self) -> Tuple[Optional[datetime.date], Optional[datetime.date]]:
        """Current (start, end); either end is None when empty."""
        return self.start_edit.date_value(), self.end_edit.date_value()

    def set_date_range(self, start: Optional[datetime.date], end: Optional[datetime.date]) -> None:
        self.start_edit.set_date_value(start)
        self.end_edit.set_date_value(end)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC. The callback receives this widget."""
        relay = self._relays
        if callback in relay:
            return
        relay[callback] = lambda _edit: callback(self)
        self.start_edit.connect_change_signal(relay[callback])
        self.end_edit.connect_change_signal(relay[callback])

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        slot = self._relays.pop(callback, None)
        if slot is None:
            return
        self.start_edit.disconnect_change_signal(slot)
        self.end_edit.disconnect_change_signal(slot)
