"""
Widget ABC contracts for delegate-driven forms.

A widget takes part in the default (text) synchronization path only if it
declares the matching capability through inheritance. Composite widgets that
cannot be represented by a single text value simply do not inherit these and
must be paired with a delegate that handles both custom paths.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Multiple inheritance for composable capabilities
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class ValueTextGettable(ABC):
    """
    ABC for widgets that can report their current value as text.

    Required for the text path in the widget → model direction.
    """

    @abstractmethod
    def value_text(self) -> str:
        """
        Get the widget's current value as text.

        Returns:
            Text representation of the current value. Empty string if no value.
        """
        pass


class ValueTextSettable(ABC):
    """
    ABC for widgets that can accept a value as text.

    Required for the text path in the model → widget direction.
    """

    @abstractmethod
    def set_value_text(self, text: str) -> None:
        """
        Apply a text representation as the widget's current value.

        Args:
            text: The text to apply. Empty string clears the widget.
        """
        pass


class FormWidget(ValueTextGettable, ValueTextSettable):
    """
    Both text capabilities together.

    Widgets inheriting this can be synchronized in both directions by a
    delegate that does not override the custom paths.
    """


class ChangeSignalEmitter(ABC):
    """
    ABC for widgets that emit change signals.

    Provides an explicit contract for signal connection, so the form view
    does not need to know whether a widget uses textChanged, stateChanged or
    dateChanged.
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to the widget's change signal.

        Args:
            callback: Called with the widget itself whenever its value changes.
        """
        pass

    @abstractmethod
    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Disconnect callback from the widget's change signal.

        Args:
            callback: The callback previously passed to connect_change_signal
        """
        pass
