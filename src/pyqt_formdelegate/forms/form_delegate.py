"""
Abstract form delegate.

A form delegate is bound to one field and knows three things about it:
which widget edits it, which validator (if any) constrains it, and how to
move its value between that widget and the FormModel.

Each sync direction has two entry points:

- the text path (update_model_value / update_view_value), used with widgets
  implementing ValueTextGettable / ValueTextSettable
- the custom path (try_update_model_value / try_update_view_value), used with
  widgets whose value is not a single text (composite widgets, selection by
  identity, typed values)

Delegates override one or the other per direction, never both. The custom
path is always consulted first and returns SyncResult.HANDLED to suppress the
text path. DelegateDispatcher is the only caller that is allowed to run the
two paths, so the precedence is enforced in one place.

Delegates hold no per-widget state: model, field and widget are passed in on
every call, so one delegate may serve many widgets and forms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, Hashable, Optional, Type, TypeVar

from PyQt6.QtWidgets import QWidget

from pyqt_formdelegate.protocols import ValueTextGettable, ValueTextSettable

from .exceptions import WidgetMismatchError

if TYPE_CHECKING:
    from .form_model import FormModel
    from .validators import Validator

W = TypeVar("W")


class SyncResult(Enum):
    """Outcome of a custom sync path."""
    HANDLED = "handled"
    NOT_HANDLED = "not_handled"


class AbstractFormDelegate(ABC):
    """
    Base class for field delegates.

    Subclasses must implement create_form_widget(). Everything else has a
    default: no validator, text path in both directions, custom paths that
    report NOT_HANDLED.

    Example:
        class UpperCaseDelegate(AbstractFormDelegate):
            def create_form_widget(self):
                return LineEditAdapter()

            def update_model_value(self, model, field, edit):
                model.set_value(field, edit.value_text().upper())
    """

    @abstractmethod
    def create_form_widget(self) -> QWidget:
        """
        Create the widget used to edit this field.

        Every call must return a new, independent widget owned by the caller.
        """
        pass

    def create_validator(self) -> Optional["Validator"]:
        """
        Create the validator for this field.

        Called once per field per form; the form keeps the result. The
        default is no validation.
        """
        return None

    def update_model_value(self, model: "FormModel", field: Hashable, edit: ValueTextGettable) -> None:
        """
        Text path, widget → model.

        Stores the widget's text as the field's raw value.
        """
        model.set_value(field, edit.value_text())

    def try_update_model_value(self, model: "FormModel", field: Hashable, widget: QWidget) -> SyncResult:
        """
        Custom path, widget → model.

        Override for widgets the text path cannot handle and return
        SyncResult.HANDLED, otherwise the text path runs afterwards and
        overwrites whatever was stored here.
        """
        return SyncResult.NOT_HANDLED

    def update_view_value(self, model: "FormModel", field: Hashable, edit: ValueTextSettable) -> None:
        """
        Text path, model → widget.

        Pushes the field's text form into the widget.
        """
        edit.set_value_text(model.value_text(field))

    def try_update_view_value(self, model: "FormModel", field: Hashable, widget: QWidget) -> SyncResult:
        """
        Custom path, model → widget.

        Same contract as try_update_model_value(), in the other direction.
        """
        return SyncResult.NOT_HANDLED

    def require_widget(self, widget: Any, widget_type: Type[W]) -> W:
        """
        Fail fast if a custom path got a widget of the wrong type.

        The widget/delegate pairing is fixed when the form is built, so a
        mismatch here is a programming error.

        Raises:
            WidgetMismatchError: If widget is not an instance of widget_type
        """
        if not isinstance(widget, widget_type):
            raise WidgetMismatchError(
                f"{type(self).__name__} expects a {widget_type.__name__} widget, "
                f"got {type(widget).__name__}. Pair the delegate with the widget "
                f"returned by its create_form_widget()."
            )
        return widget

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
