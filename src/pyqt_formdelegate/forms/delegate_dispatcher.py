"""
Delegate dispatcher: the one place the dual-dispatch protocol is run.

For each sync direction:
1. The field must exist in the model (FieldNotFoundError otherwise)
2. The delegate's custom path runs first
3. HANDLED stops here; the text path never runs after it
4. NOT_HANDLED falls back to the text path, which needs the widget to
   implement the matching text ABC (WidgetMismatchError otherwise)

Anything other than a SyncResult from a custom path is rejected, so a
stray True/False/None can never be mistaken for "handled".

Design Philosophy:
- Explicit over implicit
- Fail-loud over fail-silent
- Errors from widgets and model propagate unchanged
"""

import logging
from enum import Enum
from typing import Any, Hashable

from pyqt_formdelegate.protocols import ValueTextGettable, ValueTextSettable, get_form_config

from .exceptions import FieldNotFoundError, SyncResultError, WidgetMismatchError
from .form_delegate import AbstractFormDelegate, SyncResult
from .form_model import FormModel

logger = logging.getLogger(__name__)


class SyncPath(Enum):
    """Which path carried a synchronization."""
    CUSTOM = "custom"
    TEXT = "text"


class DelegateDispatcher:
    """
    Runs delegate synchronization with custom-first precedence.

    Example:
        path = DelegateDispatcher.update_model_value(delegate, model, "age", widget)
        # SyncPath.TEXT for a plain line edit delegate

        DelegateDispatcher.update_view_value(delegate, model, "age", widget)
    """

    @staticmethod
    def update_model_value(delegate: AbstractFormDelegate, model: FormModel,
                           field: Hashable, widget: Any) -> SyncPath:
        """
        Synchronize widget → model.

        Args:
            delegate: The field's delegate
            model: The form session's model
            field: Field identifier, must already be in the model
            widget: The widget created by the delegate

        Returns:
            The path that performed the update

        Raises:
            FieldNotFoundError: If field is not in the model
            SyncResultError: If the custom path returns a non-SyncResult
            WidgetMismatchError: If the text path is needed and widget is not ValueTextGettable
        """
        _require_field(model, field)

        result = delegate.try_update_model_value(model, field, widget)
        if _is_handled(delegate, "try_update_model_value", result):
            _trace("model", delegate, field, SyncPath.CUSTOM)
            return SyncPath.CUSTOM

        if not isinstance(widget, ValueTextGettable):
            raise WidgetMismatchError(
                f"Widget {type(widget).__name__} for field {field!r} does not implement "
                f"ValueTextGettable ABC and {type(delegate).__name__} did not handle "
                f"try_update_model_value(). Implement value_text() on the widget or "
                f"return SyncResult.HANDLED from the delegate."
            )
        delegate.update_model_value(model, field, widget)
        _trace("model", delegate, field, SyncPath.TEXT)
        return SyncPath.TEXT

    @staticmethod
    def update_view_value(delegate: AbstractFormDelegate, model: FormModel,
                          field: Hashable, widget: Any) -> SyncPath:
        """
        Synchronize model → widget.

        Same contract as update_model_value(), in the other direction. The
        text path needs the widget to implement ValueTextSettable.
        """
        _require_field(model, field)

        result = delegate.try_update_view_value(model, field, widget)
        if _is_handled(delegate, "try_update_view_value", result):
            _trace("view", delegate, field, SyncPath.CUSTOM)
            return SyncPath.CUSTOM

        if not isinstance(widget, ValueTextSettable):
            raise WidgetMismatchError(
                f"Widget {type(widget).__name__} for field {field!r} does not implement "
                f"ValueTextSettable ABC and {type(delegate).__name__} did not handle "
                f"try_update_view_value(). Implement set_value_text() on the widget or "
                f"return SyncResult.HANDLED from the delegate."
            )
        delegate.update_view_value(model, field, widget)
        _trace("view", delegate, field, SyncPath.TEXT)
        return SyncPath.TEXT


def _require_field(model: FormModel, field: Hashable) -> None:
    if not model.has_field(field):
        raise FieldNotFoundError(field)


def _is_handled(delegate: AbstractFormDelegate, method: str, result: Any) -> bool:
    if not isinstance(result, SyncResult):
        raise SyncResultError(
            f"{type(delegate).__name__}.{method}() returned {result!r}. "
            f"Custom sync paths must return SyncResult.HANDLED or SyncResult.NOT_HANDLED."
        )
    return result is SyncResult.HANDLED


def _trace(direction: str, delegate: AbstractFormDelegate, field: Hashable, path: SyncPath) -> None:
    if get_form_config().debug_dispatch:
        logger.info(f"SYNC → {direction}: {field!r} via {path.value} path ({type(delegate).__name__})")
    else:
        logger.debug(f"Synced {field!r} to {direction} via {path.value} path")
