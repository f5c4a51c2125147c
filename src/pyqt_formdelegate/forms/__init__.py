"""
Form delegates, form model and form view.

Delegates create a field's widget and validator and synchronize its value
with the FormModel; DelegateDispatcher runs the custom-then-text update
protocol; DelegateFormView ties fields, widgets and the model together.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .form_delegate import AbstractFormDelegate, SyncResult
    from .delegate_dispatcher import DelegateDispatcher, SyncPath
    from .form_model import FormModel, FieldData, value_to_text
    from .form_view import DelegateFormView
    from .validators import Validator, ValidationResult, ValidationState

_EXPORTS = {
    "AbstractFormDelegate": ("pyqt_formdelegate.forms.form_delegate", "AbstractFormDelegate"),
    "SyncResult": ("pyqt_formdelegate.forms.form_delegate", "SyncResult"),
    "DelegateDispatcher": ("pyqt_formdelegate.forms.delegate_dispatcher", "DelegateDispatcher"),
    "SyncPath": ("pyqt_formdelegate.forms.delegate_dispatcher", "SyncPath"),
    "FormModel": ("pyqt_formdelegate.forms.form_model", "FormModel"),
    "FieldData": ("pyqt_formdelegate.forms.form_model", "FieldData"),
    "value_to_text": ("pyqt_formdelegate.forms.form_model", "value_to_text"),
    "DelegateFormView": ("pyqt_formdelegate.forms.form_view", "DelegateFormView"),
    "Validator": ("pyqt_formdelegate.forms.validators", "Validator"),
    "ValidationResult": ("pyqt_formdelegate.forms.validators", "ValidationResult"),
    "ValidationState": ("pyqt_formdelegate.forms.validators", "ValidationState"),
    "IntValidator": ("pyqt_formdelegate.forms.validators", "IntValidator"),
    "DoubleValidator": ("pyqt_formdelegate.forms.validators", "DoubleValidator"),
    "DateValidator": ("pyqt_formdelegate.forms.validators", "DateValidator"),
    "DateRangeValidator": ("pyqt_formdelegate.forms.validators", "DateRangeValidator"),
    "LengthValidator": ("pyqt_formdelegate.forms.validators", "LengthValidator"),
    "RegExpValidator": ("pyqt_formdelegate.forms.validators", "RegExpValidator"),
    "LineEditDelegate": ("pyqt_formdelegate.forms.delegates", "LineEditDelegate"),
    "TextAreaDelegate": ("pyqt_formdelegate.forms.delegates", "TextAreaDelegate"),
    "IntDelegate": ("pyqt_formdelegate.forms.delegates", "IntDelegate"),
    "FloatDelegate": ("pyqt_formdelegate.forms.delegates", "FloatDelegate"),
    "BoolDelegate": ("pyqt_formdelegate.forms.delegates", "BoolDelegate"),
    "DateDelegate": ("pyqt_formdelegate.forms.delegates", "DateDelegate"),
    "EnumDelegate": ("pyqt_formdelegate.forms.delegates", "EnumDelegate"),
    "DateRangeDelegate": ("pyqt_formdelegate.forms.delegates", "DateRangeDelegate"),
    "FormDelegateError": ("pyqt_formdelegate.forms.exceptions", "FormDelegateError"),
    "FieldNotFoundError": ("pyqt_formdelegate.forms.exceptions", "FieldNotFoundError"),
    "WidgetMismatchError": ("pyqt_formdelegate.forms.exceptions", "WidgetMismatchError"),
    "SyncResultError": ("pyqt_formdelegate.forms.exceptions", "SyncResultError"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
