"""
Delegate-driven form view.

Owns one widget per field, created once by the field's delegate, and drives
synchronization in both directions through DelegateDispatcher. Validators
are created once per field and registered on the shared FormModel.

Typical session:
    model = FormModel()
    model.add_field("age")
    view = DelegateFormView(model)
    view.set_form_delegate("age", IntDelegate(bottom=0))
    ...                   # user edits
    if view.validate():   # widget → model, then model validation
        save(model.value("age"))
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Hashable, List, Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QFormLayout, QLabel, QWidget

from pyqt_formdelegate.protocols import ChangeSignalEmitter, get_form_config

from .delegate_dispatcher import DelegateDispatcher
from .exceptions import FieldNotFoundError
from .form_delegate import AbstractFormDelegate
from .form_model import FormModel
from .validators import ValidationResult, Validator

logger = logging.getLogger(__name__)

VALIDATION_PROPERTY = "validationState"


class DelegateFormView(QWidget):
    """
    A QFormLayout of delegate-created widgets bound to one FormModel.

    Customization points, in increasing scope:
    1. Override customize_form_widget() / customize_validator()
    2. Pass a different delegate to set_form_delegate() for one field
    3. Subclass AbstractFormDelegate for a whole field type

    Signals:
        validated(bool): emitted by validate() with the overall outcome
    """

    validated = pyqtSignal(bool)

    def __init__(self, model: FormModel, parent: Optional[QWidget] = None,
                 live_update: Optional[bool] = None):
        super().__init__(parent)
        self._model = model
        self._live_update = get_form_config().live_update if live_update is None else live_update
        self._delegates: Dict[Hashable, AbstractFormDelegate] = {}
        self._widgets: Dict[Hashable, QWidget] = {}
        self._labels: Dict[Hashable, QLabel] = {}
        self._layout = QFormLayout(self)
        # Widget change signals fired while pushing model values are not edits
        self._in_view_update = False

        self._model.validation_changed.connect(self._on_validation_changed)

    @property
    def model(self) -> FormModel:
        return self._model

    # ==================== Delegates and widgets ====================

    def set_form_delegate(self, field: Hashable, delegate: AbstractFormDelegate) -> QWidget:
        """
        Bind a delegate to a field and build the field's widget.

        The widget and validator are created exactly once here. Setting a new
        delegate for a field replaces its widget and validator.

        Returns:
            The widget created for the field

        Raises:
            FieldNotFoundError: If field is not in the model
        """
        if not self._model.has_field(field):
            raise FieldNotFoundError(field)

        if field in self._delegates:
            logger.warning(
                f"Field {field!r} already has delegate {self._delegates[field]!r}. "
                f"Replacing with {delegate!r}."
            )
            self._remove_row(field)

        widget = self.customize_form_widget(field, delegate.create_form_widget())
        validator = self.customize_validator(field, delegate.create_validator())
        self._model.set_validator(field, validator)

        self._delegates[field] = delegate
        self._widgets[field] = widget
        label = QLabel(self._model.label(field), self)
        label.setBuddy(widget)
        if self._model.info(field):
            label.setToolTip(self._model.info(field))
        self._labels[field] = label
        self._layout.addRow(label, widget)

        self.update_view_value(field)

        if self._live_update and isinstance(widget, ChangeSignalEmitter):
            widget.connect_change_signal(lambda _widget, f=field: self._on_widget_changed(f))

        logger.debug(f"Bound {delegate!r} to field {field!r} with {type(widget).__name__}")
        return widget

    def customize_form_widget(self, field: Hashable, widget: QWidget) -> QWidget:
        """Hook to adjust or replace a freshly created widget. Returns it unchanged by default."""
        return widget

    def customize_validator(self, field: Hashable, validator: Optional[Validator]) -> Optional[Validator]:
        """Hook to adjust or replace a freshly created validator. Returns it unchanged by default."""
        return validator

    def form_delegate(self, field: Hashable) -> AbstractFormDelegate:
        return self._delegates[self._require_bound(field)]

    def form_widget(self, field: Hashable) -> QWidget:
        return self._widgets[self._require_bound(field)]

    def fields(self) -> List[Hashable]:
        """Fields that have a delegate, in the order they were added."""
        return list(self._delegates)

    def _require_bound(self, field: Hashable) -> Hashable:
        if field not in self._delegates:
            raise FieldNotFoundError(field)
        return field

    def _remove_row(self, field: Hashable) -> None:
        widget = self._widgets.pop(field)
        del self._delegates[field]
        del self._labels[field]
        self._layout.removeRow(widget)

    # ==================== Synchronization ====================

    def update_model_value(self, field: Hashable) -> None:
        """Widget → model for one field."""
        DelegateDispatcher.update_model_value(
            self._delegates[self._require_bound(field)], self._model, field, self._widgets[field]
        )

    def update_model(self) -> None:
        """Widget → model for every bound field."""
        for field in self._delegates:
            self.update_model_value(field)

    def update_view_value(self, field: Hashable) -> None:
        """Model → widget for one field, including enabled/visible state and validation display."""
        self._in_view_update = True
        try:
            DelegateDispatcher.update_view_value(
                self._delegates[self._require_bound(field)], self._model, field, self._widgets[field]
            )
        finally:
            self._in_view_update = False
        self._apply_field_state(field)
        self.indicate_validation(field, self._model.validation(field))

    def update_view(self) -> None:
        """Model → widget for every bound field."""
        for field in self._delegates:
            self.update_view_value(field)

    def validate(self) -> bool:
        """
        Push widget values into the model and validate it.

        Returns:
            True if every field is valid
        """
        self.update_model()
        valid = self._model.validate()
        logger.debug(f"Form validation {'passed' if valid else 'failed'}")
        self.validated.emit(valid)
        return valid

    def reset(self) -> None:
        """Clear the model and show the cleared values."""
        self._model.reset()
        self.update_view()

    # ==================== Presentation ====================

    def _apply_field_state(self, field: Hashable) -> None:
        visible = self._model.is_visible(field)
        enabled = self._model.is_enabled(field)
        self._widgets[field].setEnabled(enabled)
        self._layout.setRowVisible(self._widgets[field], visible)

    def indicate_validation(self, field: Hashable, result: Optional[ValidationResult]) -> None:
        """
        Reflect a validation result on the field's widget.

        Sets the validationState dynamic property (for style sheet selectors),
        the tooltip to the message, and the configured style for invalid values.
        Override to render messages differently.
        """
        widget = self._widgets[field]
        if result is None:
            widget.setProperty(VALIDATION_PROPERTY, "")
            widget.setToolTip("")
            widget.setStyleSheet("")
            return

        widget.setProperty(VALIDATION_PROPERTY, result.state.value)
        widget.setToolTip(result.message)
        widget.setStyleSheet("" if result.is_valid else get_form_config().invalid_style_sheet)

    def _on_validation_changed(self, field: Any, result: ValidationResult) -> None:
        if field in self._widgets:
            self.indicate_validation(field, result)

    def _on_widget_changed(self, field: Hashable) -> None:
        if self._in_view_update:
            return
        self.update_model_value(field)
        self._model.validate_field(field)
