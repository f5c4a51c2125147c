"""Tests for the delegate-driven form view."""

import datetime

import pytest

from pyqt_formdelegate.forms.delegates import DateRangeDelegate, IntDelegate, LineEditDelegate
from pyqt_formdelegate.forms.exceptions import FieldNotFoundError
from pyqt_formdelegate.forms.form_model import FormModel
from pyqt_formdelegate.forms.form_view import VALIDATION_PROPERTY, DelegateFormView
from pyqt_formdelegate.forms.validators import IntValidator


class CountingDelegate(LineEditDelegate):
    """Counts widget and validator creation."""

    def __init__(self):
        super().__init__(mandatory=True)
        self.widgets_created = 0
        self.validators_created = 0

    def create_form_widget(self):
        self.widgets_created += 1
        return super().create_form_widget()

    def create_validator(self):
        self.validators_created += 1
        return super().create_validator()


@pytest.fixture
def model():
    model = FormModel()
    model.add_field("name")
    model.add_field("age", info="Age in years")
    model.add_field("stay")
    return model


@pytest.fixture
def view(qapp, model, form_config):
    view = DelegateFormView(model)
    view.set_form_delegate("name", LineEditDelegate())
    view.set_form_delegate("age", IntDelegate(bottom=0))
    view.set_form_delegate("stay", DateRangeDelegate())
    return view


def test_widgets_and_validators_created_once(qapp, model):
    view = DelegateFormView(model)
    delegate = CountingDelegate()
    view.set_form_delegate("name", delegate)

    view.update_view()
    view.validate()
    view.update_model()

    assert delegate.widgets_created == 1
    assert delegate.validators_created == 1
    assert model.validator("name") is not None


def test_unknown_field_is_fatal(qapp, model):
    view = DelegateFormView(model)
    with pytest.raises(FieldNotFoundError):
        view.set_form_delegate("email", LineEditDelegate())
    with pytest.raises(FieldNotFoundError):
        view.form_widget("name")


def test_fields_and_accessors(view):
    assert view.fields() == ["name", "age", "stay"]
    assert isinstance(view.form_delegate("age"), IntDelegate)
    assert view.form_widget("age").value_text() == ""


def test_initial_view_reflects_model(qapp, model):
    model.set_value("name", "Ada")
    view = DelegateFormView(model)
    widget = view.set_form_delegate("name", LineEditDelegate())
    assert widget.value_text() == "Ada"


def test_validate_pushes_widgets_into_model(view, model):
    view.form_widget("name").set_value_text("Ada")
    view.form_widget("age").set_value_text("-5")
    view.form_widget("stay").set_date_range(datetime.date(2024, 1, 1), datetime.date(2024, 1, 3))

    results = []
    view.validated.connect(results.append)

    assert not view.validate()
    assert results == [False]
    assert model.value("name") == "Ada"
    assert model.value("age") == "-5"
    assert model.value("stay") == "2024-01-01/2024-01-03"

    view.form_widget("age").set_value_text("30")
    assert view.validate()
    assert model.is_valid()


def test_validation_indication(view, model, form_config):
    age = view.form_widget("age")
    age.set_value_text("-5")
    view.validate()

    assert age.property(VALIDATION_PROPERTY) == "invalid"
    assert age.toolTip() == model.validation("age").message
    assert age.styleSheet() == form_config.invalid_style_sheet

    age.set_value_text("7")
    view.validate()
    assert age.property(VALIDATION_PROPERTY) == "valid"
    assert age.styleSheet() == ""


def test_update_view_after_model_change(view, model):
    model.set_value("age", 42)
    model.set_value("stay", "2024-05-01/2024-05-02")
    view.update_view()

    assert view.form_widget("age").value_text() == "42"
    assert view.form_widget("stay").date_range() == (datetime.date(2024, 5, 1), datetime.date(2024, 5, 2))


def test_model_not_touched_without_update(view, model):
    model.set_value("name", "kept")
    view.form_widget("name").set_value_text("typed but not synced")
    assert model.value("name") == "kept"


def test_enabled_and_visible_flags(view, model):
    model.set_enabled("age", False)
    model.set_visible("name", False)
    view.update_view()

    assert not view.form_widget("age").isEnabled()
    assert view.form_widget("name").isHidden()


def test_reset_clears_widgets(view, model):
    view.form_widget("name").set_value_text("Ada")
    view.validate()

    view.reset()

    assert model.value("name") is None
    assert view.form_widget("name").value_text() == ""
    assert view.form_widget("name").property(VALIDATION_PROPERTY) == ""


def test_replacing_delegate_rebuilds_widget(view, model):
    old_widget = view.form_widget("age")
    new_widget = view.set_form_delegate("age", LineEditDelegate())
    assert new_widget is not old_widget
    assert view.fields() == ["name", "stay", "age"]
    assert model.validator("age") is None


def test_customize_hooks(qapp, model):
    class StrictView(DelegateFormView):
        def customize_form_widget(self, field, widget):
            widget.setObjectName(f"field_{field}")
            return widget

        def customize_validator(self, field, validator):
            return IntValidator(bottom=18)

    view = StrictView(model)
    widget = view.set_form_delegate("age", IntDelegate(bottom=0))
    assert widget.objectName() == "field_age"

    widget.set_value_text("16")
    assert not view.validate()


def test_live_update(qapp, model):
    view = DelegateFormView(model, live_update=True)
    widget = view.set_form_delegate("age", IntDelegate(bottom=0))

    widget.setText("-1")
    assert model.value("age") == "-1"
    assert not model.validation("age").is_valid

    # Pushing model values into the view is not an edit
    model.set_value("age", "5")
    model.set_validated("age", False)
    view.update_view_value("age")
    assert not model.is_validated("age")


def test_live_update_off_by_default(qapp, model, form_config):
    view = DelegateFormView(model)
    view.set_form_delegate("name", LineEditDelegate()).setText("typed")
    assert model.value("name") is None
