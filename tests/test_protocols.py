"""Tests for widget protocols and adapters."""

import datetime
from enum import Enum

import pytest


class Color(Enum):
    RED = "red"
    GREEN = "green"


def test_line_edit_adapter(qapp):
    """Test LineEditAdapter implements the text protocols."""
    from pyqt_formdelegate.protocols import (
        LineEditAdapter, FormWidget, ValueTextGettable, ValueTextSettable, ChangeSignalEmitter
    )

    adapter = LineEditAdapter()
    assert isinstance(adapter, ValueTextGettable)
    assert isinstance(adapter, ValueTextSettable)
    assert isinstance(adapter, FormWidget)
    assert isinstance(adapter, ChangeSignalEmitter)

    # Text passes through untouched
    adapter.set_value_text("  padded  ")
    assert adapter.value_text() == "  padded  "


def test_numeric_adapters_keep_programmatic_text(qapp):
    """Typing validators must not rewrite text set by the model."""
    from pyqt_formdelegate.protocols import IntEditAdapter, DoubleEditAdapter

    ints = IntEditAdapter()
    ints.set_value_text("-5")
    assert ints.value_text() == "-5"

    doubles = DoubleEditAdapter()
    doubles.set_value_text("3.25")
    assert doubles.value_text() == "3.25"


def test_text_area_adapter(qapp):
    from pyqt_formdelegate.protocols import TextAreaAdapter

    adapter = TextAreaAdapter()
    adapter.set_value_text("line one\nline two")
    assert adapter.value_text() == "line one\nline two"


def test_check_box_adapter_text_form(qapp):
    from pyqt_formdelegate.protocols import CheckBoxAdapter

    adapter = CheckBoxAdapter()
    assert adapter.value_text() == "false"

    adapter.set_value_text("true")
    assert adapter.isChecked()
    assert adapter.value_text() == "true"

    adapter.set_value_text("nonsense")
    assert not adapter.isChecked()


def test_combo_box_adapter_enum_selection(qapp):
    from pyqt_formdelegate.protocols import ComboBoxAdapter

    adapter = ComboBoxAdapter()
    adapter.populate_enum(Color)
    assert adapter.count() == 2
    assert adapter.value_text() == ""
    assert adapter.selected_data() is None

    adapter.set_value_text("GREEN")
    assert adapter.selected_data() is Color.GREEN

    adapter.select_data(Color.RED)
    assert adapter.value_text() == "RED"

    adapter.set_value_text("PURPLE")
    assert adapter.currentIndex() == -1


def test_combo_box_adapter_data_follows_items(qapp):
    """Data stays attached to its item through inherited QComboBox edits."""
    from pyqt_formdelegate.protocols import ComboBoxAdapter

    adapter = ComboBoxAdapter()
    adapter.populate_enum(Color)
    adapter.insertItem(0, "none")
    adapter.addItem("extra")

    adapter.setCurrentIndex(0)
    assert adapter.selected_data() is None
    adapter.setCurrentIndex(2)
    assert adapter.selected_data() is Color.GREEN

    adapter.removeItem(1)
    adapter.select_data(Color.GREEN)
    assert adapter.currentIndex() == 1
    assert adapter.value_text() == "GREEN"
    assert adapter.item_python_data(2) is None


def test_combo_box_adapter_rejects_non_enum(qapp):
    from pyqt_formdelegate.protocols import ComboBoxAdapter

    with pytest.raises(TypeError):
        ComboBoxAdapter().populate_enum(str)


def test_date_edit_adapter_empty_state(qapp):
    from pyqt_formdelegate.protocols import DateEditAdapter

    adapter = DateEditAdapter()
    assert adapter.value_text() == ""
    assert adapter.date_value() is None

    adapter.set_value_text("2024-03-01")
    assert adapter.value_text() == "2024-03-01"
    assert adapter.date_value() == datetime.date(2024, 3, 1)

    adapter.set_value_text("")
    assert adapter.date_value() is None


def test_date_edit_adapter_accepts_old_dates(qapp):
    from pyqt_formdelegate.protocols import DateEditAdapter

    adapter = DateEditAdapter()
    adapter.set_date_value(datetime.date(1700, 1, 1))
    assert adapter.date_value() == datetime.date(1700, 1, 1)

    adapter.set_value_text("1752-09-14")
    assert adapter.value_text() == "1752-09-14"


def test_date_edit_adapter_rejects_empty_marker_date(qapp):
    """Dates at or before 0100-01-01 would read back as empty."""
    from pyqt_formdelegate.protocols import DateEditAdapter

    adapter = DateEditAdapter()
    with pytest.raises(ValueError):
        adapter.set_date_value(datetime.date(100, 1, 1))
    with pytest.raises(ValueError):
        adapter.set_value_text("0050-06-01")
    assert adapter.date_value() is None


def test_date_edit_adapter_rejects_malformed_text(qapp):
    from pyqt_formdelegate.protocols import DateEditAdapter

    with pytest.raises(ValueError):
        DateEditAdapter().set_value_text("01/03/2024")


def test_change_signal_connect_and_disconnect(qapp):
    from pyqt_formdelegate.protocols import LineEditAdapter

    adapter = LineEditAdapter()
    seen = []

    def on_change(widget):
        seen.append(widget.value_text())

    adapter.connect_change_signal(on_change)
    adapter.set_value_text("a")
    assert seen == ["a"]

    adapter.disconnect_change_signal(on_change)
    adapter.set_value_text("b")
    assert seen == ["a"]

    # Disconnecting twice is a no-op
    adapter.disconnect_change_signal(on_change)
    assert adapter._change_slots == {}


def test_date_range_widget_change_relay(qapp):
    from pyqt_formdelegate.widgets import DateRangeWidget

    widget = DateRangeWidget()
    seen = []
    widget.connect_change_signal(seen.append)
    widget.connect_change_signal(seen.append)
    widget.end_edit.set_date_value(datetime.date(2024, 1, 2))
    assert seen == [widget]

    widget.disconnect_change_signal(seen.append)
    widget.start_edit.set_date_value(datetime.date(2024, 1, 1))
    assert seen == [widget]
    assert widget._relays == {}
    assert widget.start_edit._change_slots == {}


def test_form_config_defaults_and_override(form_config):
    from pyqt_formdelegate.protocols import FormDelegateConfig, get_form_config, set_form_config

    assert get_form_config() is form_config
    set_form_config(FormDelegateConfig(date_range_separator=".."))
    assert get_form_config().date_range_separator == ".."

    set_form_config(None)
    assert get_form_config().date_range_separator == "/"
