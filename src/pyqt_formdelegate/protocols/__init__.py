"""
Widget protocol definitions, adapters and configuration.

ABC-based widget contracts that eliminate duck typing in favor of
explicit, fail-loud inheritance-based architecture.
"""

from .form_config import FormDelegateConfig, set_form_config, get_form_config
from .widget_protocols import (
    ValueTextGettable,
    ValueTextSettable,
    FormWidget,
    ChangeSignalEmitter,
)
from .widget_adapters import (
    LineEditAdapter,
    IntEditAdapter,
    DoubleEditAdapter,
    TextAreaAdapter,
    CheckBoxAdapter,
    ComboBoxAdapter,
    DateEditAdapter,
    PyQtWidgetMeta,
)

__all__ = [
    "FormDelegateConfig",
    "set_form_config",
    "get_form_config",
    "ValueTextGettable",
    "ValueTextSettable",
    "FormWidget",
    "ChangeSignalEmitter",
    "LineEditAdapter",
    "IntEditAdapter",
    "DoubleEditAdapter",
    "TextAreaAdapter",
    "CheckBoxAdapter",
    "ComboBoxAdapter",
    "DateEditAdapter",
    "PyQtWidgetMeta",
]
