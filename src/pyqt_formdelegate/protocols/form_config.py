"""Base configuration class for delegate-driven forms.

Provides hooks for applications to customize form behavior.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class FormDelegateConfig:
    """Configuration for form delegate behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        debug_dispatch: Log every model/view synchronization and the path it took
        live_update: Sync widget → model on every widget change, not only on validate
        date_display_format: Qt display format for date edits
        invalid_style_sheet: Style sheet applied to widgets whose field is invalid
        date_range_separator: Separator between start and end of a date range value
    """

    debug_dispatch: bool = False
    live_update: bool = False
    date_display_format: str = "yyyy-MM-dd"
    invalid_style_sheet: str = "border: 1px solid #d9534f;"
    date_range_separator: str = "/"


# Global config instance (set by application)
_form_config: Optional[FormDelegateConfig] = None


def set_form_config(config: Optional[FormDelegateConfig]) -> None:
    """Set the global form delegate configuration.

    Args:
        config: FormDelegateConfig instance, or None to restore defaults
    """
    global _form_config
    _form_config = config


def get_form_config() -> FormDelegateConfig:
    """Get the current form delegate configuration.

    Returns:
        Current FormDelegateConfig or default if not set
    """
    if _form_config is None:
        return FormDelegateConfig()
    return _form_config
