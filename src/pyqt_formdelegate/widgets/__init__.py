"""
Composite widgets.

Widgets whose value cannot be expressed as a single text and that therefore
sync through a delegate's custom path.
"""

from .date_range_widget import DateRangeWidget

__all__ = [
    "DateRangeWidget",
]
