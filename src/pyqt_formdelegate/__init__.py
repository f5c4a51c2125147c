"""
pyqt-formdelegate: per-field form delegates for PyQt6.

A form delegate binds one field of a record to the widget that edits it,
the validator that constrains it, and the synchronization between that
widget and an in-memory FormModel.

Architecture:
- Tier 1 (Protocols): Widget ABCs, Qt adapters and configuration
- Tier 2 (Widgets): Composite widgets that sync through custom paths
- Tier 3 (Forms): FormModel, validators, delegates, dispatcher and form view

Key Features:
- Dual-dispatch sync: custom path first, text path as fallback
- Tagged SyncResult instead of boolean "handled" flags
- ABC-based widget capabilities (no duck typing)
- Fail-loud precondition checks
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
