"""Form delegate exceptions.

All of these signal a form-construction bug and are never caught by the
library. Validation failures are not exceptions; they are recorded as
ValidationResult values on the FormModel.
"""


class FormDelegateError(Exception):
    """Base class for precondition violations in the delegate layer."""


class FieldNotFoundError(FormDelegateError, KeyError):
    """Raised when a field is used that was never added to the FormModel."""

    def __init__(self, field):
        self.field = field
        super().__init__(f"Field {field!r} is not part of the form model. Add it with add_field() first.")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class WidgetMismatchError(FormDelegateError, TypeError):
    """Raised when a widget lacks the capability or runtime type a sync path needs."""


class SyncResultError(FormDelegateError, TypeError):
    """Raised when a custom sync path returns something other than a SyncResult."""
