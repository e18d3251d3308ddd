"""Exceptions and warnings raised by recordview."""

from typing import Optional


class RecordViewError(Exception):
    """Base exception for all recordview errors."""
    pass


class FixedTypeError(RecordViewError, TypeError):
    """The record's type cannot host view metadata."""

    def __init__(self, record_type: type, reason: Optional[str] = None):
        self.record_type = record_type
        self.reason = reason
        super().__init__(self._format_error())

    def _format_error(self) -> str:
        """Format the error with the conversion hint."""
        name = getattr(self.record_type, "__qualname__", repr(self.record_type))
        parts = [f"Cannot attach view metadata to a fixed '{name}' record"]
        if self.reason:
            parts.append(f" ({self.reason})")
        parts.append(
            ".\n  Convert it to an open structured record first, e.g. "
            "recordview.to_record(obj, fields=[...]), and decorate the result."
        )
        return "".join(parts)


class LegacyModelWarning(UserWarning):
    """The record's object model is known to mishandle attached view metadata."""
    pass
