"""
Custom exceptions for cfgtree.

Malformed lines are skipped by the reader and never raise; these classes
cover the failures that are reported to the caller instead.
"""

from __future__ import annotations

from .values import ValueType


class CfgTreeError(Exception):
    """Base class for all cfgtree specific errors."""
    def __init__(self, message: str = "An unspecified error occurred in cfgtree."):
        super().__init__(message)


class ValueParseError(CfgTreeError):
    """Raised when a literal cannot be converted to the requested value type."""
    def __init__(self, raw: str, value_type: ValueType, line_no: int | None = None, reason: str = "invalid literal"):
        self.raw = raw
        self.value_type = value_type
        self.line_no = line_no
        self.reason = reason
        where = f" on line {line_no}" if line_no is not None else ""
        super().__init__(f"{reason} for {value_type.name.lower()}: {raw!r}{where}")

    def at_line(self, line_no: int) -> "ValueParseError":
        """Return a copy of this error tagged with *line_no*."""
        return ValueParseError(self.raw, self.value_type, line_no, self.reason)


class ConfigLoadError(CfgTreeError):
    """Raised by strict loads once the whole source has been read."""
    def __init__(self, errors: list[ValueParseError]):
        self.errors = list(errors)
        count = len(self.errors)
        first = f" (first: {self.errors[0]})" if self.errors else ""
        super().__init__(f"{count} value error(s) while loading configuration{first}")
