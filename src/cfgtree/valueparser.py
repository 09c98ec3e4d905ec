"""Value inference: raw text → typed Value, and back."""

from __future__ import annotations

import math

from .errors import ValueParseError
from .values import Value, ValueType, VBool, VFloat, VInt, VString, VUnknown

_DIGITS = frozenset("0123456789")
_BOOL_WORDS = frozenset({"true", "True", "false", "False"})
_TRUE_WORDS = frozenset({"true", "True", "1"})
_QUOTES = ("'", '"')


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def _unsigned(raw: str) -> str:
    if raw[:1] in ("+", "-"):
        return raw[1:]
    return raw


def _is_int_text(raw: str) -> bool:
    # A bare sign passes this scan; estimate_type keeps that quirk.
    return all(c in _DIGITS for c in _unsigned(raw))


def _is_float_text(raw: str) -> bool:
    body = _unsigned(raw)
    if body.count(".") > 1:
        return False
    return all(c in _DIGITS or c == "." for c in body)


def estimate_type(raw: str) -> ValueType:
    """Classify a trimmed value string.

    Checks run in a fixed order: empty, bool words, integer digits,
    digits with a single dot, then anything else is a string.
    """
    if not raw:
        return ValueType.UNKNOWN
    if raw in _BOOL_WORDS:
        return ValueType.BOOL
    if _is_int_text(raw):
        return ValueType.INT
    if _is_float_text(raw):
        return ValueType.FLOAT
    return ValueType.STRING


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def unquote(raw: str) -> str:
    """Drop one leading and one trailing quote, each end on its own."""
    if raw[:1] in _QUOTES:
        raw = raw[1:]
    if raw[-1:] in _QUOTES:
        raw = raw[:-1]
    return raw


def _parse_int(raw: str) -> VInt:
    body = _unsigned(raw)
    if not body or not _is_int_text(raw):
        raise ValueParseError(raw, ValueType.INT)
    return VInt(int(raw))


def _parse_float(raw: str) -> VFloat:
    body = _unsigned(raw)
    if not any(c in _DIGITS for c in body) or not _is_float_text(raw):
        raise ValueParseError(raw, ValueType.FLOAT)
    result = float(raw)
    if not math.isfinite(result):
        raise ValueParseError(raw, ValueType.FLOAT, reason="out of range")
    return VFloat(result)


def parse_value(raw: str, value_type: ValueType) -> Value:
    """Convert *raw* into a Value of *value_type*.

    Raises ValueParseError when *raw* is not a valid int/float literal.
    """
    if value_type is ValueType.INT:
        return _parse_int(raw)
    if value_type is ValueType.FLOAT:
        return _parse_float(raw)
    if value_type is ValueType.BOOL:
        return VBool(raw in _TRUE_WORDS)
    if value_type is ValueType.UNKNOWN:
        return VUnknown(unquote(raw))
    return VString(unquote(raw))


def to_value(raw: str) -> Value:
    """Classify and parse *raw* in one step."""
    return parse_value(raw, estimate_type(raw))


# ---------------------------------------------------------------------------
# Formatting / construction
# ---------------------------------------------------------------------------

def format_value(value: Value) -> str:
    return str(value)


def from_python(obj) -> Value:
    """Wrap a native Python scalar in the matching Value type."""
    if obj is None:
        return VUnknown("")
    if isinstance(obj, (VUnknown, VString, VFloat, VBool, VInt)):
        return obj
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, int):
        return VInt(obj)
    if isinstance(obj, float):
        return VFloat(obj)
    if isinstance(obj, str):
        return VString(obj)
    raise TypeError(f"cannot store {type(obj).__name__} as a config value")
