"""cfgtree — typed, sectioned key/value configuration files."""

from .document import ConfigRoot
from .errors import CfgTreeError, ConfigLoadError, ValueParseError
from .lines import (
    FileLineSink,
    FileLineSource,
    LineSink,
    LineSource,
    StringLineSink,
    StringLineSource,
)
from .model import Property, Section
from .reader import ConfigReader
from .repl import ConfigShell
from .valueparser import estimate_type, format_value, from_python, parse_value, to_value
from .values import (
    Value,
    ValueType,
    VBool,
    VFloat,
    VInt,
    VString,
    VUnknown,
)

__all__ = [
    "ConfigRoot",
    "ConfigReader",
    "ConfigShell",
    "Property",
    "Section",
    "Value",
    "ValueType",
    "VBool",
    "VFloat",
    "VInt",
    "VString",
    "VUnknown",
    "estimate_type",
    "parse_value",
    "format_value",
    "to_value",
    "from_python",
    "LineSource",
    "LineSink",
    "FileLineSource",
    "FileLineSink",
    "StringLineSource",
    "StringLineSink",
    "CfgTreeError",
    "ConfigLoadError",
    "ValueParseError",
]
