"""Value types for cfgtree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class ValueType(Enum):
    UNKNOWN = auto()
    STRING = auto()
    FLOAT = auto()
    BOOL = auto()
    INT = auto()


@dataclass(frozen=True)
class VUnknown:
    value: str = ""

    @property
    def type(self) -> ValueType:
        return ValueType.UNKNOWN

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VString:
    value: str

    @property
    def type(self) -> ValueType:
        return ValueType.STRING

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VFloat:
    value: float

    @property
    def type(self) -> ValueType:
        return ValueType.FLOAT

    def __str__(self) -> str:
        return repr(float(self.value))


@dataclass(frozen=True)
class VBool:
    value: bool

    @property
    def type(self) -> ValueType:
        return ValueType.BOOL

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class VInt:
    value: int

    @property
    def type(self) -> ValueType:
        return ValueType.INT

    def __str__(self) -> str:
        return str(int(self.value))


Value = Union[VUnknown, VString, VFloat, VBool, VInt]
