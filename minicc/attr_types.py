"""Attribute records passed from the lexer to the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "BasicType",
    "DigitIntAttr",
    "DigitRealAttr",
    "VarIdAttr",
    "TypeAttr",
]


class BasicType(IntEnum):
    """Basic value types known to the front end."""

    TYPE_NONE = 0
    """The node has no type."""
    TYPE_VOID = 1
    """void, used only as a function return type."""
    TYPE_INT = 2
    """Integer."""
    TYPE_FLOAT = 3
    """Single precision float."""
    TYPE_MAX = 4
    """Any other, unknown type."""


@dataclass(frozen=True)
class DigitIntAttr:
    """An unsigned integer literal and the line it appeared on."""

    val: int
    lineno: int


@dataclass(frozen=True)
class DigitRealAttr:
    """A real-number literal and the line it appeared on."""

    val: float
    lineno: int


@dataclass(frozen=True)
class VarIdAttr:
    """An identifier (variable or function name) and its line."""

    id: str
    lineno: int


@dataclass(frozen=True)
class TypeAttr:
    """A type keyword and the line it appeared on."""

    type: BasicType
    lineno: int