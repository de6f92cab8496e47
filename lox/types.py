"""Runtime values for the Lox interpreter.

Every value a Lox program can produce is one of four variants: `Number`,
`String`, `Boolean` or `Nil`. They are frozen dataclasses, so equality is
structural within a variant and two values of different variants never
compare equal (`Number(1.0) != Boolean(True)`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Number:
    value: float

    def __repr__(self) -> str:
        return f"Number({format_number(self.value)})"


@dataclass(frozen=True)
class String:
    value: str


@dataclass(frozen=True)
class Boolean:
    value: bool


@dataclass(frozen=True)
class Nil:
    def __repr__(self) -> str:
        return 'Nil'


LiteralValue = Union[Number, String, Boolean, Nil]

NIL = Nil()
TRUE = Boolean(True)
FALSE = Boolean(False)


def format_number(n: float) -> str:
    # integral values print without a trailing '.0'
    if n.is_integer():
        return str(int(n))
    return repr(n)


def to_string(value: LiteralValue) -> str:
    """Display form used by `print`."""
    if isinstance(value, Nil):
        return 'nil'
    if isinstance(value, Boolean):
        return 'true' if value.value else 'false'
    if isinstance(value, Number):
        return format_number(value.value)
    if isinstance(value, String):
        return value.value
    raise TypeError(f"not a Lox value: {value!r}")


def type_name(value: LiteralValue) -> str:
    if isinstance(value, Nil):
        return 'nil'
    if isinstance(value, Boolean):
        return 'boolean'
    if isinstance(value, Number):
        return 'number'
    if isinstance(value, String):
        return 'string'
    return type(value).__name__
