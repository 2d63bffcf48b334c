"""
Symbol and identifier value types.

A ``Symbol`` holds raw schema-level text. Comparison and hashing use the
raw text, but converting a symbol to a string renders it as Rust source:
``Self`` becomes ``Self_`` and any other keyword is written as a raw
identifier (``r#type``).
"""

from __future__ import annotations

import functools
import sys
from enum import Enum

from .keywords import is_keyword
from .naming import StrIdentName

# "r#Self" is not a legal raw identifier
SELF_TYPE = "Self"
SELF_TYPE_RENDERED = "Self_"
RAW_IDENT_PREFIX = "r#"


def render_ident(text: str) -> str:
    """
    Render raw ``text`` as Rust source.

    >>> render_ident("Self")
    'Self_'
    >>> render_ident("type")
    'r#type'
    >>> render_ident("name")
    'name'
    """
    if text == SELF_TYPE:
        return SELF_TYPE_RENDERED
    if is_keyword(text):
        return f"{RAW_IDENT_PREFIX}{text}"
    return text


def _raw_text(value):
    if isinstance(value, str):
        return value
    if isinstance(value, (Symbol, Identifier)):
        return value.text
    return NotImplemented


@functools.total_ordering
class Symbol(StrIdentName):
    """Immutable interned text compared, hashed and ordered by raw value."""

    __slots__ = ("_text",)

    def __init__(self, text: str | Symbol | Identifier):
        if not isinstance(text, str):
            text = text.text
        object.__setattr__(self, "_text", sys.intern(str.__str__(text)))

    @property
    def text(self) -> str:
        return self._text

    def as_str(self) -> str:
        return self._text

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other) -> bool:
        other_text = _raw_text(other)
        if other_text is NotImplemented:
            return NotImplemented
        return self._text == other_text

    def __lt__(self, other) -> bool:
        other_text = _raw_text(other)
        if other_text is NotImplemented:
            return NotImplemented
        return self._text < other_text

    def __hash__(self) -> int:
        return hash(self._text)

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return render_ident(self._text)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        return f"Symbol({self._text!r})"

    def __reduce__(self):
        return (type(self), (self._text,))


@functools.total_ordering
class Identifier(StrIdentName):
    """A name used as an identifier in generated code, backed by a Symbol."""

    __slots__ = ("_sym",)

    def __init__(self, sym: str | Symbol | Identifier):
        if isinstance(sym, Identifier):
            sym = sym.sym
        elif not isinstance(sym, Symbol):
            sym = Symbol(sym)
        object.__setattr__(self, "_sym", sym)

    @property
    def sym(self) -> Symbol:
        return self._sym

    @property
    def text(self) -> str:
        return self._sym.text

    def as_str(self) -> str:
        return self._sym.text

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other) -> bool:
        return self._sym.__eq__(other)

    def __lt__(self, other) -> bool:
        return self._sym.__lt__(other)

    def __hash__(self) -> int:
        return hash(self._sym)

    def __len__(self) -> int:
        return len(self._sym)

    def __str__(self) -> str:
        return str(self._sym)

    def __format__(self, format_spec: str) -> str:
        return format(str(self._sym), format_spec)

    def __repr__(self) -> str:
        return f"Identifier({self.text!r})"

    def __reduce__(self):
        return (type(self), (self.text,))


class EnumRepr(Enum):
    """Integer type backing a generated enum's discriminant."""

    I32 = "i32"

    @property
    def type_name(self) -> str:
        return self.value
