"""
Role-based naming for generated Rust identifiers.

Every identifier written by the generator occupies a role (struct name,
field name, constant name, ...). The role decides which case conversion
applies; the ``nonstandard`` flag decides which snake case splitter the
snake-family roles use.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict

from . import cases


class NamingCase(Enum):
    """Case styles used for generated identifiers."""

    UPPER_CAMEL = "upper_camel"  # UserName
    SNAKE = "snake"  # user_name
    SHOUTY_SNAKE = "shouty_snake"  # USER_NAME


class IdentRole(Enum):
    """Positions an identifier can occupy in generated code."""

    STRUCT = "struct"
    ENUM = "enum"
    TRAIT = "trait"
    NEWTYPE = "newtype"
    VARIANT = "variant"
    MOD = "mod"
    FN = "fn"
    FIELD = "field"
    CONST = "const"


ROLE_CASES: Dict[IdentRole, NamingCase] = {
    IdentRole.STRUCT: NamingCase.UPPER_CAMEL,
    IdentRole.ENUM: NamingCase.UPPER_CAMEL,
    IdentRole.TRAIT: NamingCase.UPPER_CAMEL,
    IdentRole.NEWTYPE: NamingCase.UPPER_CAMEL,
    IdentRole.VARIANT: NamingCase.UPPER_CAMEL,
    IdentRole.MOD: NamingCase.SNAKE,
    IdentRole.FN: NamingCase.SNAKE,
    IdentRole.FIELD: NamingCase.SNAKE,
    IdentRole.CONST: NamingCase.SHOUTY_SNAKE,
}


def convert_case(text: str, case: NamingCase, nonstandard: bool = False) -> str:
    """Apply a single case style to ``text``."""
    if case == NamingCase.UPPER_CAMEL:
        return cases.upper_camel(text)
    elif case == NamingCase.SNAKE:
        return cases.snake(text, nonstandard)
    elif case == NamingCase.SHOUTY_SNAKE:
        return cases.shouty_snake(text, nonstandard)
    raise ValueError(f"Unknown naming case: {case!r}")


def convert(text: str, role: IdentRole, nonstandard: bool = False) -> str:
    """
    Convert ``text`` to the case its ``role`` requires.

    Args:
        text: Source (schema-level) name
        role: Position the name will occupy in generated code
        nonstandard: Use the rustc-compatible snake case splitter

    Returns:
        Converted name (not keyword-escaped)
    """
    return convert_case(text, ROLE_CASES[role], nonstandard)


class IdentName(ABC):
    """
    Naming capability shared by every string-like value.

    Subclasses provide the three case primitives; each role method maps to
    one of them and may be overridden when a role needs different casing.
    """

    __slots__ = ()

    def struct_ident(self) -> str:
        return self.upper_camel_ident()

    def enum_ident(self) -> str:
        return self.upper_camel_ident()

    def mod_ident(self, nonstandard: bool = False) -> str:
        return self.snake_ident(nonstandard)

    def variant_ident(self) -> str:
        return self.upper_camel_ident()

    def fn_ident(self, nonstandard: bool = False) -> str:
        return self.snake_ident(nonstandard)

    def field_ident(self, nonstandard: bool = False) -> str:
        return self.snake_ident(nonstandard)

    def const_ident(self, nonstandard: bool = False) -> str:
        return self.shouty_snake_case(nonstandard)

    def trait_ident(self) -> str:
        return self.upper_camel_ident()

    def newtype_ident(self) -> str:
        return self.upper_camel_ident()

    def ident(self, role: IdentRole, nonstandard: bool = False) -> str:
        """Dispatch to the role method for ``role``."""
        method = getattr(self, f"{role.value}_ident")
        if ROLE_CASES[role] == NamingCase.UPPER_CAMEL:
            return method()
        return method(nonstandard)

    @abstractmethod
    def upper_camel_ident(self) -> str:
        pass

    @abstractmethod
    def snake_ident(self, nonstandard: bool = False) -> str:
        pass

    @abstractmethod
    def shouty_snake_case(self, nonstandard: bool = False) -> str:
        pass


class StrIdentName(IdentName):
    """Implements the case primitives over the raw text from ``as_str``."""

    __slots__ = ()

    @abstractmethod
    def as_str(self) -> str:
        """Return the raw (unescaped) text."""
        pass

    def upper_camel_ident(self) -> str:
        return cases.upper_camel(self.as_str())

    def snake_ident(self, nonstandard: bool = False) -> str:
        return cases.snake(self.as_str(), nonstandard)

    def shouty_snake_case(self, nonstandard: bool = False) -> str:
        return cases.shouty_snake(self.as_str(), nonstandard)


class Name(str, StrIdentName):
    """
    Plain string carrying the naming capability.

    >>> Name("user_id").struct_ident()
    'UserId'
    """

    __slots__ = ()

    def as_str(self) -> str:
        return str.__str__(self)
