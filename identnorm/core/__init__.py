"""
Core identifier normalization components.

Keyword table, symbol types, case conversion and role-based naming used
when emitting Rust source.
"""

from .keywords import RUST_KEYWORDS, is_keyword
from .symbol import EnumRepr, Identifier, Symbol, render_ident
from .handles import DefId, FileId
from .cases import (
    rustc_snake_case,
    shouty_snake,
    snake,
    split_words,
    to_shouty_snake_case,
    to_snake_case,
    to_upper_camel_case,
    upper_camel,
)
from .naming import (
    ROLE_CASES,
    IdentName,
    IdentRole,
    Name,
    NamingCase,
    StrIdentName,
    convert,
    convert_case,
)
from .config import ConfigError, ConfigManager, NamingConfig, load_config, validate_config
from .namer import Namer
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Keyword table
    "RUST_KEYWORDS",
    "is_keyword",
    # Value types
    "Symbol",
    "Identifier",
    "EnumRepr",
    "render_ident",
    "FileId",
    "DefId",
    # Case conversion
    "upper_camel",
    "snake",
    "shouty_snake",
    "split_words",
    "to_upper_camel_case",
    "to_snake_case",
    "to_shouty_snake_case",
    "rustc_snake_case",
    # Role-based naming
    "IdentRole",
    "NamingCase",
    "ROLE_CASES",
    "IdentName",
    "StrIdentName",
    "Name",
    "convert",
    "convert_case",
    "Namer",
    # Configuration
    "NamingConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "validate_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
