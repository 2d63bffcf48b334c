"""
identnorm - identifier normalization for Rust code generation.

Maps schema-level names to Rust identifiers: keyword-safe rendering and
per-role case conversion.
"""

from .core import (
    ROLE_CASES,
    RUST_KEYWORDS,
    ConfigError,
    DefId,
    EnumRepr,
    FileId,
    Identifier,
    IdentName,
    IdentRole,
    Name,
    Namer,
    NamingCase,
    NamingConfig,
    Symbol,
    TemplateEngine,
    TemplateError,
    convert,
    create_template_engine,
    is_keyword,
    load_config,
    render_ident,
    shouty_snake,
    snake,
    upper_camel,
)
from .logging_config import get_logger, setup_logging

__version__ = "0.1.0"

__all__ = [
    "Symbol",
    "Identifier",
    "EnumRepr",
    "FileId",
    "DefId",
    "RUST_KEYWORDS",
    "is_keyword",
    "render_ident",
    "upper_camel",
    "snake",
    "shouty_snake",
    "IdentRole",
    "NamingCase",
    "ROLE_CASES",
    "IdentName",
    "Name",
    "convert",
    "Namer",
    "NamingConfig",
    "ConfigError",
    "load_config",
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    "get_logger",
    "setup_logging",
]
