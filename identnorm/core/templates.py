"""
Template engine wrapper for Rust emission.

Exposes the naming layer to Jinja2 templates as filters, so templates
write ``{{ field.name | field_ident }}`` and get a converted,
keyword-escaped identifier.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import DictLoader, Environment, FileSystemLoader, TemplateError as JinjaError

from ..logging_config import get_logger
from . import cases
from .namer import Namer
from .naming import IdentRole
from .symbol import render_ident

logger = get_logger(__name__)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


def _raw(value) -> str:
    if isinstance(value, str):
        return value
    text = getattr(value, "text", None)
    if isinstance(text, str):
        return text
    return str(value)


class TemplateEngine:
    """Jinja2 environment with identifier naming filters installed."""

    def __init__(self, template_dir: Optional[Path] = None, namer: Optional[Namer] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
            namer: Namer supplying role conversions (default configuration if omitted)
        """
        self.template_dir = Path(template_dir) if template_dir else None
        self.namer = namer or Namer()
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with naming filters."""
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            loader = DictLoader({})

        self._env = Environment(
            loader=loader,
            autoescape=False,
            keep_trailing_newline=True,
            lstrip_blocks=True,
            trim_blocks=True,
        )

        for role in IdentRole:
            self._env.filters[f"{role.value}_ident"] = self._role_filter(role)

        self._env.filters["ident"] = self._ident_filter
        self._env.filters["upper_camel"] = self._upper_camel_filter
        self._env.filters["snake"] = self._snake_filter
        self._env.filters["shouty_snake"] = self._shouty_snake_filter

    @property
    def environment(self) -> Environment:
        return self._env

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except JinjaError as e:
            logger.error("Failed to render template %s: %s", template_name, e)
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """
        Render a template string with the given context.

        Args:
            template_string: Template content as string
            context: Variables to pass to template

        Returns:
            Rendered content
        """
        try:
            template = self._env.from_string(template_string)
            return template.render(**context)
        except JinjaError as e:
            logger.error("Failed to render template string: %s", e)
            raise TemplateError(f"Failed to render template string: {e}") from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        if not isinstance(self._env.loader, DictLoader):
            self._env.loader = DictLoader({})

        self._env.loader.mapping[name] = content

    # Template filters

    def _role_filter(self, role: IdentRole):
        def role_filter(value) -> str:
            return self.namer.render(_raw(value), role)

        role_filter.__name__ = f"{role.value}_ident"
        return role_filter

    def _ident_filter(self, value) -> str:
        """Render a name as-is, escaping keywords."""
        return render_ident(_raw(value))

    def _upper_camel_filter(self, value) -> str:
        return cases.upper_camel(_raw(value))

    def _snake_filter(self, value, nonstandard: Optional[bool] = None) -> str:
        if nonstandard is None:
            nonstandard = self.namer.nonstandard
        return cases.snake(_raw(value), nonstandard)

    def _shouty_snake_filter(self, value, nonstandard: Optional[bool] = None) -> str:
        if nonstandard is None:
            nonstandard = self.namer.nonstandard
        return cases.shouty_snake(_raw(value), nonstandard)


# Built-in templates for common patterns
RUST_STRUCT_TEMPLATE = """\
pub struct {{ name | struct_ident }} {
{% for field in fields %}
    pub {{ field.name | field_ident }}: {{ field.type }},
{% endfor %}
}
"""

RUST_ENUM_TEMPLATE = """\
#[repr({{ repr.type_name }})]
pub enum {{ name | enum_ident }} {
{% for variant in variants %}
    {{ variant.name | variant_ident }} = {{ variant.value }},
{% endfor %}
}
"""

RUST_CONST_TEMPLATE = """\
pub const {{ name | const_ident }}: {{ type }} = {{ value }};
"""


def create_template_engine(
    template_dir: Optional[Path] = None, namer: Optional[Namer] = None
) -> TemplateEngine:
    """
    Create a template engine with the built-in Rust templates registered.

    Args:
        template_dir: Optional directory containing template files
        namer: Namer supplying role conversions

    Returns:
        Configured TemplateEngine instance
    """
    engine = TemplateEngine(template_dir, namer)
    if not isinstance(engine.environment.loader, FileSystemLoader):
        engine.add_template("rust_struct", RUST_STRUCT_TEMPLATE)
        engine.add_template("rust_enum", RUST_ENUM_TEMPLATE)
        engine.add_template("rust_const", RUST_CONST_TEMPLATE)
    return engine
