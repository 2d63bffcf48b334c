"""
Config-driven identifier naming for the emitter.

``Namer`` applies the role table (plus any configured overrides) with the
configured ``nonstandard`` flag, and hands back either plain converted
text, an ``Identifier`` or the rendered Rust source form.
"""

from typing import Dict, Optional, Tuple

from ..logging_config import get_logger
from .config import ConfigError, NamingConfig, validate_config
from .naming import ROLE_CASES, IdentRole, NamingCase, convert_case
from .symbol import Identifier

logger = get_logger(__name__)


class Namer:
    """Converts schema names to Rust identifiers by role."""

    def __init__(self, config: Optional[NamingConfig] = None):
        """
        Initialize namer.

        Args:
            config: Naming configuration (defaults to ``NamingConfig()``)

        Raises:
            ConfigError: If the configuration has invalid role overrides
        """
        self.config = config or NamingConfig()

        problems = validate_config(self.config)
        if problems:
            raise ConfigError("; ".join(problems))

        # Settings are fixed at construction; later edits to config are ignored
        self._nonstandard: bool = self.config.nonstandard

        self._cases: Dict[IdentRole, NamingCase] = dict(ROLE_CASES)
        for role, case in self.config.role_cases.items():
            self._cases[IdentRole(role)] = NamingCase(case)

        self._name_cache: Dict[Tuple[str, IdentRole], str] = {}

    @property
    def nonstandard(self) -> bool:
        return self._nonstandard

    def case_for(self, role: IdentRole) -> NamingCase:
        """Return the case style applied to ``role``."""
        return self._cases[role]

    def name(self, text, role: IdentRole) -> str:
        """Convert raw ``text`` for ``role`` without keyword escaping."""
        if not isinstance(text, str):
            text = text.text

        cache_key = (text, role)
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        converted = convert_case(text, self._cases[role], self._nonstandard)
        logger.debug("Named %s %r -> %r", role.value, text, converted)

        self._name_cache[cache_key] = converted
        return converted

    def ident(self, text, role: IdentRole) -> Identifier:
        """Convert ``text`` for ``role`` and wrap it as an Identifier."""
        return Identifier(self.name(text, role))

    def render(self, text, role: IdentRole) -> str:
        """Convert ``text`` for ``role`` and render it as Rust source."""
        return str(self.ident(text, role))

    def clear_cache(self):
        """Drop memoized conversions."""
        self._name_cache.clear()
