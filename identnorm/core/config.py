"""
Configuration management for identifier naming.

Handles loading and merging naming configuration from JSON files,
providing defaults and validation for emission settings.
"""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..logging_config import get_logger
from .naming import IdentRole, NamingCase

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class NamingConfig:
    """Naming settings supplied by the emitter."""

    # Use the rustc-compatible snake case splitter
    nonstandard: bool = False

    # Role -> case overrides, e.g. {"variant": "shouty_snake"}
    role_cases: Dict[str, str] = field(default_factory=dict)

    # Unrecognized keys from config files
    custom: Dict[str, Any] = field(default_factory=dict)


def validate_config(config: NamingConfig) -> List[str]:
    """
    Validate a naming configuration.

    Returns:
        List of validation warnings (empty if valid)
    """
    warnings = []

    if not isinstance(config.nonstandard, bool):
        warnings.append(f"nonstandard must be a boolean: {config.nonstandard!r}")

    valid_roles = {role.value for role in IdentRole}
    valid_cases = {case.value for case in NamingCase}

    if not isinstance(config.role_cases, dict):
        warnings.append(f"role_cases must be an object: {config.role_cases!r}")
        return warnings

    for role, case in config.role_cases.items():
        if not isinstance(role, str) or role not in valid_roles:
            warnings.append(f"Unknown role in role_cases: {role!r}")
        if not isinstance(case, str):
            warnings.append(f"Case for role {role!r} must be a string: {case!r}")
        elif case not in valid_cases:
            warnings.append(f"Invalid case for role {role!r}: {case}")

    return warnings


class ConfigManager:
    """Manages naming configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager with defaults."""
        self._defaults: Dict[str, Any] = asdict(NamingConfig())

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> NamingConfig:
        """
        Get complete naming configuration.

        Args:
            custom_config: Configuration overrides applied last
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = dict(self._defaults)
        base_config["role_cases"] = dict(base_config["role_cases"])
        base_config["custom"] = dict(base_config["custom"])

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(custom_config)

        config = self._dict_to_config(base_config)
        for warning in validate_config(config):
            logger.warning("Naming config: %s", warning)
        return config

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)
        logger.debug("Loading naming config from %s", path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.info("Loaded naming config from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> NamingConfig:
        """Convert dictionary to NamingConfig instance."""
        known_fields = set(NamingConfig.__dataclass_fields__)

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = dict(config_args.get("custom") or {})
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return NamingConfig(**config_args)

    def save_config(self, config: NamingConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = {
            "nonstandard": config.nonstandard,
            "role_cases": dict(config.role_cases),
        }
        config_dict.update(config.custom)

        try:
            with path.open("w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

        logger.info("Saved naming config to %s", path)


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> NamingConfig:
    """
    Convenience function to load naming configuration.

    Args:
        custom_config: Configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(custom_config, config_file)
