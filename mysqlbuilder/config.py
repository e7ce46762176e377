"""Builder configuration.

A :class:`BuilderConfig` decides the SQL dialect used to parse built statements
and the prefixes placed in front of generated placeholder names. Builders read
the global configuration when they are created unless one is passed in.

Environment Variables Supported:
- MYSQLBUILDER_DIALECT: sqlglot dialect used to parse built statements
- MYSQLBUILDER_INSERT_PREFIX: prefix for INSERT placeholders
- MYSQLBUILDER_UPDATE_PREFIX: prefix for ON DUPLICATE KEY UPDATE placeholders
- MYSQLBUILDER_LOG_STATEMENTS: log every rendered statement at DEBUG (true/false)
"""

import os
import threading
from dataclasses import dataclass
from typing import Optional

from mysqlbuilder.exceptions import ImproperConfigurationError
from mysqlbuilder.utils.logging import get_logger

__all__ = (
    "BuilderConfig",
    "create_default_config",
    "get_global_config",
    "load_config_from_env",
    "reset_global_config",
    "set_global_config",
)

logger = get_logger("mysqlbuilder.config")

PARAMETER_MARKER = "@"


@dataclass(frozen=True)
class BuilderConfig:
    """Settings shared by every statement builder."""

    dialect: str = "mysql"
    insert_parameter_prefix: str = "@"
    update_parameter_prefix: str = "@update_"
    log_statements: bool = False

    def validate(self) -> "list[str]":
        """Check the configuration for consistency.

        Returns:
            List of problems found (empty if valid)
        """
        errors: list[str] = []
        if not self.dialect:
            errors.append("dialect must not be empty")
        for label, prefix in (
            ("insert_parameter_prefix", self.insert_parameter_prefix),
            ("update_parameter_prefix", self.update_parameter_prefix),
        ):
            if not prefix.startswith(PARAMETER_MARKER):
                errors.append(f"{label} must start with {PARAMETER_MARKER!r}")
        if self.insert_parameter_prefix == self.update_parameter_prefix:
            errors.append("insert_parameter_prefix and update_parameter_prefix must differ")
        return errors


_config_lock = threading.Lock()
_global_config: Optional[BuilderConfig] = None


def create_default_config() -> BuilderConfig:
    """Create default configuration.

    Returns:
        BuilderConfig with default values for all settings
    """
    return BuilderConfig()


def get_global_config() -> BuilderConfig:
    """Get the global configuration, creating the default one on first use."""
    global _global_config  # noqa: PLW0603
    with _config_lock:
        if _global_config is None:
            _global_config = create_default_config()
        return _global_config


def set_global_config(config: BuilderConfig) -> None:
    """Replace the global configuration.

    Args:
        config: New configuration to set globally

    Raises:
        ImproperConfigurationError: If the configuration does not validate.
    """
    global _global_config  # noqa: PLW0603
    errors = config.validate()
    if errors:
        msg = f"Invalid builder configuration: {'; '.join(errors)}"
        raise ImproperConfigurationError(msg)
    with _config_lock:
        _global_config = config
    logger.debug("Global builder configuration replaced: %r", config)


def reset_global_config() -> None:
    """Drop the global configuration so the next read recreates the default."""
    global _global_config  # noqa: PLW0603
    with _config_lock:
        _global_config = None


def load_config_from_env() -> BuilderConfig:
    """Load configuration from environment variables.

    Returns:
        BuilderConfig loaded from environment variables
    """
    defaults = create_default_config()
    return BuilderConfig(
        dialect=os.getenv("MYSQLBUILDER_DIALECT", defaults.dialect),
        insert_parameter_prefix=os.getenv("MYSQLBUILDER_INSERT_PREFIX", defaults.insert_parameter_prefix),
        update_parameter_prefix=os.getenv("MYSQLBUILDER_UPDATE_PREFIX", defaults.update_parameter_prefix),
        log_statements=_env_bool("MYSQLBUILDER_LOG_STATEMENTS", defaults.log_statements),
    )


def _env_bool(key: str, default: bool) -> bool:
    """Get boolean value from environment variable."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on", "enabled")
