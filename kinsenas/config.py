"""Configuration file management for kinsenas."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from kinsenas.store.schema import get_db_path

DEFAULT_CURRENCY = "₱"


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "kinsenas" / "config.toml"


def default_config() -> dict[str, Any]:
    """Build the default configuration."""
    return {
        "storage": {"database": ""},
        "display": {"currency": DEFAULT_CURRENCY},
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def load_config_or_default(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration, using defaults when the file does not exist yet."""
    try:
        return load_config(config_path)
    except FileNotFoundError:
        return default_config()


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_database_path(config: dict[str, Any]) -> Path:
    """Resolve the database path from configuration.

    Args:
        config: Configuration dictionary.

    Returns:
        Configured database path, or the XDG default when unset or empty.
    """
    configured = config.get("storage", {}).get("database")
    if isinstance(configured, str) and configured:
        return Path(configured).expanduser()
    return get_db_path()


def get_currency(config: dict[str, Any]) -> str:
    """Get the currency symbol used when displaying amounts."""
    currency = config.get("display", {}).get("currency")
    if isinstance(currency, str):
        return currency
    return DEFAULT_CURRENCY
