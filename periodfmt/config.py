"""Configuration file management for periodfmt."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

DEFAULTS: dict[str, str] = {
    "date": "2001-02-05",
    "period": "P3M1D",
    "pattern": "CM",
}


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
    return get_xdg_config_home() / "periodfmt" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "defaults": dict(DEFAULTS),
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(default_config, f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def load_defaults(config_path: Path | None = None) -> dict[str, str]:
    """Load the demo defaults, falling back to built-in values.

    Values from the [defaults] table override the built-in ones. A missing
    config file is not an error.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Dictionary with "date", "period" and "pattern" keys.

    Raises:
        ValueError: If [defaults] is not a table or holds a non-string value.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        return dict(DEFAULTS)

    overrides = config.get("defaults", {})
    if not isinstance(overrides, dict):
        raise ValueError("[defaults] must be a table")

    defaults = dict(DEFAULTS)
    for key in DEFAULTS:
        if key in overrides:
            if not isinstance(overrides[key], str):
                raise ValueError(f"defaults.{key} must be a string")
            defaults[key] = overrides[key]
    return defaults
