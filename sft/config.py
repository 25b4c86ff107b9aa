"""Configuration file management for sft."""

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from sft.domain.formatting import DEFAULT_CURRENCY_SYMBOL, TABLE_FILTERS
from sft.store.schema import get_db_path

logger = logging.getLogger(__name__)

DEFAULT_CHART_WIDTH = 30

CONFIG_KEYS = ("currency_symbol", "chart_width", "default_filter", "db_path")


@dataclass(frozen=True)
class Settings:
    """Immutable settings resolved from the config file and defaults."""

    currency_symbol: str
    chart_width: int
    default_filter: str
    db_path: Path


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
    return get_xdg_config_home() / "sft" / "config.toml"


def default_config() -> dict[str, Any]:
    """Config values written by 'sft init'. db_path is left to the XDG default."""
    return {
        "currency_symbol": DEFAULT_CURRENCY_SYMBOL,
        "chart_width": DEFAULT_CHART_WIDTH,
        "default_filter": "all",
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Write the default config file, replacing any existing one."""
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    with open(config_path or get_config_path(), "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Write a config dictionary as TOML, readable only by the owner (0600)."""
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(path, 0o600)


def parse_config_value(key: str, value: str) -> str | int:
    """Convert command-line text into a typed config value.

    Args:
        key: One of CONFIG_KEYS.
        value: Raw text given on the command line.

    Returns:
        The value as it should be stored in the TOML file.

    Raises:
        ValueError: If the key is unknown or the value is invalid for it.
    """
    if key not in CONFIG_KEYS:
        raise ValueError(f"Unknown config key '{key}' (expected one of: {', '.join(CONFIG_KEYS)})")

    if key == "chart_width":
        try:
            width = int(value)
        except ValueError:
            raise ValueError(f"chart_width must be a whole number, got '{value}'") from None
        if width <= 0:
            raise ValueError("chart_width must be greater than 0")
        return width

    if key == "default_filter":
        if value not in TABLE_FILTERS:
            raise ValueError(f"default_filter must be one of: {', '.join(TABLE_FILTERS)}")
        return value

    text = value.strip()
    if not text:
        raise ValueError(f"{key} must not be empty")
    return text


def set_config_value(key: str, value: str, config_path: Path | None = None) -> dict[str, Any]:
    """Update one key in the config file, creating the file from defaults if missing.

    Args:
        key: One of CONFIG_KEYS.
        value: Raw text given on the command line.
        config_path: Path to config file. If None, uses default location.

    Returns:
        The updated configuration dictionary.

    Raises:
        ValueError: If the key or value is invalid.
        tomllib.TOMLDecodeError: If the existing file is not valid TOML; it is left untouched.
    """
    parsed = parse_config_value(key, value)

    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = default_config()

    config[key] = parsed
    save_config(config, config_path)
    return config


def resolve_settings(config: dict[str, Any]) -> Settings:
    """Merge a config dictionary with defaults.

    Unknown or invalid values fall back to their defaults.

    Args:
        config: Configuration dictionary (possibly empty).

    Returns:
        Resolved Settings.
    """
    symbol = config.get("currency_symbol")
    if not isinstance(symbol, str) or not symbol.strip():
        symbol = DEFAULT_CURRENCY_SYMBOL

    chart_width = config.get("chart_width")
    if isinstance(chart_width, bool) or not isinstance(chart_width, int) or chart_width <= 0:
        chart_width = DEFAULT_CHART_WIDTH

    default_filter = config.get("default_filter")
    if default_filter not in TABLE_FILTERS:
        default_filter = "all"

    db_path_value = config.get("db_path")
    db_path = Path(db_path_value).expanduser() if isinstance(db_path_value, str) and db_path_value else get_db_path()

    return Settings(
        currency_symbol=symbol.strip(),
        chart_width=chart_width,
        default_filter=default_filter,
        db_path=db_path,
    )


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings, using defaults when the config file is missing or invalid.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Resolved Settings.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = {}
    except tomllib.TOMLDecodeError as e:
        logger.warning("Ignoring invalid config file: %s", e)
        config = {}
    return resolve_settings(config)
