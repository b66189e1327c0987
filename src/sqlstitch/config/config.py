"""Configuration loading for connection profiles and builder settings."""

import sys
from pathlib import Path
from typing import Dict, Union, Optional, Any

from pydantic import BaseModel, ConfigDict

# Use tomllib for Python 3.11+, fallback to tomli for older versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        raise ImportError(
            "Python < 3.11 requires 'tomli' package. " +
            "Install it with: pip install tomli"
        )

from .paths import resolve_config_path

SETTINGS_TABLE = "sqlstitch"


class BuilderSettings(BaseModel):
    """Options for QueryBuilder read from the [sqlstitch] table"""

    model_config = ConfigDict(extra="forbid", frozen=True)

    strict_skip: bool = False
    log_queries: bool = False


def _read_config(config_file: Path) -> Dict[str, Any]:
    with open(config_file, "rb") as f:
        return tomllib.load(f)


def load_profile(
    profile: str,
    path: Optional[Union[str, Path]] = None
) -> Dict[str, Any]:
    """
    Load a connection profile from connections.toml file.

    Args:
        profile: Name of the profile to load
        path: Optional explicit path to connections.toml file.
              If None, searches in standard locations.

    Returns:
        Dictionary containing connection parameters for the profile

    Raises:
        FileNotFoundError: If connections.toml file is not found
        KeyError: If the specified profile doesn't exist in the file

    Example:
        >>> config = load_profile("dev")
        >>> config
        {'account': 'myaccount', 'user': 'myuser', ...}
    """
    config_file = resolve_config_path(path)

    if not config_file.exists():
        raise FileNotFoundError(
            f"Configuration file not found at {config_file}. " +
            "Create a connections.toml file or set SQLSTITCH_CONFIG_DIR."
        )

    all_profiles = _read_config(config_file)
    all_profiles.pop(SETTINGS_TABLE, None)

    if profile not in all_profiles:
        available = ", ".join(all_profiles.keys())
        raise KeyError(
            f"Profile '{profile}' not found in {config_file}. " +
            f"Available profiles: {available}"
        )

    return dict(all_profiles[profile])


def list_profiles(path: Optional[Union[str, Path]] = None) -> list[str]:
    """
    List all available profiles in connections.toml file.

    Returns:
        List of profile names, empty if the file does not exist
    """
    config_file = resolve_config_path(path)

    if not config_file.exists():
        return []

    return [name for name in _read_config(config_file) if name != SETTINGS_TABLE]


def load_settings(path: Optional[Union[str, Path]] = None) -> BuilderSettings:
    """
    Load builder settings from the [sqlstitch] table of connections.toml.

    A missing file or table gives the defaults.

    Raises:
        pydantic.ValidationError: If the table has unknown keys or bad values
    """
    config_file = resolve_config_path(path)

    if not config_file.exists():
        return BuilderSettings()

    return BuilderSettings(**_read_config(config_file).get(SETTINGS_TABLE, {}))
