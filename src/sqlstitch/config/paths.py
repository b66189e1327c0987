"""Path resolution for sqlstitch configuration files."""

import os
from pathlib import Path
from typing import Optional, Union

CONFIG_FILENAME = "connections.toml"


def get_config_dir() -> Path:
    """
    Get the configuration directory for sqlstitch.

    Priority order:
    1. SQLSTITCH_CONFIG_DIR environment variable (override)
    2. ~/.sqlstitch/ (dotfile directory in user home)

    The directory is not created; a missing directory simply means no
    configuration file.

    Returns:
        Path: Configuration directory path
    """
    env_config_dir = os.getenv("SQLSTITCH_CONFIG_DIR")
    if env_config_dir:
        return Path(env_config_dir)
    return Path.home() / ".sqlstitch"


def get_default_config_path() -> Path:
    """Get the path connections.toml is expected at, whether or not it exists"""
    return get_config_dir() / CONFIG_FILENAME


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """
    Resolve the configuration file path.

    Args:
        path: Optional explicit path to connections.toml file.
              If None, uses default resolution logic.

    Returns:
        Path: Resolved path object
    """
    if path:
        return Path(path).expanduser()
    return get_default_config_path()
