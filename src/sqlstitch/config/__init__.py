"""Configuration module exports."""

from .config import load_profile, list_profiles, load_settings, BuilderSettings
from .paths import resolve_config_path, get_default_config_path, get_config_dir

__all__ = [
    "load_profile",
    "list_profiles",
    "load_settings",
    "BuilderSettings",
    "resolve_config_path",
    "get_default_config_path",
    "get_config_dir",
]
