"""Pytest configuration and shared fixtures."""

import pytest

from sqlstitch import QueryBuilder
from sqlstitch.template import ValueFormatter


class BackslashEscaper:
    """Escapes like MySQL's real_escape_string, for tests without a connection."""

    _REPLACEMENTS = {
        "\\": "\\\\",
        "'": "\\'",
        '"': '\\"',
        "\n": "\\n",
        "\r": "\\r",
        "\x00": "\\0",
        "\x1a": "\\Z",
    }

    def __init__(self):
        self.calls: list[str] = []

    def escape_string(self, raw: str) -> str:
        self.calls.append(raw)
        return "".join(self._REPLACEMENTS.get(char, char) for char in raw)


@pytest.fixture
def escaper() -> BackslashEscaper:
    """Escaper that records every string it escapes."""
    return BackslashEscaper()


@pytest.fixture
def formatter(escaper) -> ValueFormatter:
    return ValueFormatter(escaper)


@pytest.fixture
def builder(escaper) -> QueryBuilder:
    return QueryBuilder(escaper)


@pytest.fixture
def config_file(tmp_path):
    """Create a temporary TOML config file with profiles and settings."""
    config_content = """
[sqlstitch]
strict_skip = true

[default]
account = "test-account.region"
user = "test-user@example.com"
warehouse = "TEST_WH"
database = "TEST_DB"

[dev]
account = "dev-account.region"
user = "dev-user@example.com"
password = "dev-secret"
warehouse = "DEV_WH"
schema = "DEV_SCHEMA"
"""
    config_path = tmp_path / "connections.toml"
    config_path.write_text(config_content)
    return config_path
