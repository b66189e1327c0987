"""Escaping capability used to neutralise SQL-significant characters"""

from typing import Any, Optional, Protocol, runtime_checkable

from snowflake.connector.converter import SnowflakeConverter


@runtime_checkable
class Escaper(Protocol):
    """Anything that can escape a raw string for literal interpolation"""

    def escape_string(self, raw: str) -> str:
        ...


class SnowflakeEscaper:
    """Escape strings with the Snowflake connector's converter

    The converter escapes backslashes, newlines, carriage returns and
    single quotes, the same rules the connector applies when it binds
    parameters client-side.
    """

    def __init__(self, converter: Optional[Any] = None):
        """Initialize with a converter instance, defaults to SnowflakeConverter"""
        self._converter = converter if converter is not None else SnowflakeConverter

    @classmethod
    def from_connection(cls, connection: Any) -> "SnowflakeEscaper":
        """Bind to the converter of an open connection"""
        converter = getattr(connection, "converter", None)
        if converter is None:
            raise ValueError(
                "Connection has no converter. Open the connection before "
                "building queries with it."
            )
        return cls(converter)

    def escape_string(self, raw: str) -> str:
        """Escape a raw string for use inside single quotes"""
        if not isinstance(raw, str):
            raise TypeError(f"Can only escape str, got {type(raw).__name__}")
        return self._converter.escape(raw)


def quote_literal(escaper: Escaper, raw: str) -> str:
    """Escape and single-quote a string literal"""
    return "'" + escaper.escape_string(raw) + "'"


def quote_identifier(escaper: Escaper, name: str) -> str:
    """Escape and backtick-quote an identifier, doubling embedded backticks"""
    return "`" + escaper.escape_string(name).replace("`", "``") + "`"
