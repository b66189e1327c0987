"""Snowflake connection context with a connection-bound query builder"""

from typing import TYPE_CHECKING, Any, Optional

from sqlstitch.builder import QueryBuilder
from sqlstitch.config import BuilderSettings, load_settings
from sqlstitch.escaping import SnowflakeEscaper

if TYPE_CHECKING:
    from sqlstitch.connection import SnowflakeConnector


class SnowflakeContext:
    """Manages connection, cursor and query builder with lazy initialization"""

    def __init__(
        self,
        profile: Optional[str] = None,
        connection: Optional[Any] = None,
        cursor: Optional[Any] = None,
        settings: Optional[BuilderSettings] = None,
        **overrides: Any,
    ):
        """Initialize with a profile name or an existing connection"""
        if profile is None and connection is None:
            raise ValueError(
                "SnowflakeContext requires either 'profile' or 'connection'"
            )
        if profile is not None and connection is not None:
            raise ValueError(
                "SnowflakeContext: provide either 'profile' or 'connection', not both"
            )

        self._profile = profile
        self._connection = connection
        self._cursor = cursor
        self._settings = settings
        self._overrides = overrides
        self._connector: Optional["SnowflakeConnector"] = None
        self._owns_connector = False
        self._builder: Optional[QueryBuilder] = None

    @property
    def connection(self) -> Any:
        """Get Snowflake connection, creating if needed"""
        if self._connection is None:
            from sqlstitch.connection import SnowflakeConnector

            assert self._profile is not None
            self._connector = SnowflakeConnector(
                profile=self._profile, **self._overrides
            )
            conn, cur = self._connector.connect()
            self._connection = conn
            self._cursor = cur
            self._owns_connector = True

        return self._connection

    @property
    def cursor(self) -> Any:
        """Get Snowflake cursor, creating if needed"""
        if self._cursor is None:
            self._cursor = self.connection.cursor()

        return self._cursor

    @property
    def settings(self) -> BuilderSettings:
        """Builder settings, loaded from connections.toml on first use"""
        if self._settings is None:
            self._settings = load_settings()
        return self._settings

    @property
    def escaper(self) -> SnowflakeEscaper:
        """Escaper bound to this context's connection"""
        return SnowflakeEscaper.from_connection(self.connection)

    @property
    def builder(self) -> QueryBuilder:
        """Query builder using this context's escaper and settings"""
        if self._builder is None:
            self._builder = QueryBuilder(
                self.escaper, strict_skip=self.settings.strict_skip
            )
        return self._builder

    def close(self) -> None:
        """Close connection if owned by this context"""
        if self._owns_connector and self._connector is not None:
            self._connector.close()
            self._connector = None
            self._connection = None
            self._cursor = None
            self._builder = None

    def __enter__(self) -> "SnowflakeContext":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        if self._connection is not None:
            return "SnowflakeContext(connection=<active>)"
        return f"SnowflakeContext(profile='{self._profile}')"
