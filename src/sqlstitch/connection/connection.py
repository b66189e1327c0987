"""Snowflake connection management with profile support."""

from typing import Optional, Tuple, Any, Literal, Dict

import snowflake.connector
from pydantic import SecretStr

from sqlstitch.config import load_profile


class SnowflakeConnector:
    """
    Snowflake connection manager with TOML profile support and context manager protocol.

    Args:
        profile: Name of the profile to load from connections.toml
        **kwargs: Additional connection parameters to override profile settings

    Example:
        >>> with SnowflakeConnector(profile="dev") as (conn, cur):
        ...     cur.execute("SELECT CURRENT_VERSION()")
    """

    def __init__(self, profile: str, **kwargs: Any) -> None:
        self._cfg: Dict[str, Any] = load_profile(profile)
        self._cfg.update(kwargs)
        self._profile = profile

        # Password is only unwrapped in connect()
        password = self._cfg.pop("password", None)
        self.password: Optional[SecretStr] = SecretStr(password) if password else None

        self._connection: Optional[Any] = None
        self._cursor: Optional[Any] = None

    def connect(self) -> Tuple[Any, Any]:
        """
        Establish connection to Snowflake if not already connected.

        Returns:
            Tuple of (connection, cursor) objects
        """
        if self._connection is None:
            params = dict(self._cfg)
            if self.password is not None:
                params["password"] = self.password.get_secret_value()
            self._connection = snowflake.connector.connect(**params)
            self._cursor = self._connection.cursor()

        return self._connection, self._cursor

    def close(self) -> None:
        """Close the cursor and connection, releasing resources."""
        if self._cursor:
            self._cursor.close()
            self._cursor = None
        if self._connection:
            self._connection.close()
            self._connection = None

    def __enter__(self) -> Tuple[Any, Any]:
        return self.connect()

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> Literal[False]:
        """Close connection, always propagating exceptions."""
        self.close()
        return False

    def __repr__(self) -> str:
        status = "connected" if self._connection else "not connected"
        return f"SnowflakeConnector(profile='{self._profile}', {status})"
