"""Thin wrapper over a cursor that executed a built query"""
from typing import Any, Optional
from dataclasses import dataclass
import pandas as pd

try:
    import pyarrow  # noqa: F401
    HAS_PYARROW = True
except ImportError:
    HAS_PYARROW = False


@dataclass
class QueryResult:
    """Results of a query built from a template"""
    _cursor: Any
    sql: str

    @property
    def query_id(self) -> str:
        """The Snowflake query ID (sfqid)"""
        return self._cursor.sfqid

    @property
    def rowcount(self) -> int:
        """The number of rows affected or returned, -1 if unknown"""
        return self._cursor.rowcount if self._cursor.rowcount is not None else -1

    def fetch_one(self) -> Optional[tuple[Any, ...]]:
        return self._cursor.fetchone()

    def fetch_all(self) -> list[tuple[Any, ...]]:
        result = self._cursor.fetchall()
        return result if result else []

    def to_df(self, lowercase_columns: bool = True) -> pd.DataFrame:
        """Fetch all results as a single DataFrame with optional column casing"""
        if HAS_PYARROW:
            df = self._cursor.fetch_pandas_all()
        elif self._cursor.description:
            columns = [desc[0] for desc in self._cursor.description]
            df = pd.DataFrame(self._cursor.fetchall(), columns=columns)
        else:
            df = pd.DataFrame()

        if lowercase_columns and len(df.columns) > 0:
            df.columns = df.columns.str.lower()

        return df

    def __repr__(self) -> str:
        return f"QueryResult(query_id='{self.query_id}', rowcount={self.rowcount})"
