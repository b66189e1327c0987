"""Build queries from templates and execute them"""

import logging
from typing import Any, Sequence, Union

import pandas as pd

from sqlstitch.context import SnowflakeContext
from sqlstitch.values import Value

from .result import QueryResult

logger = logging.getLogger(__name__)


class Executor:
    """Build SQL from templates against a context and run it"""

    def __init__(self, context: Union[str, SnowflakeContext], **overrides: Any):
        """Initialize with a context profile name or SnowflakeContext instance"""
        if isinstance(context, str):
            self.context = SnowflakeContext(profile=context, **overrides)
        else:
            self.context = context

    def build(self, template: str, *args: Value) -> str:
        """Build the final SQL without executing it"""
        return self.context.builder.build(template, args)

    def run(self, template: str, *args: Value) -> QueryResult:
        """Build the SQL, execute it and return a QueryResult"""
        sql = self.build(template, *args)
        if self.context.settings.log_queries:
            logger.info(f"Executing: {sql}")
        cursor = self.context.cursor.execute(sql)
        return QueryResult(_cursor=cursor, sql=sql)


def execute_template(
    template: str,
    args: Sequence[Value],
    context: Union[str, SnowflakeContext],
    **overrides: Any,
) -> QueryResult:
    """Build and execute a templated query, returning a QueryResult

    Example:
        >>> execute_template(
        ...     "DELETE FROM jobs WHERE id IN (?a){ AND owner = ?}",
        ...     [[1, 2, 3], skip()],
        ...     context="dev",
        ... )
    """
    return Executor(context, **overrides).run(template, *args)


def query(
    template: str,
    args: Sequence[Value],
    context: Union[str, SnowflakeContext],
    **overrides: Any,
) -> pd.DataFrame:
    """Build and execute a templated query, returning a DataFrame"""
    return Executor(context, **overrides).run(template, *args).to_df()
