"""Build-then-execute primitives"""

from sqlstitch.primitives.result import QueryResult
from sqlstitch.primitives.execute import (
    Executor,
    execute_template,
    query,
)

__all__ = [
    "QueryResult",
    "Executor",
    "execute_template",
    "query",
]
