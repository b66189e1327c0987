"""Build executable SQL from templates with placeholders and conditional blocks"""

import logging
import os
import sys
import warnings
from typing import Optional, Sequence

from sqlstitch.escaping import Escaper, SnowflakeEscaper
from sqlstitch.exceptions import InvalidValue
from sqlstitch.template import (
    Placeholder,
    ValueFormatter,
    resolve_blocks,
    substitute_placeholders,
)
from sqlstitch.values import SkipType, Value, skip

logger = logging.getLogger(__name__)

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep


def _caller_stacklevel() -> int:
    """Stacklevel of the first frame outside sqlstitch, seen from the warning site"""
    level = 1
    frame = sys._getframe(1)
    while frame is not None and frame.f_code.co_filename.startswith(_PACKAGE_DIR):
        frame = frame.f_back
        level += 1
    return level


class QueryBuilder:
    """
    Substitute arguments into a SQL template and return the final query text.

    Templates use positional placeholders, each consuming the next argument:

    - ``?``  string, number, bool or NULL
    - ``?d`` integer (bool and NULL allowed)
    - ``?f`` float (NULL allowed)
    - ``?a`` list of values or mapping of column to value
    - ``?#`` identifier or list of identifiers

    A ``{...}`` block is removed entirely when any placeholder inside it is
    bound to ``skip()``, otherwise only its braces are removed. Blocks can
    not be nested.

    Args:
        escaper: Escaping capability, defaults to SnowflakeEscaper
        strict_skip: Raise InvalidValue when skip() is bound to a placeholder
            outside any conditional block instead of leaving it as written

    Example:
        >>> builder = QueryBuilder()
        >>> builder.build("SELECT * FROM t WHERE id = ?d", [5])
        'SELECT * FROM t WHERE id = 5'
        >>> builder.build("SELECT * FROM t{ WHERE id = ?d}", [builder.skip()])
        'SELECT * FROM t'
    """

    def __init__(self, escaper: Optional[Escaper] = None, strict_skip: bool = False):
        self.escaper = escaper if escaper is not None else SnowflakeEscaper()
        self.strict_skip = strict_skip
        self.formatter = ValueFormatter(self.escaper)

    def build(self, template: str, args: Sequence[Value] = ()) -> str:
        """Resolve conditional blocks, then substitute placeholders"""
        resolved, remaining = resolve_blocks(template, args)
        sql = substitute_placeholders(
            resolved, remaining, self.formatter, on_skip=self._stray_skip
        )
        logger.debug(f"Built query: {sql}")
        return sql

    @staticmethod
    def skip() -> SkipType:
        """Return the marker that drops a placeholder's conditional block"""
        return skip()

    def _stray_skip(self, token: Placeholder, arg_index: int) -> None:
        msg = (
            f"skip() bound to placeholder #{arg_index + 1} at position "
            f"{token.position}, which is outside any conditional block"
        )
        if self.strict_skip:
            raise InvalidValue(msg)
        warnings.warn(
            f"{msg}; the placeholder is left unsubstituted",
            UserWarning,
            stacklevel=_caller_stacklevel(),
        )

    def __repr__(self) -> str:
        return f"QueryBuilder(escaper={self.escaper!r}, strict_skip={self.strict_skip})"


def build_query(
    template: str,
    args: Sequence[Value] = (),
    escaper: Optional[Escaper] = None,
    strict_skip: bool = False,
) -> str:
    """Build a query with a one-off QueryBuilder"""
    return QueryBuilder(escaper, strict_skip=strict_skip).build(template, args)
