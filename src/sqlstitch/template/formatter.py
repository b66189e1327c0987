"""Conversion of argument values into SQL literal text"""

from collections.abc import Mapping
from typing import Any

from sqlstitch.escaping import Escaper, quote_identifier, quote_literal
from sqlstitch.exceptions import (
    InvalidValue,
    InvalidValueType,
    UnsupportedValueType,
)
from sqlstitch.values import Specifier

NULL = "NULL"
SEPARATOR = ", "


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__


class ValueFormatter:
    """Format argument values according to a placeholder specifier"""

    def __init__(self, escaper: Escaper):
        self.escaper = escaper
        self._dispatch = {
            Specifier.NONE: self.format_default,
            Specifier.IDENTIFIER: self.format_identifier,
            Specifier.INT: self.format_int,
            Specifier.FLOAT: self.format_float,
            Specifier.ARRAY: self.format_array,
        }

    def format(self, value: Any, specifier: Specifier = Specifier.NONE) -> str:
        """Format a value as literal SQL text"""
        return self._dispatch[specifier](value)

    def format_default(self, value: Any) -> str:
        """Format a scalar: quoted string, bare number, 1/0 or NULL"""
        if isinstance(value, str):
            return quote_literal(self.escaper, value)
        if isinstance(value, bool):
            return "1" if value else "0"
        if _is_number(value):
            return str(value)
        if value is None:
            return NULL
        raise UnsupportedValueType(f"Unsupported value type {_type_name(value)}")

    def format_identifier(self, value: Any) -> str:
        """Format a name or a list of names as backtick-quoted identifiers"""
        if isinstance(value, str):
            return quote_identifier(self.escaper, value)
        if _is_list(value):
            if not all(isinstance(name, str) for name in value):
                raise InvalidValue("Identifier lists may only contain strings")
            return SEPARATOR.join(quote_identifier(self.escaper, name) for name in value)
        raise InvalidValue(f"Invalid identifier value of type {_type_name(value)}")

    def format_int(self, value: Any) -> str:
        if isinstance(value, bool):
            return "1" if value else "0"
        if _is_number(value):
            return str(value)
        if value is None:
            return NULL
        raise InvalidValueType(f"Invalid value type {_type_name(value)}")

    def format_float(self, value: Any) -> str:
        if _is_number(value):
            return str(value)
        if value is None:
            return NULL
        raise InvalidValue(f"Invalid float value of type {_type_name(value)}")

    def format_array(self, value: Any) -> str:
        """Format a list as a value list, a mapping as column assignments"""
        if _is_list(value):
            return SEPARATOR.join(self.format_default(item) for item in value)
        if isinstance(value, Mapping):
            return SEPARATOR.join(
                f"{quote_identifier(self.escaper, str(name))} = {self.format_default(item)}"
                for name, item in value.items()
            )
        raise InvalidValue(f"Invalid array value of type {_type_name(value)}")
