"""
sqlstitch - SQL templates with positional placeholders and conditional blocks

Code is organized in layers
- template/ is the two-pass engine (conditional blocks, then placeholders)
- builder and escaping wire the engine to an escaping capability
- config/, connection/ and context bind it to a Snowflake connection
- primitives/ build and execute in one call
"""

# Layer 1: Templating
from sqlstitch.values import SKIP, SkipType, Specifier, skip
from sqlstitch.escaping import Escaper, SnowflakeEscaper
from sqlstitch.builder import QueryBuilder, build_query
from sqlstitch.exceptions import (
    TemplateError,
    TemplateSyntaxError,
    MalformedTemplate,
    UnmatchedCloseBrace,
    EmptyConditionalBlock,
    UnclosedConditionalBlock,
    InvalidSpecifier,
    ArgumentError,
    MissingConditionalArgument,
    MissingArgument,
    InvalidValue,
    InvalidValueType,
    UnsupportedValueType,
)

# Layer 2: Configuration & Connection
from sqlstitch.config import load_profile, list_profiles, load_settings
from sqlstitch.connection import SnowflakeConnector
from sqlstitch.context import SnowflakeContext

# Layer 3: Execution
from sqlstitch.primitives import QueryResult, Executor, execute_template, query

__version__ = "0.1.0"
__all__ = [
    # Layer 1: Templating
    "SKIP",
    "SkipType",
    "Specifier",
    "skip",
    "Escaper",
    "SnowflakeEscaper",
    "QueryBuilder",
    "build_query",
    "TemplateError",
    "TemplateSyntaxError",
    "MalformedTemplate",
    "UnmatchedCloseBrace",
    "EmptyConditionalBlock",
    "UnclosedConditionalBlock",
    "InvalidSpecifier",
    "ArgumentError",
    "MissingConditionalArgument",
    "MissingArgument",
    "InvalidValue",
    "InvalidValueType",
    "UnsupportedValueType",
    # Layer 2: Configuration & Connection
    "load_profile",
    "list_profiles",
    "load_settings",
    "SnowflakeConnector",
    "SnowflakeContext",
    # Layer 3: Execution
    "QueryResult",
    "Executor",
    "execute_template",
    "query",
]
