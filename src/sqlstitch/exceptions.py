"""Exceptions raised while building queries from templates"""

from typing import Optional


class TemplateError(ValueError):
    """Base class for every error raised by the query builder"""


class TemplateSyntaxError(TemplateError):
    """The template itself is malformed"""

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)


class MalformedTemplate(TemplateSyntaxError):
    """A conditional block was opened while another one was still open"""


class UnmatchedCloseBrace(TemplateSyntaxError):
    """A closing brace has no matching opening brace"""


class EmptyConditionalBlock(TemplateSyntaxError):
    """A conditional block contains no placeholder"""


class UnclosedConditionalBlock(TemplateSyntaxError):
    """The template ended inside a conditional block"""


class InvalidSpecifier(TemplateSyntaxError):
    """The character after a placeholder is not a known specifier"""


class ArgumentError(TemplateError):
    """Placeholders and arguments do not line up"""


class MissingConditionalArgument(ArgumentError):
    """A placeholder inside a conditional block has no argument"""


class MissingArgument(ArgumentError):
    """A placeholder has no argument left to consume"""


class InvalidValue(TemplateError):
    """An argument cannot be formatted with the requested specifier"""


class InvalidValueType(InvalidValue):
    """An argument has a type the integer specifier does not accept"""


class UnsupportedValueType(InvalidValue):
    """An argument has a type that has no default SQL literal form"""
