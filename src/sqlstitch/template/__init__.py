"""Two-pass template engine: conditional blocks, then placeholders"""

from .conditionals import check_blocks, resolve_blocks, resolve_conditionals
from .formatter import ValueFormatter
from .placeholders import substitute_placeholders
from .tokens import Placeholder, read_placeholder

__all__ = [
    "check_blocks",
    "resolve_blocks",
    "resolve_conditionals",
    "substitute_placeholders",
    "ValueFormatter",
    "Placeholder",
    "read_placeholder",
]
