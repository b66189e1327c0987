"""Tokens of the template micro-syntax"""

from dataclasses import dataclass

from sqlstitch.exceptions import InvalidSpecifier
from sqlstitch.values import Specifier

PLACEHOLDER = "?"
BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"


@dataclass(frozen=True)
class Placeholder:
    """A placeholder token found in a template"""

    position: int
    specifier: Specifier

    @property
    def width(self) -> int:
        """Number of characters the token occupies"""
        return self.specifier.width

    @property
    def end(self) -> int:
        """Index just past the token"""
        return self.position + self.width


def read_placeholder(template: str, position: int) -> Placeholder:
    """Read the placeholder token starting at position

    A placeholder at the end of the template or followed by whitespace is
    bare. Otherwise the next character must be a known specifier.
    """
    following = template[position + 1:position + 2]
    if not following or following.isspace():
        return Placeholder(position, Specifier.NONE)

    specifier = Specifier.from_char(following)
    if specifier is None:
        raise InvalidSpecifier(f"Invalid specifier {following!r}", position + 1)
    return Placeholder(position, specifier)
