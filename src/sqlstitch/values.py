"""Argument values accepted by the query builder"""

from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Union


class SkipType:
    """Marker for an argument that is intentionally absent

    Binding a placeholder to the marker drops the conditional block
    around it. There is exactly one instance, returned by skip()
    """

    _instance: Optional["SkipType"] = None

    def __new__(cls) -> "SkipType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SKIP"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "SkipType":
        return self

    def __deepcopy__(self, memo: Any) -> "SkipType":
        return self

    def __reduce__(self) -> str:
        return "SKIP"


SKIP = SkipType()


def skip() -> SkipType:
    """Return the marker that drops a placeholder's conditional block"""
    return SKIP


def is_skip(value: Any) -> bool:
    """Check whether a value is the skip marker"""
    return value is SKIP


Scalar = Union[int, float, str, bool, None]
Value = Union[Scalar, Sequence[Scalar], Mapping[str, Scalar], SkipType]


class Specifier(str, Enum):
    """Type tag written directly after a placeholder"""

    NONE = ""
    IDENTIFIER = "#"
    INT = "d"
    FLOAT = "f"
    ARRAY = "a"

    @classmethod
    def from_char(cls, char: str) -> Optional["Specifier"]:
        """Look up a specifier by its character, None if unknown"""
        if not char:
            return None
        try:
            return cls(char)
        except ValueError:
            return None

    @property
    def width(self) -> int:
        """Number of characters the placeholder token occupies"""
        return 1 if self is Specifier.NONE else 2
