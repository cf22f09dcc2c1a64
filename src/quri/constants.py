"""
Connective constants shared by all expression groups.
"""

from enum import Enum
from typing import Union

from .exceptions import InvalidConnectiveError


class Connective(str, Enum):
    AND = "and"
    OR = "or"

    @classmethod
    def coerce(cls, value: Union["Connective", str]) -> "Connective":
        """Return the connective for an enum member or an "and"/"or" string."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise InvalidConnectiveError(
            f"Connective must be one of: {', '.join(c.value for c in cls)}",
            connective=value,
        )

    @property
    def separator(self) -> str:
        return SEPARATORS[self]


SEPARATORS = {
    Connective.AND: ",",
    Connective.OR: "|",
}
