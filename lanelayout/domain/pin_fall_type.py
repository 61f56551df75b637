"""
Pinsetter mechanism categories used on tenpin lanes.
"""

from enum import Enum
from typing import List

from .exceptions import UnknownPinFallTypeError


class PinFallType(Enum):
    """
    The type of pinsetter mechanism used on a block of lanes.

    The value is the stable external code used by persistence and layout
    files; ``display_name`` is the human-readable label.
    """
    FREE_FALL = "FF"
    STRING_PIN = "SP"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def list(cls) -> List["PinFallType"]:
        """Return all pin fall types in declaration order."""
        return list(cls)

    @classmethod
    def from_value(cls, code: str) -> "PinFallType":
        """
        Look up a pin fall type by its external code ("FF", "SP").

        Raises:
            UnknownPinFallTypeError: If the code is not known
        """
        normalized = code.strip().upper()
        for member in cls:
            if member.value == normalized:
                return member
        raise UnknownPinFallTypeError(
            f"Unknown pin fall type code: '{code}'. "
            f"Expected one of: {', '.join(m.value for m in cls)}"
        )

    @classmethod
    def from_name(cls, name: str) -> "PinFallType":
        """
        Look up a pin fall type by display name ("Free Fall") or
        identifier ("FREE_FALL"), ignoring case.

        Raises:
            UnknownPinFallTypeError: If the name is not known
        """
        normalized = name.strip().lower()
        for member in cls:
            if normalized in (member.display_name.lower(), member.name.lower()):
                return member
        raise UnknownPinFallTypeError(
            f"Unknown pin fall type name: '{name}'. "
            f"Expected one of: {', '.join(m.display_name for m in cls)}"
        )

    @classmethod
    def parse(cls, text: str) -> "PinFallType":
        """Resolve either a code or a name."""
        try:
            return cls.from_value(text)
        except UnknownPinFallTypeError:
            pass
        try:
            return cls.from_name(text)
        except UnknownPinFallTypeError:
            raise UnknownPinFallTypeError(
                f"Unknown pin fall type: '{text}'. "
                f"Use a code ({', '.join(m.value for m in cls)}) "
                f"or a name ({', '.join(m.display_name for m in cls)})."
            ) from None

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES = {
    PinFallType.FREE_FALL: "Free Fall",
    PinFallType.STRING_PIN: "String Pin",
}
