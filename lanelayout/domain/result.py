"""
Explicit success-or-error return value for the validating factories.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .errors import ValidationError
from .exceptions import LaneLayoutValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Holds either a constructed value or the first validation error.

    Invariant: exactly one of ``value`` and ``error`` is set.
    """
    value: Optional[T] = None
    error: Optional[ValidationError] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("Result must hold exactly one of value or error")

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: ValidationError) -> "Result[T]":
        return cls(error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """
        Return the value, raising if this result holds an error.

        Raises:
            LaneLayoutValidationError: If the result is a failure
        """
        if self.error is not None:
            raise LaneLayoutValidationError(self.error)
        return self.value

    def value_or(self, default: T) -> T:
        """Return the value, or ``default`` on failure."""
        return default if self.error is not None else self.value
