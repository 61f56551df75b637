"""
Domain-specific exception hierarchy for the lane layout engine.

The validating factories never raise; these are used at the edges
(file loading, ``Result.unwrap`` and direct construction of value objects).
"""

from .errors import ValidationError


class LaneLayoutError(Exception):
    """Base class for all application-level errors."""


class LaneLayoutValidationError(LaneLayoutError):
    """Raised when a failed ``Result`` is unwrapped."""

    def __init__(self, error: ValidationError):
        super().__init__(f"{error.code}: {error.description}")
        self.error = error


class InvalidLaneRangeError(LaneLayoutValidationError):
    """Raised when a LaneRange is constructed directly with invalid values."""


class InvalidLaneConfigurationError(LaneLayoutValidationError):
    """Raised when a LaneConfiguration is constructed directly with invalid ranges."""


class UnknownPinFallTypeError(LaneLayoutError, ValueError):
    """Raised when a pin fall type code or name cannot be resolved."""


class LayoutFileError(LaneLayoutError):
    """Raised when a layout file cannot be read or does not describe a center."""
