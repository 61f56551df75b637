"""
Domain layer - Pure lane layout logic without external dependencies.
"""

from .errors import LaneConfigurationErrors, LaneRangeErrors, ValidationError
from .exceptions import (
    InvalidLaneConfigurationError,
    InvalidLaneRangeError,
    LaneLayoutError,
    LaneLayoutValidationError,
    LayoutFileError,
    UnknownPinFallTypeError,
)
from .lane_configuration import LaneConfiguration
from .lane_range import LanePair, LaneRange
from .pin_fall_type import PinFallType
from .result import Result

__all__ = [
    "InvalidLaneConfigurationError",
    "InvalidLaneRangeError",
    "LaneConfiguration",
    "LaneConfigurationErrors",
    "LaneLayoutError",
    "LaneLayoutValidationError",
    "LanePair",
    "LaneRange",
    "LaneRangeErrors",
    "LayoutFileError",
    "PinFallType",
    "Result",
    "ValidationError",
]
