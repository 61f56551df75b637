"""
Validation errors returned by the lane layout factories.

Every error carries a stable code (e.g. ``LaneConfiguration.Ranges.Overlapping``)
that callers translate into user-facing messages.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

VALIDATION = "validation"


@dataclass(frozen=True)
class ValidationError:
    """A business-rule violation found while constructing a value object."""

    code: str
    description: str
    metadata: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Shared error constants must not leak metadata between callers.
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def kind(self) -> str:
        return VALIDATION

    def with_metadata(self, **values: str) -> "ValidationError":
        """Return a copy with extra metadata entries merged in."""
        merged = dict(self.metadata)
        merged.update(values)
        return ValidationError(code=self.code, description=self.description, metadata=merged)

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"


class LaneRangeErrors:
    """Errors produced by ``LaneRange.create``."""

    PIN_FALL_TYPE_REQUIRED = ValidationError(
        code="LaneRange.PinFallType.Required",
        description="Pin fall type is required.",
    )
    START_LANE_MUST_BE_ODD = ValidationError(
        code="LaneRange.StartLane.MustBeOdd",
        description="Start lane must be an odd number.",
    )
    END_LANE_MUST_BE_EVEN = ValidationError(
        code="LaneRange.EndLane.MustBeEven",
        description="End lane must be an even number.",
    )
    END_LANE_MUST_EXCEED_START_LANE = ValidationError(
        code="LaneRange.EndLane.MustExceedStartLane",
        description="End lane must be greater than start lane.",
    )


class LaneConfigurationErrors:
    """Errors produced by ``LaneConfiguration.create``."""

    RANGES_REQUIRED = ValidationError(
        code="LaneConfiguration.Ranges.Required",
        description="Lane configuration must contain at least one lane range.",
    )

    @staticmethod
    def ranges_overlapping(first: str, second: str) -> ValidationError:
        return ValidationError(
            code="LaneConfiguration.Ranges.Overlapping",
            description="Lane ranges must not overlap.",
            metadata={"first": first, "second": second},
        )

    @staticmethod
    def ranges_adjacent(first: str, second: str) -> ValidationError:
        return ValidationError(
            code="LaneConfiguration.Ranges.Adjacent",
            description=(
                "Adjacent lane ranges of the same pin fall type must be "
                "merged into a single range."
            ),
            metadata={"first": first, "second": second},
        )
