"""
A contiguous block of lanes sharing one pinsetter mechanism.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import LaneRangeErrors, ValidationError
from .exceptions import InvalidLaneRangeError
from .pin_fall_type import PinFallType
from .result import Result

logger = logging.getLogger(__name__)

LanePair = Tuple[int, int]


def _check_lane_range(
    start_lane: int,
    end_lane: int,
    pin_fall_type: Optional[PinFallType]
) -> Optional[ValidationError]:
    """Return the first rule the values break, or None."""
    if pin_fall_type is None:
        return LaneRangeErrors.PIN_FALL_TYPE_REQUIRED

    # Parity only: negative odd start lanes are accepted.
    if start_lane % 2 == 0:
        return LaneRangeErrors.START_LANE_MUST_BE_ODD

    if end_lane % 2 != 0:
        return LaneRangeErrors.END_LANE_MUST_BE_EVEN

    if end_lane <= start_lane:
        return LaneRangeErrors.END_LANE_MUST_EXCEED_START_LANE

    return None


@dataclass(frozen=True)
class LaneRange:
    """
    Represents an immutable block of lanes from an odd start lane to an
    even end lane. Lanes are always used in consecutive (odd, even) pairs.

    Invariant: start_lane is odd, end_lane is even, end_lane > start_lane.
    Use ``LaneRange.create`` to get validation errors as values.
    """
    start_lane: int
    end_lane: int
    pin_fall_type: PinFallType

    def __post_init__(self):
        error = _check_lane_range(self.start_lane, self.end_lane, self.pin_fall_type)
        if error is not None:
            raise InvalidLaneRangeError(error)

    @classmethod
    def create(
        cls,
        start_lane: int,
        end_lane: int,
        pin_fall_type: Optional[PinFallType]
    ) -> Result["LaneRange"]:
        """
        Create a LaneRange, validating its bounds.

        Args:
            start_lane: First lane of the range (must be odd)
            end_lane: Last lane of the range (must be even and above start_lane)
            pin_fall_type: Pinsetter mechanism for every lane in the range

        Returns:
            Result holding the LaneRange or the first validation error
        """
        error = _check_lane_range(start_lane, end_lane, pin_fall_type)
        if error is not None:
            logger.debug(
                "Rejected lane range %s-%s (%s): %s",
                start_lane, end_lane, pin_fall_type, error.code
            )
            return Result.fail(error)

        return Result.ok(cls(start_lane=start_lane, end_lane=end_lane, pin_fall_type=pin_fall_type))

    @property
    def pair_count(self) -> int:
        """Number of (odd, even) lane pairs in the range."""
        return (self.end_lane - self.start_lane + 1) // 2

    @property
    def lane_count(self) -> int:
        return self.end_lane - self.start_lane + 1

    def lane_pairs(self) -> List[LanePair]:
        """
        Return the lane pairs of this range in order.

        Example: 3-8 -> [(3, 4), (5, 6), (7, 8)]
        """
        return [
            (odd_lane, odd_lane + 1)
            for odd_lane in range(self.start_lane, self.end_lane, 2)
        ]

    def contains(self, lane: int) -> bool:
        """Check if a lane number falls within this range."""
        return self.start_lane <= lane <= self.end_lane

    def label(self) -> str:
        return f"{self.start_lane}-{self.end_lane}"

    def __str__(self) -> str:
        return f"{self.label()} ({self.pin_fall_type.value})"
