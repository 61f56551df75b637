"""
The full lane layout of a bowling center.

Core validation logic - pure domain code without any I/O. Ranges are
checked pairwise after sorting by start lane:

1. No two ranges may share a lane number
2. Two ranges that touch (no lane gap) must differ in pin fall type,
   otherwise they should have been a single range
3. Ranges separated by a gap may share a pin fall type (split centers)
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import LaneConfigurationErrors, ValidationError
from .exceptions import InvalidLaneConfigurationError
from .lane_range import LanePair, LaneRange
from .pin_fall_type import PinFallType
from .result import Result

logger = logging.getLogger(__name__)


def _sort_and_check(
    ranges: Optional[Iterable[LaneRange]]
) -> Tuple[Tuple[LaneRange, ...], Optional[ValidationError]]:
    """
    Sort ranges by start lane and return them with the first rule violation.
    """
    if ranges is None:
        return (), LaneConfigurationErrors.RANGES_REQUIRED

    sorted_ranges = tuple(sorted(ranges, key=lambda r: r.start_lane))

    if not sorted_ranges:
        return sorted_ranges, LaneConfigurationErrors.RANGES_REQUIRED

    for current, following in zip(sorted_ranges, sorted_ranges[1:]):
        if current.end_lane >= following.start_lane:
            return sorted_ranges, LaneConfigurationErrors.ranges_overlapping(
                current.label(), following.label()
            )

        touching = current.end_lane + 1 == following.start_lane
        if touching and current.pin_fall_type == following.pin_fall_type:
            return sorted_ranges, LaneConfigurationErrors.ranges_adjacent(
                current.label(), following.label()
            )

    return sorted_ranges, None


@dataclass(frozen=True)
class LaneConfiguration:
    """
    An ordered, non-overlapping collection of lane ranges.

    ``ranges`` is always sorted ascending by start lane, whatever order the
    ranges were supplied in. Two configurations are equal when their sorted
    ranges are equal.
    """
    ranges: Tuple[LaneRange, ...]

    def __post_init__(self):
        sorted_ranges, error = _sort_and_check(self.ranges)
        if error is not None:
            raise InvalidLaneConfigurationError(error)
        object.__setattr__(self, "ranges", sorted_ranges)

    @classmethod
    def create(cls, ranges: Optional[Iterable[LaneRange]]) -> Result["LaneConfiguration"]:
        """
        Create a LaneConfiguration from lane ranges in any order.

        Validation is fail-fast: only the first violation found while
        walking the sorted ranges left to right is returned.

        Args:
            ranges: Lane ranges making up the center

        Returns:
            Result holding the LaneConfiguration or the first validation error
        """
        sorted_ranges, error = _sort_and_check(ranges)
        if error is not None:
            logger.debug("Rejected lane configuration: %s %s", error.code, dict(error.metadata))
            return Result.fail(error)

        return Result.ok(cls(ranges=sorted_ranges))

    @property
    def total_pair_count(self) -> int:
        """Total number of lane pairs across all ranges."""
        return sum(r.pair_count for r in self.ranges)

    @property
    def total_lane_count(self) -> int:
        return sum(r.lane_count for r in self.ranges)

    def lane_pairs(self) -> List[LanePair]:
        """Return every lane pair of the center in lane order."""
        pairs: List[LanePair] = []
        for lane_range in self.ranges:
            pairs.extend(lane_range.lane_pairs())
        return pairs

    def range_for_lane(self, lane: int) -> Optional[LaneRange]:
        """Find the range containing a lane, or None if the lane is unused."""
        for lane_range in self.ranges:
            if lane_range.contains(lane):
                return lane_range
        return None

    def pair_count_by_pin_fall_type(self) -> Dict[PinFallType, int]:
        """Sum lane pairs per pin fall type present in the center."""
        counts: Dict[PinFallType, int] = {}
        for lane_range in self.ranges:
            counts[lane_range.pin_fall_type] = (
                counts.get(lane_range.pin_fall_type, 0) + lane_range.pair_count
            )
        return counts

    def __str__(self) -> str:
        return ", ".join(str(r) for r in self.ranges)
