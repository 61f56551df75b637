"""
Application service for building validated lane configurations.

The service takes raw (start_lane, end_lane, pin_fall_type) triples from a
layout source and delegates all business rules to the domain-level
``LaneRange`` and ``LaneConfiguration`` factories. Depending on a protocol
keeps the CLI thin and lets tests plug in an in-memory source.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

from ..domain.lane_configuration import LaneConfiguration
from ..domain.lane_range import LaneRange
from ..domain.pin_fall_type import PinFallType
from ..domain.result import Result

logger = logging.getLogger(__name__)

LaneRangeTriple = Tuple[int, int, Optional[PinFallType]]


class LayoutSourceProtocol(Protocol):
    """Protocol describing the layout source behaviour needed by the service."""

    def center_names(self) -> List[str]:
        """Return the names of all centers the source knows."""

    def get_ranges(self, center_name: str) -> List[LaneRangeTriple]:
        """Return the lane range triples of one center."""


class LaneLayoutService:
    """
    Orchestrates layout retrieval and configuration validation.
    """

    def __init__(self, source: LayoutSourceProtocol) -> None:
        self._source = source

    @staticmethod
    def build_configuration(triples: Iterable[LaneRangeTriple]) -> Result[LaneConfiguration]:
        """
        Create every lane range in input order, then the configuration.

        The first failing range stops processing; its error metadata gains
        the 0-based ``index`` of the offending entry.
        """
        ranges: List[LaneRange] = []

        for index, (start_lane, end_lane, pin_fall_type) in enumerate(triples):
            result = LaneRange.create(start_lane, end_lane, pin_fall_type)
            if result.is_error:
                return Result.fail(result.error.with_metadata(index=str(index)))
            ranges.append(result.value)

        return LaneConfiguration.create(ranges)

    def load_center(self, center_name: str) -> Result[LaneConfiguration]:
        """
        Build the configuration of a single center.

        Raises:
            LayoutFileError: If the source does not know the center
        """
        result = self.build_configuration(self._source.get_ranges(center_name))

        if result.is_error:
            logger.info("Center '%s' rejected: %s", center_name, result.error.code)
        else:
            logger.debug(
                "Center '%s' valid: %d ranges, %d pairs",
                center_name, len(result.value.ranges), result.value.total_pair_count
            )

        return result

    def validate_all(self) -> Dict[str, Result[LaneConfiguration]]:
        """Build every center of the source, keyed by name in source order."""
        return {name: self.load_center(name) for name in self._source.center_names()}
