"""
Tests for the LaneLayoutService orchestration layer.
"""

from typing import Dict, List

import pytest

from lanelayout.domain.exceptions import LayoutFileError
from lanelayout.domain.pin_fall_type import PinFallType
from lanelayout.services.lane_layout import LaneLayoutService, LaneRangeTriple

FF = PinFallType.FREE_FALL
SP = PinFallType.STRING_PIN


class StubLayoutSource:
    """Minimal stub matching LayoutSourceProtocol."""

    def __init__(self, centers: Dict[str, List[LaneRangeTriple]]):
        self._centers = centers
        self.calls: List[str] = []

    def center_names(self) -> List[str]:
        return list(self._centers)

    def get_ranges(self, center_name: str) -> List[LaneRangeTriple]:
        self.calls.append(center_name)
        if center_name not in self._centers:
            raise LayoutFileError(f"Unknown center: '{center_name}'")
        return self._centers[center_name]


def test_build_configuration_success():
    """Valid triples produce a sorted configuration."""
    result = LaneLayoutService.build_configuration([(13, 20, FF), (1, 10, FF)])

    assert not result.is_error
    assert result.value.total_pair_count == 9
    assert [r.start_lane for r in result.value.ranges] == [1, 13]


def test_build_configuration_reports_range_index():
    """The first invalid range is reported with its position."""
    result = LaneLayoutService.build_configuration([(1, 10, FF), (12, 20, FF), (21, 23, SP)])

    assert result.error.code == "LaneRange.StartLane.MustBeOdd"
    assert result.error.metadata == {"index": "1"}


def test_build_configuration_missing_type():
    """A triple without a pin fall type reports Required."""
    result = LaneLayoutService.build_configuration([(1, 10, None)])

    assert result.error.code == "LaneRange.PinFallType.Required"


def test_build_configuration_empty():
    """No triples at all reports Ranges.Required."""
    result = LaneLayoutService.build_configuration([])

    assert result.error.code == "LaneConfiguration.Ranges.Required"


def test_load_center_uses_source():
    """load_center fetches from the source and validates."""
    source = StubLayoutSource({"A": [(1, 10, FF), (11, 20, SP)]})
    service = LaneLayoutService(source=source)

    result = service.load_center("A")

    assert source.calls == ["A"]
    assert result.value.total_pair_count == 10


def test_load_center_unknown_raises():
    """Unknown centers propagate the source error."""
    service = LaneLayoutService(source=StubLayoutSource({}))

    with pytest.raises(LayoutFileError):
        service.load_center("Missing")


def test_validate_all_keeps_source_order():
    """Every center is validated and keyed by name in source order."""
    source = StubLayoutSource({
        "Overlap": [(1, 10, FF), (5, 14, FF)],
        "Adjacent": [(1, 10, FF), (11, 20, FF)],
        "Split": [(1, 22, FF), (27, 60, FF)],
    })
    service = LaneLayoutService(source=source)

    results = service.validate_all()

    assert list(results) == ["Overlap", "Adjacent", "Split"]
    assert results["Overlap"].error.code == "LaneConfiguration.Ranges.Overlapping"
    assert results["Adjacent"].error.code == "LaneConfiguration.Ranges.Adjacent"
    assert results["Split"].value.total_pair_count == 28
