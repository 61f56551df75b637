"""
Shared factories for lane layout tests.
"""

import pytest

from lanelayout.domain.lane_configuration import LaneConfiguration
from lanelayout.domain.lane_range import LaneRange
from lanelayout.domain.pin_fall_type import PinFallType

VALID_START_LANE = 1
VALID_END_LANE = 10
VALID_PIN_FALL_TYPE = PinFallType.FREE_FALL


def _make_range(start_lane=VALID_START_LANE, end_lane=VALID_END_LANE, pin_fall_type=VALID_PIN_FALL_TYPE):
    return LaneRange.create(start_lane, end_lane, pin_fall_type).unwrap()


def _make_configuration(ranges=None):
    return LaneConfiguration.create(ranges or [_make_range()]).unwrap()


@pytest.fixture
def make_range():
    """Factory for valid LaneRange instances (defaults: 1-10, Free Fall)."""
    return _make_range


@pytest.fixture
def make_configuration():
    """Factory for valid LaneConfiguration instances."""
    return _make_configuration
