"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .lane_layout import LaneLayoutService, LaneRangeTriple, LayoutSourceProtocol

__all__ = ["LaneLayoutService", "LaneRangeTriple", "LayoutSourceProtocol"]
