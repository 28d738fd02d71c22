"""Segment records and the on-disk segment cache."""

from .segment import Segment
from .segment_cache import SegmentCache, segment_filename

__all__ = ["Segment", "SegmentCache", "segment_filename"]
