"""Utility modules for SizeConv."""

from sizeconv.utils.constants import MM_PER_INCH, POINTS_PER_INCH, SCREEN_DPI
from sizeconv.utils.units import length_from_mm, length_to_mm

__all__ = ["MM_PER_INCH", "POINTS_PER_INCH", "SCREEN_DPI", "length_from_mm", "length_to_mm"]
