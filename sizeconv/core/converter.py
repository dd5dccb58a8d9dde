"""Millimeter, point and pixel conversion.

All conversions go through a single units-per-inch table:

    mm -> 25.4      pt -> 72      px -> resolution (dpi)

so converting *value* from unit A to unit B is
``value * per_inch[B] / per_inch[A]``. Results in pixels are rounded up to
the next whole pixel unless ``direct=True`` is passed; results in mm or pt
are never rounded.

When no resolution is given, the converter asks its ``ResolutionDetector``
(cached). An explicit resolution is validated as-is, so ``0`` or a negative
value raises instead of silently falling back to detection.
"""

from __future__ import annotations

import math
from typing import Any, Iterable

from sizeconv.core.resolution import ResolutionDetector, default_detector
from sizeconv.utils.constants import MILLIMETER, MM_PER_INCH, PIXEL, POINT, POINTS_PER_INCH
from sizeconv.utils.validation import ValidationError, validate_number, validate_positive_number

# Fixed entries of the units-per-inch table; pixels depend on the resolution
_UNITS_PER_INCH: dict[str, float] = {
    MILLIMETER: MM_PER_INCH,
    POINT: POINTS_PER_INCH,
}

# Argument names used in validation messages
_VALUE_NAMES: dict[str, str] = {
    MILLIMETER: "millimeter value",
    POINT: "point value",
    PIXEL: "pixel value",
}


def _check_unit(unit: Any) -> str:
    if unit not in _VALUE_NAMES:
        raise ValidationError("unit", f"Unknown unit {unit!r}; expected one of {list(_VALUE_NAMES)}")
    return unit


class SizeConverter:
    """Converts sizes between mm, pt and px.

    Args:
        detector: Resolution source used when a call gives no resolution.
            Defaults to the process-wide ``default_detector``.
    """

    def __init__(self, detector: ResolutionDetector | None = None):
        self.detector = detector or default_detector

    def resolve_resolution(self, resolution: float | None = None) -> float:
        """Return *resolution* if given, else the detected one; must be > 0."""
        if resolution is None:
            resolution = self.detector.detect()
        validate_positive_number("resolution", resolution)
        return resolution

    def _per_inch(self, unit: str, resolution: float | None) -> float:
        if unit == PIXEL:
            return resolution
        return _UNITS_PER_INCH[unit]

    def convert(
        self,
        value: float,
        from_unit: str,
        to_unit: str,
        resolution: float | None = None,
        *,
        direct: bool = False,
    ) -> float:
        """Convert *value* between any two of ``"mm"``, ``"pt"``, ``"px"``.

        Args:
            value: Magnitude in *from_unit*.
            from_unit: Source unit tag.
            to_unit: Target unit tag.
            resolution: Dots per inch; detected when None. Only used when
                one side is pixels.
            direct: Return the unrounded pixel value.

        Returns:
            Converted magnitude. Pixel results are ceiled to an int unless
            *direct* is set.

        Raises:
            ValidationError: On an unknown unit, a non-finite value, or a
                resolution that is not a positive number.
        """
        _check_unit(from_unit)
        _check_unit(to_unit)
        validate_number(_VALUE_NAMES[from_unit], value)

        dpi = self.resolve_resolution(resolution) if PIXEL in (from_unit, to_unit) else None
        if from_unit == to_unit:
            direct_value = value
        else:
            direct_value = value * self._per_inch(to_unit, dpi) / self._per_inch(from_unit, dpi)
        if to_unit == PIXEL and not direct:
            return math.ceil(direct_value)
        return direct_value

    # --- Single values ---

    def mm_to_px(self, mm: float, resolution: float | None = None, *, direct: bool = False) -> float:
        """Millimeters to pixels: ``mm * resolution / 25.4``, ceiled unless *direct*."""
        return self.convert(mm, MILLIMETER, PIXEL, resolution, direct=direct)

    def px_to_mm(self, px: float, resolution: float | None = None) -> float:
        """Pixels to millimeters: ``px * 25.4 / resolution``."""
        return self.convert(px, PIXEL, MILLIMETER, resolution)

    def pt_to_px(self, pt: float, resolution: float | None = None, *, direct: bool = False) -> float:
        """Points to pixels: ``pt * resolution / 72``, ceiled unless *direct*."""
        return self.convert(pt, POINT, PIXEL, resolution, direct=direct)

    def px_to_pt(self, px: float, resolution: float | None = None) -> float:
        """Pixels to points: ``px * 72 / resolution``."""
        return self.convert(px, PIXEL, POINT, resolution)

    # --- Batches (all-or-nothing, order preserved) ---

    def mm_to_px_batch(
        self, values: Iterable[float], resolution: float | None = None, *, direct: bool = False
    ) -> list[float]:
        return [self.mm_to_px(v, resolution, direct=direct) for v in values]

    def px_to_mm_batch(self, values: Iterable[float], resolution: float | None = None) -> list[float]:
        return [self.px_to_mm(v, resolution) for v in values]

    def pt_to_px_batch(
        self, values: Iterable[float], resolution: float | None = None, *, direct: bool = False
    ) -> list[float]:
        return [self.pt_to_px(v, resolution, direct=direct) for v in values]

    def px_to_pt_batch(self, values: Iterable[float], resolution: float | None = None) -> list[float]:
        return [self.px_to_pt(v, resolution) for v in values]


# --- Module-level API bound to the default detector ---

_default_converter = SizeConverter()

convert = _default_converter.convert
mm_to_px = _default_converter.mm_to_px
px_to_mm = _default_converter.px_to_mm
pt_to_px = _default_converter.pt_to_px
px_to_pt = _default_converter.px_to_pt
mm_to_px_batch = _default_converter.mm_to_px_batch
px_to_mm_batch = _default_converter.px_to_mm_batch
pt_to_px_batch = _default_converter.pt_to_px_batch
px_to_pt_batch = _default_converter.px_to_pt_batch
