"""Print font size to on-screen pixel size.

Converts a font size given in points for a print resolution into the pixel
size that keeps its visual scale on the current screen:

    px = (points / 72) * screen_dpi * (screen_dpi / print_dpi)

The screen/print ratio is applied on top of the inch-to-pixel step, so the
result is quadratic in the screen resolution. Results are rounded half-up to
two decimals.
"""

from __future__ import annotations

import math
from typing import Iterable

from sizeconv.core.config import ConverterConfig, checked_config
from sizeconv.core.resolution import ResolutionDetector, default_detector
from sizeconv.utils.constants import POINTS_PER_INCH
from sizeconv.utils.validation import validate_positive_number


def round_half_up(value: float, decimals: int = 2) -> float:
    """Round to *decimals* places with halves going towards +inf."""
    scale = 10**decimals
    return math.floor(value * scale + 0.5) / scale


class PrintSizeConverter:
    """Maps print point sizes onto screen pixels.

    Args:
        detector: Screen resolution source. Defaults to ``default_detector``.
        config: Supplies the default print resolution and rounding digits.
    """

    def __init__(
        self,
        detector: ResolutionDetector | None = None,
        config: ConverterConfig | None = None,
    ):
        self.detector = detector or default_detector
        self.config = checked_config(config)

    def to_screen_pixels(self, points: float, print_resolution: float | None = None) -> float:
        """Convert a print font size in points to screen pixels.

        Args:
            points: Font size in points, > 0.
            print_resolution: Printer dpi, > 0. Defaults to the configured
                print resolution (300).

        Raises:
            ValidationError: If either argument is not a number greater than 0.
        """
        if print_resolution is None:
            print_resolution = self.config.print_resolution
        validate_positive_number("print font size", points)
        validate_positive_number("print resolution", print_resolution)

        screen = self.detector.detect()
        inches = points / POINTS_PER_INCH
        scale = screen / print_resolution
        return round_half_up(inches * screen * scale, self.config.decimals)

    def to_screen_pixels_batch(
        self, sizes: Iterable[float], print_resolution: float | None = None
    ) -> list[float]:
        return [self.to_screen_pixels(size, print_resolution) for size in sizes]


def print_points_to_screen_pixels(
    points: float,
    print_resolution: float | None = None,
    *,
    detector: ResolutionDetector | None = None,
) -> float:
    """Convert a print font size (pt at *print_resolution*) to screen pixels."""
    return PrintSizeConverter(detector).to_screen_pixels(points, print_resolution)


def print_points_to_screen_pixels_batch(
    sizes: Iterable[float],
    print_resolution: float | None = None,
    *,
    detector: ResolutionDetector | None = None,
) -> list[float]:
    """Batch form of :func:`print_points_to_screen_pixels`, order preserved."""
    return PrintSizeConverter(detector).to_screen_pixels_batch(sizes, print_resolution)
