"""SizeConv: millimeter, point and pixel conversion at a given or detected DPI."""

__app_name__ = "SizeConv"
__version__ = "0.1.0"

from sizeconv.core.converter import (  # noqa: E402
    SizeConverter,
    convert,
    mm_to_px,
    mm_to_px_batch,
    pt_to_px,
    pt_to_px_batch,
    px_to_mm,
    px_to_mm_batch,
    px_to_pt,
    px_to_pt_batch,
)
from sizeconv.core.print_size import (  # noqa: E402
    PrintSizeConverter,
    print_points_to_screen_pixels,
    print_points_to_screen_pixels_batch,
)
from sizeconv.core.resolution import (  # noqa: E402
    DetectionFailure,
    ResolutionDetector,
    detect_resolution,
    reset_resolution_cache,
    resolution_info,
)
from sizeconv.utils.validation import ValidationError  # noqa: E402

__all__ = [
    "DetectionFailure",
    "PrintSizeConverter",
    "ResolutionDetector",
    "SizeConverter",
    "ValidationError",
    "convert",
    "detect_resolution",
    "mm_to_px",
    "mm_to_px_batch",
    "print_points_to_screen_pixels",
    "print_points_to_screen_pixels_batch",
    "pt_to_px",
    "pt_to_px_batch",
    "px_to_mm",
    "px_to_mm_batch",
    "px_to_pt",
    "px_to_pt_batch",
    "reset_resolution_cache",
    "resolution_info",
]
