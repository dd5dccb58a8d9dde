"""Fixed unit ratios and named resolutions used throughout SizeConv.

Resolutions are in dots (pixels) per inch.
"""

# Length ratios
MM_PER_INCH = 25.4  # mm/in, exact by definition
POINTS_PER_INCH = 72.0  # pt/in, DTP (PostScript) point

# Named resolutions
SCREEN_DPI = 96.0  # CSS reference pixel density
PRINT_DPI = 300.0  # common office printer
HIGH_RES_DPI = 600.0

# Resolution used when the display cannot be measured
DEFAULT_DPI = SCREEN_DPI

STANDARD_DPI = {
    "screen": SCREEN_DPI,
    "print": PRINT_DPI,
    "high_res": HIGH_RES_DPI,
}

# Plausible range for a real output device; values outside only warn
MIN_PLAUSIBLE_DPI = 50.0
MAX_PLAUSIBLE_DPI = 2400.0

# Unit tags
MILLIMETER = "mm"
POINT = "pt"
PIXEL = "px"
SIZE_UNITS = (MILLIMETER, POINT, PIXEL)
