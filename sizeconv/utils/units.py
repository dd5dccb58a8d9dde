"""Physical length handling for SizeConv.

Arbitrary length units (cm, inch, m, ...) are mapped onto millimeters with
pint before entering the mm/pt/px arithmetic, so callers are not limited to
the three unit tags the converters work in.
"""

from __future__ import annotations

import tokenize
from functools import lru_cache

import pint

from sizeconv.utils.validation import ValidationError

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()

Q_ = _ureg.Quantity

# Raised by pint's unit-string parser on malformed input ("1/0", "mm)", "mm**")
_UNIT_PARSE_ERRORS = (
    pint.errors.PintError,
    tokenize.TokenError,
    ZeroDivisionError,
    AssertionError,
    AttributeError,
    ValueError,
)


@lru_cache(maxsize=64)
def mm_per_unit(unit: str) -> float:
    """Return how many millimeters one *unit* spans.

    Raises:
        ValidationError: If *unit* is unknown to pint or not a length.
    """
    try:
        quantity = Q_(1.0, unit)
    except _UNIT_PARSE_ERRORS as e:
        raise ValidationError("unit", f"Unknown unit '{unit}'") from e
    if not quantity.check("[length]"):
        raise ValidationError("unit", f"'{unit}' is not a length unit")
    # Snap float noise from pint's factor chain (inch -> 25.400000000000002)
    return round(quantity.to("mm").magnitude, 12)


def length_to_mm(value: float, unit: str) -> float:
    """Convert a length to millimeters.

    Args:
        value: Numeric length.
        unit: Source unit string (e.g. "cm", "inch", "m").

    Returns:
        Length in mm.
    """
    return value * mm_per_unit(unit)


def length_from_mm(value_mm: float, unit: str) -> float:
    """Convert a length from millimeters to the target unit."""
    return value_mm / mm_per_unit(unit)
