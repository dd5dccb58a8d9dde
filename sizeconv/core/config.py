"""Converter settings for SizeConv.

Settings live in memory only; nothing is read from or written to disk.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sizeconv.utils.constants import DEFAULT_DPI, PRINT_DPI
from sizeconv.utils.validation import ValidationResult, check_resolution

logger = logging.getLogger(__name__)


@dataclass
class ConverterConfig:
    """Tunable defaults shared by the detector and the converters."""

    fallback_resolution: float = DEFAULT_DPI  # dpi used when detection fails
    print_resolution: float = PRINT_DPI  # dpi assumed for print sizes
    decimals: int = 2  # rounding of print-to-screen results

    def validate(self) -> ValidationResult:
        """Check settings; non-positive resolutions and bad digits are errors."""
        result = ValidationResult()
        check_resolution("fallback_resolution", self.fallback_resolution, result)
        check_resolution("print_resolution", self.print_resolution, result)
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            result.error("decimals", f"decimals must be an integer, got {self.decimals!r}")
        elif self.decimals < 0:
            result.error("decimals", f"decimals must be >= 0, got {self.decimals}")
        return result


DEFAULT_CONFIG = ConverterConfig()


def checked_config(config: ConverterConfig | None) -> ConverterConfig:
    """Return *config* (or the default) after validating it.

    Warnings are logged; the first error is raised.

    Raises:
        ValidationError: If a setting is unusable, e.g. a fallback resolution of 0.
    """
    config = config or DEFAULT_CONFIG
    result = config.validate()
    for message in result.warnings:
        logger.warning("Config: %s", message.message)
    result.raise_for_errors()
    return config
