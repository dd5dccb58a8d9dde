"""Display resolution detection with a per-detector cache.

A *probe* measures how many pixels the current display uses for one
physical inch, together with the device pixel ratio. The detector multiplies
the two, caches the product, and hands it out until ``reset()`` is called.
A probe that is missing, raises, or reports a non-positive value never
surfaces as an error: the detector logs a warning and caches the fallback
resolution (96 dpi by default) instead.

Usage::

    detector = ResolutionDetector()          # probes a running Qt app
    detector.detect()                        # e.g. 192.0 on a 2x display
    detector.reset()                         # next detect() re-probes

    ResolutionDetector(probe=fixed_probe(300)).detect()   # 300.0
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass
from typing import Any, Callable, NamedTuple

from sizeconv.core.config import ConverterConfig, checked_config
from sizeconv.utils.constants import POINTS_PER_INCH, PRINT_DPI

logger = logging.getLogger(__name__)


class DetectionFailure(RuntimeError):
    """Raised by a probe that cannot measure the display."""


class ProbeReading(NamedTuple):
    """Raw probe measurement."""

    pixels_per_inch: float  # logical pixels spanning one physical inch
    device_pixel_ratio: float  # physical pixels per logical pixel


Probe = Callable[[], ProbeReading]


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of a single detection attempt."""

    resolution: float
    detected: bool  # False when the fallback was used
    reason: str = ""


def qt_probe() -> ProbeReading:
    """Measure the primary screen of the running PySide6 application.

    Raises:
        DetectionFailure: If PySide6 is not installed, no QGuiApplication
            exists, or no screen is attached.
    """
    try:
        from PySide6.QtGui import QGuiApplication
    except ImportError as e:
        raise DetectionFailure(f"PySide6 not available: {e}") from e

    if QGuiApplication.instance() is None:
        raise DetectionFailure("no QGuiApplication instance is running")
    screen = QGuiApplication.primaryScreen()
    if screen is None:
        raise DetectionFailure("no primary screen attached")
    return ProbeReading(screen.logicalDotsPerInch(), screen.devicePixelRatio())


def fixed_probe(resolution: float, device_pixel_ratio: float = 1.0) -> Probe:
    """Return a probe that always reports *resolution* pixels per inch."""

    def probe() -> ProbeReading:
        return ProbeReading(resolution, device_pixel_ratio)

    return probe


class ResolutionDetector:
    """Detects the display resolution once and caches it until reset.

    Args:
        probe: Zero-argument callable returning a ``ProbeReading``. Defaults
            to ``qt_probe``; pass ``None`` explicitly to always fall back.
        config: Source of the fallback resolution.

    Raises:
        ValidationError: If *config* has an unusable setting.
    """

    def __init__(self, probe: Probe | None = qt_probe, config: ConverterConfig | None = None):
        self.probe = probe
        self.config = checked_config(config)
        self._lock = threading.Lock()
        self._result: DetectionResult | None = None

    @property
    def is_cached(self) -> bool:
        return self._result is not None

    @property
    def last_result(self) -> DetectionResult | None:
        """Result of the detection currently cached, for diagnostics."""
        return self._result

    def detect(self) -> float:
        """Return the cached resolution, probing the display on first use."""
        with self._lock:
            if self._result is None:
                self._result = self._run_probe()
            return self._result.resolution

    def reset(self) -> None:
        """Drop the cached resolution so the next ``detect()`` re-probes."""
        with self._lock:
            self._result = None
        logger.debug("Resolution cache cleared")

    def info(self) -> dict[str, Any]:
        """Snapshot of the current resolution and the fixed print constants."""
        return {
            "current": self.detect(),
            "default_print": PRINT_DPI,
            "points_per_inch": POINTS_PER_INCH,
        }

    def _run_probe(self) -> DetectionResult:
        try:
            if self.probe is None:
                raise DetectionFailure("no probe configured")
            reading = self.probe()
            dpi = reading.pixels_per_inch * reading.device_pixel_ratio
            if not math.isfinite(dpi) or dpi <= 0:
                raise DetectionFailure(f"probe reported unusable resolution {dpi!r}")
        except Exception as e:  # any probe error downgrades to the fallback
            fallback = self.config.fallback_resolution
            logger.warning("Could not detect display resolution (%s), using %g dpi", e, fallback)
            return DetectionResult(resolution=fallback, detected=False, reason=str(e))

        logger.debug(
            "Detected %g dpi (%g px/in x %g)",
            dpi,
            reading.pixels_per_inch,
            reading.device_pixel_ratio,
        )
        return DetectionResult(resolution=float(dpi), detected=True)


# --- Process-wide default detector ---

default_detector = ResolutionDetector()


def detect_resolution() -> float:
    """Detect (or return the cached) resolution of the default detector."""
    return default_detector.detect()


def reset_resolution_cache() -> None:
    """Clear the default detector's cache."""
    default_detector.reset()


def resolution_info() -> dict[str, Any]:
    """Return ``info()`` of the default detector."""
    return default_detector.info()
