"""Tests for print font size to screen pixel conversion."""

import math

import pytest

from sizeconv.core.config import ConverterConfig
from sizeconv.core.print_size import (
    PrintSizeConverter,
    print_points_to_screen_pixels,
    print_points_to_screen_pixels_batch,
    round_half_up,
)
from sizeconv.core.resolution import ResolutionDetector, fixed_probe
from sizeconv.utils.validation import ValidationError


@pytest.fixture
def screen96():
    return ResolutionDetector(probe=fixed_probe(96))


class TestRoundHalfUp:
    def test_two_decimals(self):
        assert round_half_up(5.12345) == 5.12

    def test_half_goes_up(self):
        # Python's round() would give 0.12 (banker's rounding on 12.5)
        assert round_half_up(0.125) == 0.13

    def test_zero_decimals(self):
        assert round_half_up(2.5, 0) == 3


class TestPrintToScreen:
    def test_twelve_points_at_300(self, screen96):
        assert print_points_to_screen_pixels(12, 300, detector=screen96) == 5.12

    def test_default_print_resolution(self, screen96):
        assert print_points_to_screen_pixels(12, detector=screen96) == 5.12

    def test_quadratic_in_screen_resolution(self):
        doubled = ResolutionDetector(probe=fixed_probe(192))
        # (12 / 72) * 192 * (192 / 300) = 20.48, four times the 96 dpi value
        assert print_points_to_screen_pixels(12, 300, detector=doubled) == 20.48

    def test_equal_resolutions(self):
        detector = ResolutionDetector(probe=fixed_probe(300))
        assert print_points_to_screen_pixels(72, 300, detector=detector) == 300

    def test_rounded_to_two_decimals(self, screen96):
        # (10 / 72) * 96 * 0.32 = 4.2666...
        assert print_points_to_screen_pixels(10, detector=screen96) == 4.27

    def test_uses_fallback_when_detection_fails(self):
        detector = ResolutionDetector(probe=None)
        assert print_points_to_screen_pixels(12, 300, detector=detector) == 5.12

    @pytest.mark.parametrize("points", [0, -12, "12", math.nan, None])
    def test_invalid_points(self, screen96, points):
        with pytest.raises(ValidationError, match="print font size"):
            print_points_to_screen_pixels(points, 300, detector=screen96)

    @pytest.mark.parametrize("dpi", [0, -300, "300"])
    def test_invalid_print_resolution(self, screen96, dpi):
        with pytest.raises(ValidationError, match="print resolution"):
            print_points_to_screen_pixels(12, dpi, detector=screen96)

    def test_configured_print_resolution(self, screen96):
        converter = PrintSizeConverter(screen96, ConverterConfig(print_resolution=96))
        # (12 / 72) * 96 * 1 = 16
        assert converter.to_screen_pixels(12) == 16


class TestBatch:
    def test_matches_single(self, screen96):
        sizes = [8, 10, 12, 24]
        expected = [print_points_to_screen_pixels(s, 300, detector=screen96) for s in sizes]
        assert print_points_to_screen_pixels_batch(sizes, 300, detector=screen96) == expected

    def test_invalid_element_aborts(self, screen96):
        with pytest.raises(ValidationError):
            print_points_to_screen_pixels_batch([12, 0, 14], detector=screen96)

    def test_detects_once(self):
        calls = []

        def probe():
            calls.append(1)
            return fixed_probe(96)()

        detector = ResolutionDetector(probe=probe)
        print_points_to_screen_pixels_batch([8, 9, 10], detector=detector)
        assert len(calls) == 1
