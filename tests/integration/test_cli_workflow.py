"""Integration tests for the sizeconv command-line interface."""

import pytest
from click.testing import CliRunner

from sizeconv import __version__
from sizeconv.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestConvertCommand:
    def test_mm_to_px(self, runner):
        result = runner.invoke(cli, ["convert", "25.4", "--from", "mm", "--to", "px", "--dpi", "96"])
        assert result.exit_code == 0, result.output
        assert "96" in result.output

    def test_several_values(self, runner):
        result = runner.invoke(
            cli, ["convert", "96", "48", "--from", "px", "--to", "pt", "--dpi", "96"]
        )
        assert result.exit_code == 0, result.output
        assert "72" in result.output
        assert "36" in result.output

    def test_inch_via_pint(self, runner):
        result = runner.invoke(
            cli, ["convert", "1", "--from", "inch", "--to", "px", "--dpi", "300", "--direct"]
        )
        assert result.exit_code == 0, result.output
        assert "300" in result.output

    def test_px_to_cm(self, runner):
        result = runner.invoke(cli, ["convert", "300", "--from", "px", "--to", "cm", "--dpi", "300"])
        assert result.exit_code == 0, result.output
        assert "2.54" in result.output

    def test_zero_resolution_fails(self, runner):
        result = runner.invoke(cli, ["convert", "10", "--from", "mm", "--to", "px", "--dpi", "0"])
        assert result.exit_code == 1
        assert "resolution" in result.output

    def test_nan_value_fails(self, runner):
        result = runner.invoke(cli, ["convert", "nan", "--from", "mm", "--to", "px", "--dpi", "96"])
        assert result.exit_code == 1
        assert "millimeter value" in result.output

    def test_non_length_unit_fails(self, runner):
        result = runner.invoke(cli, ["convert", "1", "--from", "kg", "--to", "px", "--dpi", "96"])
        assert result.exit_code == 1
        assert "not a length" in result.output

    @pytest.mark.parametrize("unit", ["furlongzz", "1/0", "mm)", "mm**"])
    def test_unknown_unit_fails(self, runner, unit):
        result = runner.invoke(cli, ["convert", "1", "--from", unit, "--to", "px", "--dpi", "96"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Unknown unit" in result.output

    def test_malformed_target_unit_fails(self, runner):
        result = runner.invoke(cli, ["convert", "96", "--from", "px", "--to", "mm)", "--dpi", "96"])
        assert result.exit_code == 1
        assert "Unknown unit" in result.output


class TestFontCommand:
    def test_twelve_points(self, runner):
        result = runner.invoke(cli, ["font", "12", "--screen-dpi", "96"])
        assert result.exit_code == 0, result.output
        assert "5.12" in result.output

    def test_batch(self, runner):
        result = runner.invoke(cli, ["font", "10", "12", "--screen-dpi", "96"])
        assert result.exit_code == 0, result.output
        assert "4.27" in result.output
        assert "5.12" in result.output

    def test_bad_print_dpi(self, runner):
        result = runner.invoke(cli, ["font", "12", "--print-dpi", "0", "--screen-dpi", "96"])
        assert result.exit_code == 1
        assert "print resolution" in result.output


class TestInfoCommand:
    def test_pinned_screen(self, runner):
        result = runner.invoke(cli, ["info", "--screen-dpi", "110"])
        assert result.exit_code == 0, result.output
        assert "110" in result.output
        assert "measured" in result.output
        assert "300" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
