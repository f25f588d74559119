"""
Unit tests for RGB <-> HSL conversion.

Covers the rounding policy, hue branch selection, achromatic colors and the
round-trip bound.
"""

import itertools

import pytest
from pydantic import ValidationError

from palette_calculator.schemas import Color, HSL
from palette_calculator.services.colors.conversion import (
    ColorSpaceConverter, HslPrecision, LOSSLESS_PRECISION,
    hsl_to_rgb, rgb_to_hsl, round_half_away,
)


class TestRounding:
    """Test round-half-away-from-zero semantics."""

    def test_ties_round_away_from_zero(self):
        """Test that ties round away from zero."""
        assert round_half_away(2.5) == 3.0
        assert round_half_away(-2.5) == -3.0
        assert round_half_away(127.5) == 128.0

    def test_decimal_places(self):
        """Test rounding at a given number of decimal places."""
        # Builtin round() would give 0.12 here
        assert round_half_away(0.125, 2) == 0.13
        assert round_half_away(0.664336, 2) == 0.66
        assert round_half_away(193.263, 0) == 193.0
        assert round_half_away(193.263, 1) == 193.3


class TestColorModel:
    """Test the Color and HSL value types."""

    def test_hex_is_derived_from_channels(self, dominant):
        """Test hex rendering of channels."""
        assert dominant.hex == "186277"
        assert Color(red=0, green=0, blue=0).hex == "000000"
        assert Color(red=255, green=255, blue=255).hex == "ffffff"

    def test_from_hex(self):
        """Test parsing hex strings with and without '#'."""
        assert Color.from_hex("#186277").as_tuple() == (24, 98, 119)
        assert Color.from_hex("772D18").as_tuple() == (119, 45, 24)

    def test_invalid_hex_format(self):
        """Test that invalid hex formats raise ValueError."""
        with pytest.raises(ValueError):
            Color.from_hex("#18627")  # Too short

        with pytest.raises(ValueError):
            Color.from_hex("#GGGGGG")  # Invalid hex digits

    def test_channel_range_is_validated(self):
        """Test channel bounds."""
        with pytest.raises(ValidationError):
            Color(red=256, green=0, blue=0)

        with pytest.raises(ValidationError):
            Color(red=-1, green=0, blue=0)

    def test_colors_are_immutable(self, dominant):
        """Test that colors cannot be mutated."""
        with pytest.raises(ValidationError):
            dominant.red = 0

    def test_gray_hsl_has_zero_hue(self):
        """Test that a gray HSL drops its hue."""
        hsl = HSL(hue=120.0, saturation=0.0, luminosity=0.5)
        assert hsl.hue == 0.0
        assert hsl.is_achromatic

    def test_hue_range_is_validated(self):
        """Test HSL field bounds."""
        with pytest.raises(ValidationError):
            HSL(hue=360.0, saturation=0.5, luminosity=0.5)

        with pytest.raises(ValidationError):
            HSL(hue=10.0, saturation=1.5, luminosity=0.5)


class TestRgbToHsl:
    """Test RGB -> HSL conversion."""

    def test_reference_color(self, dominant):
        """Test conversion of the reference color 186277."""
        hsl = rgb_to_hsl(dominant)
        assert hsl == HSL(hue=193.0, saturation=0.66, luminosity=0.28)

    def test_primary_colors(self):
        """Test conversion of primary colors."""
        assert rgb_to_hsl(Color(red=255, green=0, blue=0)) == HSL(hue=0.0, saturation=1.0, luminosity=0.5)
        assert rgb_to_hsl(Color(red=0, green=255, blue=0)) == HSL(hue=120.0, saturation=1.0, luminosity=0.5)
        assert rgb_to_hsl(Color(red=0, green=0, blue=255)) == HSL(hue=240.0, saturation=1.0, luminosity=0.5)

    def test_tied_maximum_channels(self):
        """Test hue branch when two channels share the maximum."""
        # Yellow: red and green tie, red branch is taken
        assert rgb_to_hsl(Color(red=255, green=255, blue=0)).hue == 60.0
        # Cyan: green and blue tie, green branch is taken
        assert rgb_to_hsl(Color(red=0, green=255, blue=255)).hue == 180.0
        # Magenta: red branch yields a negative raw hue
        assert rgb_to_hsl(Color(red=255, green=0, blue=255)).hue == 300.0

    def test_negative_hue_folds_into_range(self):
        """Test that negative raw hues gain 360 instead of being reflected."""
        hsl = rgb_to_hsl(Color(red=255, green=0, blue=10))
        assert hsl.hue == 358.0

    def test_hue_rounding_up_to_360_wraps_to_zero(self):
        """Test that a hue rounding to 360 becomes 0."""
        # Raw hue is about 359.53 degrees
        hsl = rgb_to_hsl(Color(red=255, green=0, blue=2))
        assert hsl.hue == 0.0

    def test_light_colors_use_high_luminosity_saturation(self):
        """Test saturation formula for luminosity >= 0.5."""
        # l >= 0.5 branch: delta / (2 - max - min)
        hsl = rgb_to_hsl(Color(red=255, green=128, blue=128))
        assert hsl.luminosity == 0.75
        assert hsl.saturation == 1.0
        assert hsl.hue == 0.0

    @pytest.mark.parametrize("value", [0, 1, 64, 100, 128, 200, 255])
    def test_achromatic(self, value):
        """Test grays map to zero hue and saturation."""
        hsl = rgb_to_hsl(Color(red=value, green=value, blue=value))
        assert hsl.hue == 0.0
        assert hsl.saturation == 0.0
        assert hsl.luminosity == pytest.approx(value / 255, abs=0.005)


class TestHslToRgb:
    """Test HSL -> RGB conversion."""

    def test_reference_complement(self):
        """Test the reference complement converts to 772d18."""
        color = hsl_to_rgb(HSL(hue=13.0, saturation=0.66, luminosity=0.28))
        assert color.as_tuple() == (119, 45, 24)
        assert color.hex == "772d18"

    def test_primary_colors(self):
        """Test conversion of primary hues."""
        assert hsl_to_rgb(HSL(hue=0.0, saturation=1.0, luminosity=0.5)).as_tuple() == (255, 0, 0)
        assert hsl_to_rgb(HSL(hue=120.0, saturation=1.0, luminosity=0.5)).as_tuple() == (0, 255, 0)
        assert hsl_to_rgb(HSL(hue=240.0, saturation=1.0, luminosity=0.5)).as_tuple() == (0, 0, 255)

    def test_achromatic_rounds_half_away(self):
        """Test gray channels round half away from zero."""
        # 0.5 * 255 = 127.5
        assert hsl_to_rgb(HSL(hue=0.0, saturation=0.0, luminosity=0.5)).as_tuple() == (128, 128, 128)
        assert hsl_to_rgb(HSL(hue=0.0, saturation=0.0, luminosity=1.0)).hex == "ffffff"
        assert hsl_to_rgb(HSL(hue=0.0, saturation=0.0, luminosity=0.0)).hex == "000000"


class TestRoundTrip:
    """Test rgb -> hsl -> rgb stability."""

    def test_grays_within_one_unit_at_default_precision(self):
        """Test grays stay within one unit at the default precision."""
        for value in range(256):
            gray = Color(red=value, green=value, blue=value)
            back = hsl_to_rgb(rgb_to_hsl(gray))
            assert back.red == back.green == back.blue
            assert abs(back.red - value) <= 1

    def test_grays_exact_at_lossless_precision(self):
        """Test grays convert back exactly at lossless precision."""
        converter = ColorSpaceConverter(LOSSLESS_PRECISION)
        for value in range(256):
            gray = Color(red=value, green=value, blue=value)
            assert converter.hsl_to_rgb(converter.rgb_to_hsl(gray)) == gray

    def test_colors_within_one_unit_at_lossless_precision(self):
        """Test a color grid stays within one unit at lossless precision."""
        converter = ColorSpaceConverter(LOSSLESS_PRECISION)
        levels = range(0, 256, 17)
        for red, green, blue in itertools.product(levels, repeat=3):
            color = Color(red=red, green=green, blue=blue)
            back = converter.hsl_to_rgb(converter.rgb_to_hsl(color))
            assert abs(back.red - red) <= 1
            assert abs(back.green - green) <= 1
            assert abs(back.blue - blue) <= 1

    def test_reference_color_round_trips(self, dominant):
        """Test the reference color survives a round trip."""
        back = hsl_to_rgb(rgb_to_hsl(dominant))
        assert abs(back.red - 24) <= 1
        assert abs(back.green - 98) <= 1
        assert abs(back.blue - 119) <= 1


class TestConverterPrecision:
    """Test precision configuration."""

    def test_finer_precision_keeps_more_digits(self, dominant):
        """Test a finer precision keeps extra digits."""
        hsl = ColorSpaceConverter(HslPrecision(1, 3)).rgb_to_hsl(dominant)
        assert hsl.hue == 193.3
        assert hsl.saturation == 0.664
        assert hsl.luminosity == 0.28

    def test_unsupported_precision(self):
        """Test that unsupported precisions are rejected."""
        with pytest.raises(ValueError):
            ColorSpaceConverter(HslPrecision(0, 9))
