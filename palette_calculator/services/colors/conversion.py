"""
Palette Calculator - RGB <-> HSL Conversion

Converts between 8-bit RGB colors and HSL values (hue in degrees, saturation
and luminosity as fractions). Every rounding step rounds half away from zero
and is applied once per output field.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import NamedTuple, Optional

from palette_calculator.config import config
from palette_calculator.schemas import Color, HSL


class HslPrecision(NamedTuple):
    """Decimal places kept when rounding HSL fields."""
    hue_decimals: int = 0
    fraction_decimals: int = 2


# Precision under which rgb -> hsl -> rgb stays within one unit per channel
# and grays convert back exactly.
LOSSLESS_PRECISION = HslPrecision(hue_decimals=1, fraction_decimals=3)


def round_half_away(value: float, places: int = 0) -> float:
    """
    Round to a number of decimal places, ties away from zero.

    Args:
        value: Value to round
        places: Decimal places to keep

    Returns:
        Rounded value (2.5 -> 3.0, -2.5 -> -3.0, 0.125 -> 0.13 at 2 places)
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _to_channel(fraction: float) -> int:
    """Scale a [0, 1] fraction to an 8-bit channel."""
    return int(round_half_away(fraction * 255))


def _wrap_unit(fraction: float) -> float:
    """Bring a value within one period of [0, 1] back into it."""
    if fraction < 0:
        return fraction + 1
    if fraction > 1:
        return fraction - 1
    return fraction


def _hue_to_fraction(c: float, temp1: float, temp2: float) -> float:
    """Piecewise channel value for one wrapped hue fraction."""
    if c * 6 < 1:
        return temp2 + (temp1 - temp2) * 6 * c
    if c * 2 < 1:
        return temp1
    if c * 3 < 2:
        return temp2 + (temp1 - temp2) * (2 / 3 - c) * 6
    return temp2


class ColorSpaceConverter:
    """RGB <-> HSL converter with a fixed rounding precision."""

    def __init__(self, precision: Optional[HslPrecision] = None):
        if precision is None:
            precision = HslPrecision(config.HUE_DECIMALS, config.FRACTION_DECIMALS)
        for places in precision:
            if not config.validate_decimals(places):
                raise ValueError(f"Unsupported rounding precision: {places}")
        self.precision = precision

    def rgb_to_hsl(self, color: Color) -> HSL:
        """
        Convert an RGB color to HSL.

        Args:
            color: 8-bit RGB color

        Returns:
            HSL with hue rounded to whole degrees and saturation/luminosity
            to two decimals (under the default precision)
        """
        red = color.red / 255
        green = color.green / 255
        blue = color.blue / 255

        lo = min(red, green, blue)
        hi = max(red, green, blue)
        delta = hi - lo

        luminosity = round_half_away((hi + lo) / 2, self.precision.fraction_decimals)

        if delta == 0:
            return HSL(hue=0.0, saturation=0.0, luminosity=luminosity)

        if (hi + lo) / 2 < 0.5:
            saturation = delta / (hi + lo)
        else:
            saturation = delta / (2 - hi - lo)

        # First channel equal to max decides the sextant
        if red == hi:
            hue = (green - blue) / delta
        elif green == hi:
            hue = 2 + (blue - red) / delta
        else:
            hue = 4 + (red - green) / delta

        degrees = hue * 60
        if degrees < 0:
            degrees += 360

        return HSL(
            hue=round_half_away(degrees, self.precision.hue_decimals) % 360,
            saturation=round_half_away(saturation, self.precision.fraction_decimals),
            luminosity=luminosity,
        )

    def hsl_to_rgb(self, hsl: HSL) -> Color:
        """
        Convert an HSL value to an RGB color.

        Args:
            hsl: HSL value (hue in degrees)

        Returns:
            Color with channels rounded half away from zero
        """
        lum = hsl.luminosity
        sat = hsl.saturation

        if sat == 0:
            gray = _to_channel(lum)
            return Color(red=gray, green=gray, blue=gray)

        if lum < 0.5:
            temp1 = lum * (1 + sat)
        else:
            temp1 = lum + sat - lum * sat
        temp2 = 2 * lum - temp1

        hue = hsl.hue / 360
        fractions = (
            _wrap_unit(hue + 1 / 3),
            _wrap_unit(hue),
            _wrap_unit(hue - 1 / 3),
        )
        red, green, blue = (_to_channel(_hue_to_fraction(c, temp1, temp2)) for c in fractions)

        return Color(red=red, green=green, blue=blue)


default_converter = ColorSpaceConverter()


def rgb_to_hsl(color: Color) -> HSL:
    """Convert RGB to HSL with the configured precision."""
    return default_converter.rgb_to_hsl(color)


def hsl_to_rgb(hsl: HSL) -> Color:
    """Convert HSL to RGB."""
    return default_converter.hsl_to_rgb(hsl)
