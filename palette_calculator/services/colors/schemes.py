"""
Palette Calculator - Color Harmony Schemes

Derives complementary, split-complementary, triadic and tetradic palettes
from one dominant color by rotating its HSL hue by fixed offsets.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from palette_calculator.schemas import Color, HSL
from palette_calculator.services.colors.conversion import ColorSpaceConverter, default_converter


class Scheme(str, Enum):
    """Named hue-offset patterns."""
    COMPLEMENTARY = "complementary"
    SPLIT_COMPLEMENTARY = "split_complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"


# Hue offsets in degrees, in output order
SCHEME_OFFSETS: Dict[Scheme, Tuple[float, ...]] = {
    Scheme.COMPLEMENTARY: (180.0,),
    Scheme.SPLIT_COMPLEMENTARY: (150.0, 210.0),
    Scheme.TRIADIC: (120.0, 240.0),
    Scheme.TETRADIC: (60.0, 180.0, 240.0),
}


def rotate_hue(hsl: HSL, degrees: float) -> HSL:
    """
    Rotate hue by specified degrees, keeping saturation and luminosity.

    Args:
        hsl: Original HSL value
        degrees: Rotation in degrees (can be negative)

    Returns:
        New HSL with hue in [0, 360)
    """
    hue = (hsl.hue + degrees) % 360
    # Float modulo of a tiny negative sum yields 360.0
    if hue >= 360:
        hue = 0.0
    return HSL(
        hue=hue,
        saturation=hsl.saturation,
        luminosity=hsl.luminosity,
    )


def resolve_scheme(scheme: Union[Scheme, str]) -> Scheme:
    """Accept a Scheme or its name ('split-complementary' is also understood)."""
    if isinstance(scheme, Scheme):
        return scheme
    try:
        return Scheme(scheme.strip().lower().replace("-", "_"))
    except ValueError:
        valid = ", ".join(s.value for s in Scheme)
        raise ValueError(f"Unknown color scheme: {scheme!r}. Expected one of: {valid}") from None


def generate_scheme(
    color: Color,
    scheme: Union[Scheme, str],
    converter: Optional[ColorSpaceConverter] = None,
) -> List[Color]:
    """
    Build a harmony palette for a dominant color.

    The dominant color always comes first, followed by one color per offset
    of the scheme, in offset order. Results are neither sorted nor
    deduplicated, so a gray input yields repeated grays.

    Args:
        color: Dominant color
        scheme: Scheme to apply
        converter: Converter to use (defaults to the configured one)

    Returns:
        List of colors starting with the dominant color
    """
    converter = converter or default_converter
    offsets = SCHEME_OFFSETS[resolve_scheme(scheme)]

    hsl = converter.rgb_to_hsl(color)
    derived = [converter.hsl_to_rgb(rotate_hue(hsl, offset)) for offset in offsets]

    return [color] + derived


def complementary_scheme(color: Color, converter: Optional[ColorSpaceConverter] = None) -> List[Color]:
    """Dominant color and its +180° complement."""
    return generate_scheme(color, Scheme.COMPLEMENTARY, converter)


def split_complementary_scheme(color: Color, converter: Optional[ColorSpaceConverter] = None) -> List[Color]:
    """Dominant color and the two colors flanking its complement (+150°, +210°)."""
    return generate_scheme(color, Scheme.SPLIT_COMPLEMENTARY, converter)


def triadic_scheme(color: Color, converter: Optional[ColorSpaceConverter] = None) -> List[Color]:
    """Dominant color plus +120° and +240°."""
    return generate_scheme(color, Scheme.TRIADIC, converter)


def tetradic_scheme(color: Color, converter: Optional[ColorSpaceConverter] = None) -> List[Color]:
    """Dominant color plus +60°, +180° and +240° (rectangle)."""
    return generate_scheme(color, Scheme.TETRADIC, converter)


def all_schemes(color: Color, converter: Optional[ColorSpaceConverter] = None) -> Dict[Scheme, List[Color]]:
    """Every scheme for one dominant color."""
    return {scheme: generate_scheme(color, scheme, converter) for scheme in Scheme}
