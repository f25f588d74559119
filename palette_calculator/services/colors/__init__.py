"""
Palette Calculator Colors Module

Provides RGB <-> HSL conversion and hue-rotation harmony schemes built on it.
"""

from .conversion import (
    ColorSpaceConverter, HslPrecision, LOSSLESS_PRECISION,
    hsl_to_rgb, rgb_to_hsl, round_half_away,
)
from .schemes import (
    SCHEME_OFFSETS, Scheme, all_schemes, complementary_scheme, generate_scheme,
    rotate_hue, split_complementary_scheme, tetradic_scheme, triadic_scheme,
)
