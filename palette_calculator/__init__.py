"""
Palette Calculator

Color harmony palettes (complementary, split-complementary, triadic and
tetradic) derived from a single dominant RGB color.
"""

__version__ = "1.0.0"
