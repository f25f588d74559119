"""
Palette Calculator Schemas
Pydantic models for colors, HSL values and API request/response validation.
"""
import re
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{6})$")


# ============================================================================
# COLOR VALUE TYPES
# ============================================================================

class Color(BaseModel):
    """An 8-bit RGB color. The hex rendering is always derived from the channels."""
    model_config = ConfigDict(frozen=True)

    red: int = Field(..., ge=0, le=255, description="Red channel (0-255)")
    green: int = Field(..., ge=0, le=255, description="Green channel (0-255)")
    blue: int = Field(..., ge=0, le=255, description="Blue channel (0-255)")

    @computed_field
    @property
    def hex(self) -> str:
        """Lowercase RRGGBB rendering without a leading '#'."""
        return f"{self.red:02x}{self.green:02x}{self.blue:02x}"

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        """
        Parse a hex color.

        Args:
            hex_color: Color in format RRGGBB or #RRGGBB (any case)

        Returns:
            Color with the parsed channels

        Raises:
            ValueError: If the string is not a 6-digit hex color
        """
        match = HEX_RE.match(hex_color.strip())
        if not match:
            raise ValueError(f"Invalid hex color format: {hex_color}")
        digits = match.group(1)
        return cls(
            red=int(digits[0:2], 16),
            green=int(digits[2:4], 16),
            blue=int(digits[4:6], 16),
        )

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue


class HSL(BaseModel):
    """Hue in degrees, saturation and luminosity as fractions."""
    model_config = ConfigDict(frozen=True)

    hue: float = Field(..., ge=0.0, lt=360.0, description="Hue in degrees [0, 360)")
    saturation: float = Field(..., ge=0.0, le=1.0, description="Saturation [0, 1]")
    luminosity: float = Field(..., ge=0.0, le=1.0, description="Luminosity [0, 1]")

    @model_validator(mode="before")
    @classmethod
    def _gray_has_no_hue(cls, data: Any) -> Any:
        # A gray has no hue; pin it to 0 so conversions stay idempotent.
        if isinstance(data, dict) and data.get("saturation") == 0:
            data = {**data, "hue": 0.0}
        return data

    @property
    def is_achromatic(self) -> bool:
        return self.saturation == 0


class ColorInfo(BaseModel):
    """A candidate dominant color reported by an image analyzer."""
    model_config = ConfigDict(frozen=True)

    color: Color
    score: float = Field(0.0, ge=0.0, le=1.0, description="Analyzer confidence for this color")
    pixel_fraction: float = Field(0.0, ge=0.0, le=1.0, description="Fraction of pixels close to this color")


# ============================================================================
# API SCHEMAS
# ============================================================================

class SchemeResponse(BaseModel):
    """A single harmony palette."""
    scheme: str = Field(..., description="Scheme name")
    dominant: Color = Field(..., description="The color the palette was derived from")
    colors: List[Color] = Field(..., description="Dominant color followed by the derived colors")


class AllSchemesResponse(BaseModel):
    """Every harmony palette for one dominant color."""
    dominant: Color
    hsl: HSL
    schemes: Dict[str, List[Color]]


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("palette-calculator", description="Service name")
    image_source: bool = Field(False, description="Whether a dominant color source is configured")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")
    kind: str = Field(..., description="Error kind: input-unavailable or analysis-failed")
