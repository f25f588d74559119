"""
Palette Calculator Configuration
Manages environment variables and defaults for the palette services.
"""
import os
from typing import Tuple

from dotenv import load_dotenv

# Pick up PALETTE_* settings from a local .env before the class body reads them
load_dotenv()


class Config:
    """Configuration class for palette calculator services."""

    # Service identity
    SERVICE_NAME: str = os.environ.get("PALETTE_SERVICE_NAME", "palette-calculator")
    VERSION: str = os.environ.get("PALETTE_VERSION", "1.0.0")

    # Logging
    LOG_LEVEL: str = os.environ.get("PALETTE_LOG_LEVEL", "INFO")

    # HSL rounding precision (decimal places)
    HUE_DECIMALS: int = int(os.environ.get("PALETTE_HUE_DECIMALS", "0"))
    FRACTION_DECIMALS: int = int(os.environ.get("PALETTE_FRACTION_DECIMALS", "2"))

    # Image input limits. Only "file" URIs are readable; removing it restricts
    # inputs to raw bytes and plain paths.
    MAX_FILE_MB: int = int(os.environ.get("PALETTE_MAX_FILE_MB", "10"))
    ALLOWED_URI_SCHEMES: Tuple[str, ...] = tuple(
        s.strip() for s in os.environ.get("PALETTE_ALLOWED_URI_SCHEMES", "file").split(",") if s.strip()
    )

    @classmethod
    def validate_decimals(cls, places: int) -> bool:
        """Validate a rounding precision."""
        return 0 <= places <= 6

    @classmethod
    def max_file_bytes(cls) -> int:
        """Maximum accepted image size in bytes."""
        return cls.MAX_FILE_MB * 1024 * 1024


# Global config instance
config = Config()
