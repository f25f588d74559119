"""
Palette Calculator Dominant Color Sources
The single capability the palette pipeline consumes: turn an image
(raw bytes, a local path or a file:// URI) into one dominant RGB color.
"""
from pathlib import Path
from typing import Callable, Optional, Protocol, Sequence, Union
from urllib.parse import unquote, urlparse

from palette_calculator.config import config
from palette_calculator.schemas import Color, ColorInfo
from palette_calculator.utils.logging import get_logger

ImageInput = Union[bytes, str]
Analyzer = Callable[[bytes], Sequence[ColorInfo]]


class PaletteError(Exception):
    """Base class for dominant color lookup failures."""
    kind = "palette-error"


class InputUnavailableError(PaletteError):
    """The source image could not be opened or fetched."""
    kind = "input-unavailable"


class AnalysisFailedError(PaletteError):
    """Image analysis failed or returned no usable color data."""
    kind = "analysis-failed"


class DominantColorSource(Protocol):
    """Anything that can name the dominant color of an image."""

    def dominant_color(self, image: ImageInput) -> Color:
        ...


class StaticColorSource:
    """Source that always reports the same, already known color."""

    def __init__(self, color: Color):
        self.color = color

    def dominant_color(self, image: ImageInput) -> Color:
        return self.color


def select_dominant(candidates: Sequence[ColorInfo]) -> ColorInfo:
    """
    Pick the best candidate: highest score, then highest pixel fraction,
    then the first one reported.

    Raises:
        AnalysisFailedError: If there are no candidates
    """
    if not candidates:
        raise AnalysisFailedError("Image analysis returned no dominant colors")
    return max(candidates, key=lambda info: (info.score, info.pixel_fraction))


class AnalyzerColorSource:
    """
    Reads image bytes and hands them to an analyzer callable.

    The analyzer receives the raw bytes and returns candidate colors; it is
    where a remote image-analysis client or a local clustering routine plugs in.
    """

    def __init__(
        self,
        analyzer: Analyzer,
        max_bytes: Optional[int] = None,
        allowed_schemes: Optional[Sequence[str]] = None,
    ):
        self.analyzer = analyzer
        self.max_bytes = max_bytes if max_bytes is not None else config.max_file_bytes()
        self.allowed_schemes = tuple(allowed_schemes if allowed_schemes is not None else config.ALLOWED_URI_SCHEMES)
        self.logger = get_logger()

    def read_image(self, image: ImageInput) -> bytes:
        """
        Resolve the input to image bytes.

        Raises:
            InputUnavailableError: Missing/unreadable file, unsupported URI
                scheme, empty or oversized input
        """
        if isinstance(image, (bytes, bytearray)):
            data = bytes(image)
        else:
            data = self._read_file(image)

        if not data:
            raise InputUnavailableError("Image is empty")
        if len(data) > self.max_bytes:
            raise InputUnavailableError(
                f"Image too large: {len(data)} bytes (maximum {self.max_bytes})"
            )
        return data

    def _resolve_path(self, uri: str) -> str:
        parsed = urlparse(uri)
        # Single letters are Windows drive letters, not URI schemes
        if not parsed.scheme or len(parsed.scheme) == 1:
            return uri
        # Only file:// is readable here; allowed_schemes can narrow that, not widen it
        if parsed.scheme != "file":
            raise InputUnavailableError(f"Unsupported image URI scheme: {parsed.scheme}")
        if parsed.scheme not in self.allowed_schemes:
            raise InputUnavailableError(f"Image URI scheme not allowed: {parsed.scheme}")
        return unquote(parsed.path)

    def _read_file(self, uri: str) -> bytes:
        path = self._resolve_path(uri)
        try:
            return Path(path).read_bytes()
        except OSError as e:
            raise InputUnavailableError(f"Unable to open image {path}: {e}") from e

    def dominant_color(self, image: ImageInput) -> Color:
        """
        Name the dominant color of an image.

        Raises:
            InputUnavailableError: The image could not be read
            AnalysisFailedError: The analyzer failed or found no colors
        """
        data = self.read_image(image)

        try:
            candidates = list(self.analyzer(data))
        except Exception as e:
            raise AnalysisFailedError(f"Image analysis failed: {e}") from e

        best = select_dominant(candidates)
        self.logger.debug("Dominant color selected", extra={
            'hex': best.color.hex,
            'score': best.score,
            'candidates': len(candidates),
        })
        return best.color
