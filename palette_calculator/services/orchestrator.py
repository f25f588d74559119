"""
Palette Calculator Orchestrator
Chains dominant color lookup and harmony scheme generation.
"""
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from palette_calculator.schemas import Color
from palette_calculator.services.colors.conversion import ColorSpaceConverter, default_converter
from palette_calculator.services.colors.schemes import Scheme, generate_scheme, resolve_scheme
from palette_calculator.services.sources import DominantColorSource, ImageInput, PaletteError
from palette_calculator.utils.ids import generate_request_id
from palette_calculator.utils.logging import get_logger


@dataclass
class PaletteResult:
    """Result container for one palette request."""
    request_id: str
    dominant: Color
    scheme: Scheme
    colors: List[Color]
    timings: Dict[str, float] = field(default_factory=dict)


class PaletteOrchestrator:
    """Looks up an image's dominant color and derives palettes from it."""

    def __init__(self, source: DominantColorSource, converter: Optional[ColorSpaceConverter] = None):
        self.source = source
        self.converter = converter or default_converter
        self.logger = get_logger()

    def dominant_color(self, image: ImageInput, request_id: Optional[str] = None) -> Color:
        """
        Ask the source for the dominant color.

        Failures are logged with their kind and re-raised untouched; no
        palette is produced without a color.
        """
        log = self.logger.bind(request_id=request_id or generate_request_id())
        try:
            color = self.source.dominant_color(image)
        except PaletteError as e:
            log.error("Dominant color lookup failed", extra={
                'kind': e.kind,
                'error': str(e),
            })
            raise

        log.info("Dominant color resolved", extra={'hex': color.hex})
        return color

    def palette(self, image: ImageInput, scheme: Union[Scheme, str]) -> PaletteResult:
        """
        Produce one harmony palette for an image.

        Args:
            image: Image bytes, local path or file:// URI
            scheme: Scheme name or Scheme

        Returns:
            PaletteResult with the dominant color first in ``colors``
        """
        scheme = resolve_scheme(scheme)
        request_id = generate_request_id()
        timings = {}

        start = time.time()
        dominant = self.dominant_color(image, request_id)
        timings['source_ms'] = (time.time() - start) * 1000

        start = time.time()
        colors = generate_scheme(dominant, scheme, self.converter)
        timings['scheme_ms'] = (time.time() - start) * 1000

        self.logger.bind(request_id=request_id).info("Palette generated", extra={
            'scheme': scheme.value,
            'colors': [c.hex for c in colors],
        })
        return PaletteResult(
            request_id=request_id,
            dominant=dominant,
            scheme=scheme,
            colors=colors,
            timings=timings,
        )

    def all_palettes(self, image: ImageInput) -> Dict[Scheme, List[Color]]:
        """Every scheme from a single dominant color lookup."""
        dominant = self.dominant_color(image)
        return {scheme: generate_scheme(dominant, scheme, self.converter) for scheme in Scheme}
