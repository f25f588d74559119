"""
Palette Calculator v1 API Routes
Conversion and harmony scheme endpoints.
"""
from fastapi import APIRouter, File, HTTPException, Query, Request, UploadFile
from starlette.concurrency import run_in_threadpool

from palette_calculator.schemas import AllSchemesResponse, Color, ErrorResponse, HSL, SchemeResponse
from palette_calculator.services.colors.conversion import hsl_to_rgb, rgb_to_hsl
from palette_calculator.services.colors.schemes import all_schemes, generate_scheme, resolve_scheme
from palette_calculator.services.orchestrator import PaletteOrchestrator

router = APIRouter(prefix="/v1", tags=["Palettes"])


def _scheme_or_404(name: str):
    try:
        return resolve_scheme(name)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/convert/rgb-to-hsl", response_model=HSL, summary="RGB to HSL")
def convert_rgb_to_hsl(color: Color) -> HSL:
    return rgb_to_hsl(color)


@router.post("/convert/hsl-to-rgb", response_model=Color, summary="HSL to RGB")
def convert_hsl_to_rgb(hsl: HSL) -> Color:
    return hsl_to_rgb(hsl)


@router.post("/schemes", response_model=AllSchemesResponse, summary="All harmony schemes")
def get_all_schemes(color: Color) -> AllSchemesResponse:
    """Every harmony palette for a dominant color."""
    return AllSchemesResponse(
        dominant=color,
        hsl=rgb_to_hsl(color),
        schemes={scheme.value: colors for scheme, colors in all_schemes(color).items()},
    )


@router.post("/schemes/{scheme}", response_model=SchemeResponse, summary="One harmony scheme")
def get_scheme(scheme: str, color: Color) -> SchemeResponse:
    """
    Harmony palette for a dominant color.

    The first color in the response is always the dominant color itself.
    """
    resolved = _scheme_or_404(scheme)
    return SchemeResponse(
        scheme=resolved.value,
        dominant=color,
        colors=generate_scheme(color, resolved),
    )


@router.post(
    "/palette/image",
    response_model=SchemeResponse,
    summary="Harmony scheme from an image",
    responses={422: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def palette_from_image(
    request: Request,
    file: UploadFile = File(..., description="Image to analyze"),
    scheme: str = Query("complementary", description="Scheme name"),
) -> SchemeResponse:
    """
    Resolve the image's dominant color through the configured source and
    derive a palette from it.
    """
    source = getattr(request.app.state, "palette_source", None)
    if source is None:
        raise HTTPException(status_code=503, detail="No dominant color source configured")

    resolved = _scheme_or_404(scheme)
    image_bytes = await file.read()

    # Sources may block on I/O or remote analysis; keep them off the event loop
    result = await run_in_threadpool(PaletteOrchestrator(source).palette, image_bytes, resolved)
    return SchemeResponse(scheme=result.scheme.value, dominant=result.dominant, colors=result.colors)
