from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from palette_calculator.api.v1 import router as v1_router
from palette_calculator.config import config
from palette_calculator.schemas import HealthResponse
from palette_calculator.services.sources import (
    AnalysisFailedError, DominantColorSource, InputUnavailableError, PaletteError,
)
from palette_calculator.utils.logging import get_logger

ERROR_STATUS = {
    InputUnavailableError: 422,
    AnalysisFailedError: 502,
}


def create_app(source: Optional[DominantColorSource] = None) -> FastAPI:
    """
    Build the palette API.

    Args:
        source: Dominant color source used by the image endpoint; without
            one only the color-based endpoints are usable
    """
    app = FastAPI(
        title="Palette Calculator",
        description="Color harmony palettes derived from a dominant color",
        version=config.VERSION,
    )
    app.state.palette_source = source
    logger = get_logger()

    @app.exception_handler(PaletteError)
    async def palette_error_handler(request: Request, exc: PaletteError):
        status_code = ERROR_STATUS.get(type(exc), 500)
        logger.warning("Palette request failed", extra={
            'path': request.url.path,
            'kind': exc.kind,
            'status_code': status_code,
        })
        return JSONResponse(status_code=status_code, content={"detail": str(exc), "kind": exc.kind})

    @app.get("/healthz", response_model=HealthResponse)
    def health_check() -> HealthResponse:
        return HealthResponse(
            ok=True,
            version=config.VERSION,
            service=config.SERVICE_NAME,
            image_source=app.state.palette_source is not None,
        )

    app.include_router(v1_router)
    return app


app = create_app()
