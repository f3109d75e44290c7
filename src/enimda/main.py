"""
ENIMDA Service
==============

FastAPI entry point exposing border detection over HTTP.

Endpoints:
    GET  /          - Service information
    GET  /health    - Liveness probe (is process alive?)
    POST /borders   - Detect borders of the image sent as the request body

Query parameters of POST /borders override the configured detection
defaults: frames, size, columns, depth, threshold, deep.

Error Mapping:
    - Empty body or undecodable image -> 400
    - Body larger than server.max_upload_bytes -> 413
    - Out-of-range parameter -> 422
"""

import asyncio
import logging
import os
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from enimda import __version__
from enimda.config import settings
from enimda.detector import detect_borders
from enimda.errors import DecodeError, InvalidParameterError


logger = logging.getLogger(__name__)


# =============================================================================
# Global State
# =============================================================================

_startup_time: float = time.time()
_request_count: int = 0
_error_count: int = 0


# =============================================================================
# Lifespan Management
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    global _startup_time
    
    _startup_time = time.time()
    logger.info(
        f"ENIMDA service v{__version__} starting: "
        f"defaults={settings.detection.model_dump()}"
    )
    
    yield
    
    logger.info(
        f"ENIMDA service stopped: requests={_request_count}, errors={_error_count}"
    )


app = FastAPI(
    title="ENIMDA",
    description="Entropy-based image border detection",
    version=__version__,
    lifespan=lifespan,
)


# =============================================================================
# HTTP Endpoints
# =============================================================================

@app.get("/")
async def root() -> JSONResponse:
    """Service information endpoint."""
    return JSONResponse({
        "service": "enimda",
        "version": __version__,
        "status": "running",
        "detection": settings.detection.model_dump(),
    })


@app.get("/health")
async def health() -> JSONResponse:
    """
    Liveness probe - is the process alive?
    
    Always returns 200 if the service is running.
    """
    return JSONResponse({
        "status": "healthy",
        "uptime_seconds": round(time.time() - _startup_time, 1),
        "requests": _request_count,
        "errors": _error_count,
    })


@app.post("/borders")
async def borders(
    request: Request,
    frames: Optional[int] = None,
    size: Optional[int] = None,
    columns: Optional[int] = None,
    depth: Optional[float] = None,
    threshold: Optional[float] = None,
    deep: Optional[bool] = None,
) -> JSONResponse:
    """
    Detect borders of the image in the request body.
    
    The body is the raw encoded image (PNG, JPEG, GIF, ...).
    """
    global _request_count, _error_count
    _request_count += 1
    
    body = await request.body()
    if not body:
        _error_count += 1
        return JSONResponse({"error": "Empty request body"}, status_code=400)
    
    if len(body) > settings.server.max_upload_bytes:
        _error_count += 1
        return JSONResponse(
            {"error": f"Image exceeds {settings.server.max_upload_bytes} bytes"},
            status_code=413,
        )
    
    defaults = settings.detection
    
    try:
        result = await asyncio.to_thread(
            detect_borders,
            body,
            frames=frames if frames is not None else defaults.frames,
            size=size if size is not None else defaults.size,
            columns=columns if columns is not None else defaults.columns,
            depth=depth if depth is not None else defaults.depth,
            threshold=threshold if threshold is not None else defaults.threshold,
            deep=deep if deep is not None else defaults.deep,
            frame_density=defaults.frame_density,
            column_density=defaults.column_density,
        )
    except InvalidParameterError as e:
        _error_count += 1
        logger.warning(f"Invalid detection parameter: {e}")
        return JSONResponse({"error": str(e)}, status_code=422)
    except DecodeError as e:
        _error_count += 1
        logger.error(f"Decode error: {e}")
        return JSONResponse({"error": str(e)}, status_code=400)
    
    return JSONResponse(result.model_dump())


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    
    # Cloud Run uses PORT env var
    port = int(os.environ.get("PORT", settings.server.port))
    
    uvicorn.run(
        "enimda.main:app",
        host=settings.server.host,
        port=port,
        reload=False,
    )
