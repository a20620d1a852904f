from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.lines import router as lines_router
from src.adapters.api.controllers.places import router as places_router
from src.adapters.api.controllers.planner import router as planner_router
from src.adapters.api.controllers.stops import router as stops_router
from src.adapters.api.dependencies import build_transit_query_service
from src.adapters.settings import UpstreamRuntimeConfig
from src.domain.exceptions import (
    ClientInputError,
    MalformedUpstreamRecord,
    UpstreamError,
)

SERVER_VERSION = "1.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # One cache per application instance, owned here and shared by requests.
    config = UpstreamRuntimeConfig.from_env()
    app.state.transit_query_service = build_transit_query_service(config)
    logger.info(
        "upstream %s (cache %d entries, ttl %.0fs)",
        config.base_url,
        config.cache_max_entries,
        config.cache_ttl_s,
    )
    yield


app = FastAPI(title="reisgraph", lifespan=lifespan)
app.include_router(stops_router)
app.include_router(lines_router)
app.include_router(places_router)
app.include_router(planner_router)


@app.exception_handler(ClientInputError)
async def client_input_error_handler(
    request: Request, exc: ClientInputError
) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(UpstreamError)
@app.exception_handler(MalformedUpstreamRecord)
async def upstream_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.getLogger("uvicorn.error").warning(
        "Upstream failure: %s", exc, extra={"path": str(request.url.path)}
    )
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON so clients can display them."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    if UpstreamRuntimeConfig.from_env().reveal_errors or isinstance(
        exc, (RuntimeError, ValueError)
    ):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
def version() -> dict[str, str]:
    return {"serverVersion": SERVER_VERSION}


@app.get("/time")
def utc_time() -> dict[str, str]:
    return {"utcTime": datetime.now(timezone.utc).isoformat()}
