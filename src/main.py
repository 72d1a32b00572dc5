from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.network import router as network_router
from src.domain.exceptions import NetworkConsistencyError

app = FastAPI(title="Transit Network")
app.include_router(network_router)

logger = logging.getLogger("uvicorn.error")


def _reveal_errors() -> bool:
    raw = (os.getenv("NETWORK_REVEAL_ERRORS") or "").strip().lower()
    return raw in {"1", "true", "yes", "on"}


@app.exception_handler(FileNotFoundError)
async def missing_snapshot_handler(
    request: Request, exc: FileNotFoundError
) -> JSONResponse:
    logger.warning("No network snapshot for %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=503, content={"detail": "No network snapshot available"}
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON, including snapshots that fail to load."""

    logger.exception("Unhandled exception", extra={"path": str(request.url.path)})

    if _reveal_errors() or isinstance(exc, (NetworkConsistencyError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
