# src/feasibility/api/http.py
from __future__ import annotations

import json
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from feasibility.adapters.config import config
from feasibility.adapters.geocoding import make_geocoder
from feasibility.adapters.logging_utils import get_logger, log_context
from feasibility.domain.ports import Geocoder
from feasibility.services.estimator import evaluate_payload
from feasibility.services.validation import ValidationError

from .schemas import ErrorResponse, HealthResponse

VERSION = "1.0.0"

logger = get_logger(__name__)

app = FastAPI(
    title="Feasibility Estimator",
    description="Flip / ground-up / government feasibility estimates from static state cost tables (v1 heuristic).",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[config.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_geocoder() -> Geocoder:
    """Overridable in tests via app.dependency_overrides."""
    return make_geocoder()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.get("/api/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", version=VERSION)


@app.post(
    "/api/evaluate-property",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def evaluate_property_endpoint(
    request: Request,
    geocoder: Geocoder = Depends(get_geocoder),
) -> JSONResponse:
    """
    Auto-estimate a development's feasibility from an address.

    400 for caller mistakes (with the reason), 500 "Server error" for anything
    else, geocoding failures included. Details of a 500 stay in the logs.
    """
    try:
        payload: Any = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return _error(400, "Invalid JSON body")

    try:
        report = await run_in_threadpool(evaluate_payload, payload, geocoder)
    except ValidationError as e:
        logger.info("evaluation_rejected", extra=log_context(reason=str(e)))
        return _error(400, str(e))
    except Exception:
        logger.exception("Server error")
        return _error(500, "Server error")

    return JSONResponse(status_code=200, content=report.to_payload())
