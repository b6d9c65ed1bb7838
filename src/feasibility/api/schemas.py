# src/feasibility/api/schemas.py
from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every 400 / 500 from /api/evaluate-property."""
    error: str


class HealthResponse(BaseModel):
    status: str
    version: str
