"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from epicycles import __version__


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__


class TransformResponse(BaseModel):
    coefficients: list[tuple[float, float]] = Field(default_factory=list)
    method: str = "fft"


class CoordinateResponse(BaseModel):
    x: float
    y: float


class TraceResponse(BaseModel):
    points: list[tuple[float, float]] = Field(default_factory=list)
    precision: int = 0
    svg: str | None = None
    processing_time_ms: float = 0.0
