"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class TransformRequest(BaseModel):
    samples: list[tuple[float, float]] = Field(..., description="Path samples as (x, y) pairs")
    method: Literal["fft", "dft"] = Field(
        default="fft",
        description="fft needs a power-of-two length; dft accepts any length",
    )


class EpicycleRequest(BaseModel):
    samples: list[tuple[float, float]] = Field(..., description="Path samples as (x, y) pairs")
    normalise: bool = Field(default=True, description="Translate + scale into the unit frame first")
    time_unit: Literal["radians", "cycles"] = Field(default="radians")
    phase_mode: Literal["principal", "quadrant"] = Field(default="principal")


class CoordinateRequest(EpicycleRequest):
    time: float = Field(..., description="Time parameter (radians or cycles)")
    precision: int = Field(..., ge=0, description="Number of leading epicycles to sum")


class TraceRequest(EpicycleRequest):
    precision: int | None = Field(default=None, ge=0, description="Defaults to every term")
    step: float | None = Field(default=None, gt=0, description="Time step over 0..2π")
    times: list[float] | None = Field(
        default=None,
        description="Explicit time values; replaces the 0..2π sweep when given",
    )
    render_svg: bool = Field(default=True, description="Include a rendered SVG document")
