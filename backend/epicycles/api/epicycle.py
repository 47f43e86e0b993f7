"""POST /api/epicycle/* — coordinate queries and full traces."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from epicycles.api.transform import check_sample_count
from epicycles.config import Settings
from epicycles.dependencies import get_settings
from epicycles.engine.complex_value import ComplexValue
from epicycles.engine.config import EpicycleConfig
from epicycles.engine.epicycle import EpicycleModel, InvalidPrecisionError
from epicycles.engine.trace import TraceTooLongError, sample_times, sample_trace
from epicycles.models.requests import CoordinateRequest, EpicycleRequest, TraceRequest
from epicycles.models.responses import CoordinateResponse, TraceResponse
from epicycles.paths.loader import normalise
from epicycles.render.svg_trace import render_trace_svg

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/epicycle")


def _build_model(req: EpicycleRequest, settings: Settings) -> EpicycleModel:
    check_sample_count(len(req.samples), settings, power_of_two=True)
    samples = ComplexValue.from_pairs(req.samples)
    if req.normalise:
        samples = normalise(samples)
    config = EpicycleConfig(
        time_unit=req.time_unit,
        phase_mode=req.phase_mode,
        time_step=settings.default_time_step,
        max_trace_points=settings.max_trace_points,
    )
    return EpicycleModel.from_samples(samples, config)


def _precision_error(e: InvalidPrecisionError) -> HTTPException:
    logger.warning("Invalid precision: %s", e)
    return HTTPException(status_code=422, detail=str(e))


@router.post("/coordinate", response_model=CoordinateResponse)
def coordinate(
    req: CoordinateRequest,
    settings: Settings = Depends(get_settings),
) -> CoordinateResponse:
    model = _build_model(req, settings)
    try:
        point = model.coordinate_for(req.time, req.precision)
    except InvalidPrecisionError as e:
        raise _precision_error(e) from e
    return CoordinateResponse(x=point.x, y=point.y)


@router.post("/trace", response_model=TraceResponse)
def trace(
    req: TraceRequest,
    settings: Settings = Depends(get_settings),
) -> TraceResponse:
    start = time.perf_counter()
    model = _build_model(req, settings)
    precision = model.max_precision if req.precision is None else req.precision

    try:
        if req.times is not None:
            points = sample_times(model, precision, req.times)
        else:
            points = sample_trace(model, precision, step=req.step)
    except InvalidPrecisionError as e:
        raise _precision_error(e) from e
    except TraceTooLongError as e:
        logger.warning("Rejected trace: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    svg = None
    if req.render_svg:
        svg = render_trace_svg(
            points,
            centres=model.epicycle_centres(0.0, precision),
            radii=model.radii(precision),
        )

    elapsed = (time.perf_counter() - start) * 1000
    return TraceResponse(
        points=[(p.x, p.y) for p in points],
        precision=precision,
        svg=svg,
        processing_time_ms=round(elapsed, 1),
    )
