"""POST /api/transform — forward Fourier transform of a sample list."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from epicycles.config import Settings
from epicycles.dependencies import get_settings
from epicycles.engine.complex_value import ComplexValue
from epicycles.engine.fft import dft, fft
from epicycles.models.requests import TransformRequest
from epicycles.models.responses import TransformResponse
from epicycles.paths.loader import is_power_of_two

logger = logging.getLogger(__name__)

router = APIRouter()


def check_sample_count(count: int, settings: Settings, *, power_of_two: bool) -> None:
    """Reject empty, oversized or (for the fft path) non-power-of-two inputs."""
    if count == 0:
        raise HTTPException(status_code=422, detail="At least one sample is required")
    if count > settings.max_samples:
        logger.warning("Rejected %d samples (max %d)", count, settings.max_samples)
        raise HTTPException(
            status_code=422,
            detail=f"{count} samples exceeds the limit of {settings.max_samples}",
        )
    if power_of_two and not is_power_of_two(count):
        logger.warning("Rejected non-power-of-two length %d", count)
        raise HTTPException(
            status_code=422,
            detail=f"Path length of {count} is not a power of 2, add more data to input",
        )


@router.post("/transform", response_model=TransformResponse)
def transform(
    req: TransformRequest,
    settings: Settings = Depends(get_settings),
) -> TransformResponse:
    check_sample_count(len(req.samples), settings, power_of_two=req.method == "fft")
    samples = ComplexValue.from_pairs(req.samples)

    coefficients = fft(samples) if req.method == "fft" else dft(samples)

    return TransformResponse(
        coefficients=[c.to_pair() for c in coefficients],
        method=req.method,
    )
