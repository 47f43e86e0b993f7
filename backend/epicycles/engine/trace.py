"""Trace sampling — sweep an EpicycleModel over a time range."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from epicycles.engine.epicycle import Coordinate, EpicycleModel, InvalidPrecisionError

logger = logging.getLogger(__name__)


class TraceTooLongError(ValueError):
    """A sweep would produce more points than the configured limit."""

    def __init__(self, points: int, limit: int) -> None:
        self.points = points
        self.limit = limit
        super().__init__(f"Trace of {points} points exceeds the limit of {limit}")


def trace_point_count(start: float, stop: float, step: float) -> int:
    """Number of t = start + i·step with t < stop."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if not (math.isfinite(start) and math.isfinite(stop)):
        raise ValueError(f"time range must be finite, got [{start}, {stop})")
    if stop <= start:
        return 0
    count = math.ceil((stop - start) / step)
    # ceil can land one past stop when the quotient rounds up.
    if count > 0 and start + (count - 1) * step >= stop:
        count -= 1
    return count


def check_trace_length(points: int, limit: int) -> None:
    if points > limit:
        raise TraceTooLongError(points, limit)


def sample_trace(
    model: EpicycleModel,
    precision: int,
    *,
    start: float = 0.0,
    stop: float = 2.0 * math.pi,
    step: float | None = None,
    max_points: int | None = None,
) -> list[Coordinate]:
    """Coordinates at t = start + i·step for every t < stop.

    ``step`` and ``max_points`` default to the model's config. Time comes
    from an integer counter, so a step below float resolution cannot stall.
    """
    step = model.config.time_step if step is None else step
    limit = model.config.max_trace_points if max_points is None else max_points
    count = trace_point_count(start, stop, step)
    check_trace_length(count, limit)
    if not 0 <= precision <= model.max_precision:
        raise InvalidPrecisionError(precision, model.max_precision)

    trace = [model.coordinate_for(start + i * step, precision) for i in range(count)]

    logger.debug("Sampled %d points at precision %d", len(trace), precision)
    return trace


def sample_times(
    model: EpicycleModel,
    precision: int,
    times: Sequence[float],
    max_points: int | None = None,
) -> list[Coordinate]:
    """Coordinates at explicit time values, in the given order."""
    limit = model.config.max_trace_points if max_points is None else max_points
    check_trace_length(len(times), limit)
    if not 0 <= precision <= model.max_precision:
        raise InvalidPrecisionError(precision, model.max_precision)
    return [model.coordinate_for(t, precision) for t in times]
