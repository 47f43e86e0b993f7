"""Tests for trace sampling."""

from __future__ import annotations

import math

import pytest

from epicycles.engine.complex_value import ComplexValue
from epicycles.engine.epicycle import EpicycleModel, InvalidPrecisionError
from epicycles.engine.config import EpicycleConfig
from epicycles.engine.trace import TraceTooLongError, sample_times, sample_trace, trace_point_count


@pytest.fixture
def model(circle_samples) -> EpicycleModel:
    return EpicycleModel.from_samples(circle_samples)


def test_point_count(model):
    trace = sample_trace(model, 8, step=0.5)
    # t = 0.0, 0.5, ..., 6.0 (< 2π)
    assert len(trace) == 13


def test_first_point_matches_coordinate(model):
    trace = sample_trace(model, 2, step=0.25)
    assert trace[0] == model.coordinate_for(0.0, 2)
    assert trace[4] == model.coordinate_for(1.0, 2)


def test_custom_range(model):
    trace = sample_trace(model, 1, start=1.0, stop=2.0, step=0.25)
    assert len(trace) == 4


def test_empty_range(model):
    assert sample_trace(model, 1, start=3.0, stop=3.0, step=0.1) == []


def test_non_positive_step(model):
    with pytest.raises(ValueError):
        sample_trace(model, 1, step=0.0)


def test_invalid_precision_raises_even_for_empty_range(model):
    with pytest.raises(InvalidPrecisionError):
        sample_trace(model, 9, start=1.0, stop=0.0, step=0.1)


def test_circle_trace_stays_on_circle(model):
    # Only X0 and X1 are non-zero: the trace is a circle of radius 8 about 8(1, 1)
    # (phase of X0 is π/4, X1 sits on the real axis).
    for point in sample_trace(model, 8, step=0.1):
        distance = math.hypot(point.x - 8.0, point.y - 8.0)
        assert distance == pytest.approx(8.0, abs=1e-9)


def test_sample_times_preserves_order():
    model = EpicycleModel(ComplexValue.from_pairs([(0.0, 0.0), (1.0, 0.0)]))
    points = sample_times(model, 1, [math.pi / 2, 0.0])
    assert points[0].y == pytest.approx(1.0)
    assert points[1].x == pytest.approx(1.0)


def test_sample_times_checks_precision_with_no_times(model):
    with pytest.raises(InvalidPrecisionError):
        sample_times(model, 9, [])


def test_sample_times_respects_limit(model):
    with pytest.raises(TraceTooLongError):
        sample_times(model, 1, [0.0, 0.1, 0.2], max_points=2)


class TestPointCount:
    def test_counts_points_below_stop(self):
        assert trace_point_count(0.0, 2 * math.pi, 0.5) == 13
        assert trace_point_count(1.0, 2.0, 0.25) == 4
        assert trace_point_count(0.0, 1.0, 0.5) == 2

    def test_empty_or_reversed_range(self):
        assert trace_point_count(3.0, 3.0, 0.1) == 0
        assert trace_point_count(2.0, 1.0, 0.1) == 0

    def test_non_finite_range(self):
        with pytest.raises(ValueError):
            trace_point_count(0.0, math.inf, 0.1)


class TestSweepLimit:
    def test_step_below_float_resolution_is_rejected(self, model):
        # 1.0 + 1e-17 == 1.0, so repeated addition would never reach stop.
        with pytest.raises(TraceTooLongError) as exc:
            sample_trace(model, 1, start=1.0, stop=2.0, step=1e-17)
        assert exc.value.limit == model.config.max_trace_points

    def test_explicit_limit(self, model):
        with pytest.raises(TraceTooLongError) as exc:
            sample_trace(model, 1, step=0.5, max_points=12)
        assert exc.value.points == 13
        assert "exceeds the limit of 12" in str(exc.value)
        assert len(sample_trace(model, 1, step=0.5, max_points=13)) == 13

    def test_limit_from_config(self, circle_samples):
        model = EpicycleModel.from_samples(circle_samples, EpicycleConfig(max_trace_points=5))
        with pytest.raises(TraceTooLongError):
            sample_trace(model, 1, step=0.5)

    def test_times_come_from_counter(self, model):
        step = 0.1
        trace = sample_trace(model, 2, step=step)
        assert trace[50] == model.coordinate_for(50 * step, 2)
