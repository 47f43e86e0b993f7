"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from epicycles import __version__
from epicycles.config import Settings
from epicycles.dependencies import get_settings
from epicycles.main import app
from tests.conftest import CIRCLE_8, RAMP_8, RAMP_8_SPECTRUM


client = TestClient(app)


@pytest.fixture
def small_limit():
    app.dependency_overrides[get_settings] = lambda: Settings(max_samples=4)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def short_traces():
    app.dependency_overrides[get_settings] = lambda: Settings(max_trace_points=10)
    yield
    app.dependency_overrides.clear()


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__


class TestTransform:
    def test_fft_ramp(self):
        response = client.post("/api/transform", json={"samples": RAMP_8})
        assert response.status_code == 200
        data = response.json()
        assert data["method"] == "fft"
        for expected, actual in zip(RAMP_8_SPECTRUM, data["coefficients"]):
            assert actual == pytest.approx(list(expected), abs=1e-6)

    def test_dft_any_length(self):
        samples = [[1, 0], [0, 1], [-1, 0]]
        response = client.post("/api/transform", json={"samples": samples, "method": "dft"})
        assert response.status_code == 200
        assert len(response.json()["coefficients"]) == 3

    def test_fft_rejects_non_power_of_two(self):
        samples = [[1, 0], [0, 1], [-1, 0]]
        response = client.post("/api/transform", json={"samples": samples})
        assert response.status_code == 422
        assert "not a power of 2" in response.json()["detail"]

    def test_rejects_empty(self):
        response = client.post("/api/transform", json={"samples": []})
        assert response.status_code == 422

    def test_rejects_over_limit(self, small_limit):
        response = client.post("/api/transform", json={"samples": RAMP_8})
        assert response.status_code == 422
        assert "exceeds the limit of 4" in response.json()["detail"]


class TestCoordinate:
    def test_raw_circle(self):
        response = client.post("/api/epicycle/coordinate", json={
            "samples": CIRCLE_8,
            "normalise": False,
            "time": 0.0,
            "precision": 2,
        })
        assert response.status_code == 200
        data = response.json()
        # 8(1 + i) + 8 at t = 0
        assert data["x"] == pytest.approx(16.0)
        assert data["y"] == pytest.approx(8.0)

    def test_invalid_precision(self):
        response = client.post("/api/epicycle/coordinate", json={
            "samples": CIRCLE_8,
            "time": 0.0,
            "precision": 9,
        })
        assert response.status_code == 422
        detail = response.json()["detail"]
        assert "9th precision" in detail
        assert "up to 8" in detail

    def test_negative_precision_rejected_by_validation(self):
        response = client.post("/api/epicycle/coordinate", json={
            "samples": CIRCLE_8,
            "time": 0.0,
            "precision": -1,
        })
        assert response.status_code == 422


class TestTrace:
    def test_trace_with_svg(self):
        response = client.post("/api/epicycle/trace", json={
            "samples": CIRCLE_8,
            "step": 0.5,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["precision"] == 8
        assert len(data["points"]) == 13
        assert data["svg"].startswith("<svg")

    def test_trace_without_svg(self):
        response = client.post("/api/epicycle/trace", json={
            "samples": CIRCLE_8,
            "step": 1.0,
            "precision": 2,
            "render_svg": False,
        })
        assert response.status_code == 200
        data = response.json()
        assert data["svg"] is None
        assert len(data["points"]) == 7

    def test_trace_invalid_precision(self):
        response = client.post("/api/epicycle/trace", json={
            "samples": CIRCLE_8,
            "step": 1.0,
            "precision": 16,
        })
        assert response.status_code == 422

    def test_explicit_times(self):
        response = client.post("/api/epicycle/trace", json={
            "samples": CIRCLE_8,
            "normalise": False,
            "precision": 2,
            "times": [0.0, 3.141592653589793],
            "render_svg": False,
        })
        assert response.status_code == 200
        points = response.json()["points"]
        assert len(points) == 2
        # 8(1 + i) + 8·e^{it}
        assert points[0] == pytest.approx([16.0, 8.0])
        assert points[1] == pytest.approx([0.0, 8.0])

    def test_step_below_float_resolution_is_rejected(self):
        response = client.post("/api/epicycle/trace", json={
            "samples": CIRCLE_8,
            "step": 1e-17,
            "render_svg": False,
        })
        assert response.status_code == 422
        assert "exceeds the limit" in response.json()["detail"]

    def test_trace_point_limit_from_settings(self, short_traces):
        response = client.post("/api/epicycle/trace", json={
            "samples": CIRCLE_8,
            "step": 0.5,
        })
        assert response.status_code == 422
        assert "exceeds the limit of 10" in response.json()["detail"]

    def test_times_point_limit_from_settings(self, short_traces):
        response = client.post("/api/epicycle/trace", json={
            "samples": CIRCLE_8,
            "times": [0.1 * i for i in range(11)],
        })
        assert response.status_code == 422


@pytest.mark.parametrize("env, debug", [("development", True), ("production", False)])
def test_debug_follows_environment(monkeypatch, env, debug):
    import epicycles.main

    monkeypatch.setattr(epicycles.main, "settings", Settings(epicycles_env=env))
    assert epicycles.main.create_app().debug is debug
