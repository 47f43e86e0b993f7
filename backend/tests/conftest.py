"""Shared test fixtures."""

from __future__ import annotations

import math
from pathlib import Path

import pytest

from epicycles.engine.complex_value import ComplexValue

SAMPLES_DIR = Path(__file__).resolve().parents[2] / "samples" / "paths"

# 8-point ramp along the diagonal and its forward transform (6 d.p.).
RAMP_8 = [(float(i), float(i)) for i in range(1, 9)]
RAMP_8_SPECTRUM = [
    (36.000000, 36.000000),
    (-13.656854, 5.656854),
    (-8.000000, 0.000000),
    (-5.656854, -2.343146),
    (-4.000000, -4.000000),
    (-2.343146, -5.656854),
    (0.000000, -8.000000),
    (5.656854, -13.656854),
]

# Unit circle about (1, 1), sampled at 8 evenly spaced angles.
_H = math.sqrt(2.0) / 2.0
CIRCLE_8 = [
    (2.0, 1.0),
    (1.0 + _H, 1.0 + _H),
    (1.0, 2.0),
    (1.0 - _H, 1.0 + _H),
    (0.0, 1.0),
    (1.0 - _H, 1.0 - _H),
    (1.0, 0.0),
    (1.0 + _H, 1.0 - _H),
]

CIRCLE_8_TEXT = "\n".join(f"{x}, {y}" for x, y in CIRCLE_8) + "\n"


def assert_complex_close(expected, actual: ComplexValue, tol: float = 1e-6) -> None:
    ex, ey = expected if isinstance(expected, tuple) else expected.to_pair()
    assert actual.re == pytest.approx(ex, abs=tol), f"re {actual.re} != {ex}"
    assert actual.im == pytest.approx(ey, abs=tol), f"im {actual.im} != {ey}"


@pytest.fixture
def ramp_samples() -> list[ComplexValue]:
    return ComplexValue.from_pairs(RAMP_8)


@pytest.fixture
def circle_samples() -> list[ComplexValue]:
    return ComplexValue.from_pairs(CIRCLE_8)


@pytest.fixture
def circle_path_file() -> Path:
    return SAMPLES_DIR / "circle8.txt"
