"""Complex value — the 2-component number every transform stage works on.

Equality is tolerance-based (1e-8 per component) so that floating-point
pipelines can be asserted against literal expectations. That makes it
non-transitive near the boundary and the type unhashable.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

# Absolute per-component tolerance used by __eq__.
_EQ_TOLERANCE = 1e-8


@dataclass(frozen=True, eq=False)
class ComplexValue:
    re: float
    im: float

    # ── Derived quantities ──

    @property
    def amplitude(self) -> float:
        return math.sqrt(self.re * self.re + self.im * self.im)

    @property
    def phase(self) -> float:
        """atan(im / re), single-argument form.

        Quadrant-unaware: off by π whenever re < 0. re == 0 yields ±π/2
        (or NaN for 0/0) instead of raising.
        """
        return math.atan(_ieee_divide(self.im, self.re))

    @property
    def argument(self) -> float:
        """Quadrant-aware angle, atan2(im, re)."""
        return math.atan2(self.im, self.re)

    # ── Arithmetic ──

    @staticmethod
    def add(first: ComplexValue, second: ComplexValue) -> ComplexValue:
        return ComplexValue(first.re + second.re, first.im + second.im)

    @staticmethod
    def minus(source: ComplexValue, other: ComplexValue) -> ComplexValue:
        return ComplexValue(source.re - other.re, source.im - other.im)

    subtract = minus

    @staticmethod
    def multiply(first: ComplexValue, second: ComplexValue) -> ComplexValue:
        re = first.re * second.re - first.im * second.im
        im = first.re * second.im + first.im * second.re
        return ComplexValue(re, im)

    def __add__(self, other: ComplexValue) -> ComplexValue:
        return ComplexValue.add(self, other)

    def __sub__(self, other: ComplexValue) -> ComplexValue:
        return ComplexValue.minus(self, other)

    def __mul__(self, other: ComplexValue) -> ComplexValue:
        return ComplexValue.multiply(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexValue):
            return NotImplemented
        return (
            abs(self.re - other.re) <= _EQ_TOLERANCE
            and abs(self.im - other.im) <= _EQ_TOLERANCE
        )

    __hash__ = None  # type: ignore[assignment]

    # ── Conversions ──

    @classmethod
    def from_complex(cls, z: complex) -> ComplexValue:
        return cls(float(z.real), float(z.imag))

    def to_complex(self) -> complex:
        return complex(self.re, self.im)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Iterable[float]]) -> list[ComplexValue]:
        """Build a list from (x, y) pairs — lists, tuples or Nx2 array rows."""
        out: list[ComplexValue] = []
        for pair in pairs:
            x, y = pair
            out.append(cls(float(x), float(y)))
        return out

    def to_pair(self) -> tuple[float, float]:
        return (self.re, self.im)


ZERO = ComplexValue(0.0, 0.0)
ONE = ComplexValue(1.0, 0.0)


def _ieee_divide(numerator: float, denominator: float) -> float:
    """numerator / denominator with IEEE 754 semantics for a zero denominator."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    # Sign of a signed zero comes from copysign.
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
