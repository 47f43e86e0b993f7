"""Epicycle model — frequency terms sorted by amplitude, summed into (x, y).

Usage:
    model = EpicycleModel.from_samples(samples)
    point = model.coordinate_for(time=1.2, precision=16)

The model is built once (the sort happens at construction) and never
mutated, so concurrent readers need no locking.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple

from epicycles.engine.complex_value import ComplexValue
from epicycles.engine.config import EpicycleConfig
from epicycles.engine.fft import fft

logger = logging.getLogger(__name__)

_TWO_PI = 2.0 * math.pi


class InvalidPrecisionError(ValueError):
    """Requested more leading terms than the model holds."""

    def __init__(self, requested: int, maximum: int) -> None:
        self.requested = requested
        self.maximum = maximum
        super().__init__(
            f"{requested}th precision is not possible, "
            f"can only compute up to {maximum} epicycle precision"
        )


@dataclass(frozen=True)
class FrequencyTerm:
    coefficient: ComplexValue
    # Index in the forward-transform output — the harmonic number.
    frequency: int

    @property
    def radius(self) -> float:
        return self.coefficient.amplitude


class Coordinate(NamedTuple):
    x: float
    y: float

    def rounded(self) -> tuple[int, int]:
        """Nearest integers, halves away from zero (builtin round() goes to even)."""
        return (_round_half_away(self.x), _round_half_away(self.y))


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class EpicycleModel:
    """Sorted epicycle terms plus the reconstruction formula."""

    def __init__(
        self,
        coefficients: Iterable[ComplexValue],
        config: EpicycleConfig | None = None,
    ) -> None:
        self.config = config or EpicycleConfig()
        paired = [FrequencyTerm(c, i) for i, c in enumerate(coefficients)]
        # sorted() is stable: equal amplitudes stay in ascending frequency order.
        self._terms: tuple[FrequencyTerm, ...] = tuple(
            sorted(paired, key=lambda t: t.radius, reverse=True)
        )
        logger.debug(
            "EpicycleModel: %d terms, leading radius %.6g",
            len(self._terms),
            self._terms[0].radius if self._terms else 0.0,
        )

    # ── Construction helpers ──

    @classmethod
    def from_samples(
        cls,
        samples: Sequence[ComplexValue],
        config: EpicycleConfig | None = None,
    ) -> EpicycleModel:
        """Forward-transform a copy of ``samples`` and wrap the result.

        Length must be a power of two; validate before calling.
        """
        buffer = list(samples)
        fft(buffer)
        return cls(buffer, config)

    @classmethod
    def from_path_file(
        cls,
        path: str | Path,
        config: EpicycleConfig | None = None,
        normalise: bool = True,
    ) -> EpicycleModel:
        from epicycles.paths.loader import load_path_file

        return cls.from_samples(load_path_file(path, normalise=normalise), config)

    # ── Introspection ──

    @property
    def terms(self) -> tuple[FrequencyTerm, ...]:
        return self._terms

    @property
    def max_precision(self) -> int:
        return len(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def radii(self, precision: int) -> list[float]:
        self._check_precision(precision)
        return [t.radius for t in self._terms[:precision]]

    # ── Reconstruction ──

    def coordinate_for(self, time: float, precision: int) -> Coordinate:
        """Sum the first ``precision`` epicycles at ``time``."""
        centres = self._accumulate(time, precision)
        return centres[-1]

    get_coordinate_for = coordinate_for

    def epicycle_centres(self, time: float, precision: int) -> list[Coordinate]:
        """Running partial sums: origin, then the tip after each included term.

        Stops early together with coordinate_for, so the last entry always
        equals coordinate_for(time, precision).
        """
        return self._accumulate(time, precision)

    def _accumulate(self, time: float, precision: int) -> list[Coordinate]:
        self._check_precision(precision)
        t = time / _TWO_PI if self.config.time_unit == "cycles" else time
        quadrant = self.config.phase_mode == "quadrant"
        epsilon = self.config.radius_epsilon

        x = 0.0
        y = 0.0
        points = [Coordinate(x, y)]
        for i in range(precision):
            term = self._terms[i]
            radius = term.radius
            if radius < epsilon:
                logger.debug("Stopping at term %d: radius %.3g below epsilon", i, radius)
                break
            phase = term.coefficient.argument if quadrant else term.coefficient.phase
            angle = float(term.frequency) * t + phase
            x += radius * math.cos(angle)
            y += radius * math.sin(angle)
            points.append(Coordinate(x, y))
        return points

    def _check_precision(self, precision: int) -> None:
        if precision < 0 or precision > len(self._terms):
            raise InvalidPrecisionError(precision, len(self._terms))
