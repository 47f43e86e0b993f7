"""Epicycle engine configuration — reconstruction tunables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

TimeUnit = Literal["radians", "cycles"]
PhaseMode = Literal["principal", "quadrant"]


@dataclass(frozen=True)
class EpicycleConfig:
    """Controls how an EpicycleModel turns (time, precision) into a coordinate."""

    # Terms below this radius end the summation (sorted descending, so the
    # rest are no larger).
    radius_epsilon: float = 1e-9

    # "radians": frequency × time. "cycles": time is divided by 2π first.
    time_unit: TimeUnit = "radians"

    # "principal": atan(im/re), quadrant-unaware. "quadrant": atan2(im, re).
    phase_mode: PhaseMode = "principal"

    # Sweep step for trace sampling over one revolution.
    time_step: float = 0.001

    # Upper bound on points produced by one sweep.
    max_trace_points: int = 1_000_000

    def __post_init__(self) -> None:
        if self.time_unit not in ("radians", "cycles"):
            raise ValueError(f"Unknown time unit: {self.time_unit!r}")
        if self.phase_mode not in ("principal", "quadrant"):
            raise ValueError(f"Unknown phase mode: {self.phase_mode!r}")
        if self.time_step <= 0:
            raise ValueError(f"time_step must be positive, got {self.time_step}")
        if self.max_trace_points < 0:
            raise ValueError(f"max_trace_points must be non-negative, got {self.max_trace_points}")
