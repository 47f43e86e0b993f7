"""SVG rendering of epicycle traces.

Builds standalone SVG documents from sampled coordinates with plain string
formatting. Optionally overlays the epicycle circles at one instant.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from epicycles.engine.epicycle import Coordinate
from epicycles.utils.geometry import fit_to_canvas

_TRACE_COLOR = "#e94560"
_CIRCLE_COLOR = "#4ECDC4"
_ARM_COLOR = "#FFEAA7"
_BACKGROUND = "#1a1a2e"

# Margin as a fraction of canvas size so circles near the edge stay visible.
_MARGIN_PCT = 0.05


def _svg_wrap(content: str, cw: float, ch: float) -> str:
    """Wrap SVG content in a standalone SVG document."""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {cw:.1f} {ch:.1f}"'
        f' width="{cw:.1f}" height="{ch:.1f}"'
        f' style="background:{_BACKGROUND}">'
        f'\n{content}\n</svg>'
    )


def _points_attr(points: np.ndarray) -> str:
    return " ".join(f"{x:.2f},{y:.2f}" for x, y in points)


def render_trace_svg(
    trace: Sequence[Coordinate],
    *,
    centres: Sequence[Coordinate] | None = None,
    radii: Sequence[float] | None = None,
    size: float = 640.0,
    stroke_width: float = 1.5,
) -> str:
    """Trace as a <polyline>; with centres + radii, circles and arms on top.

    ``centres`` are the running partial sums (EpicycleModel.epicycle_centres),
    so circle i is centred on centres[i] with radius radii[i].
    """
    if not trace:
        return _svg_wrap("", size, size)

    trace_arr = np.array(trace, dtype=np.float64)
    # Fit trace and circles together so the overlay shares one transform.
    extent = trace_arr
    if centres:
        extent = np.vstack([trace_arr, np.array(centres, dtype=np.float64)])
    margin = size * _MARGIN_PCT
    _, scale, (dx, dy) = fit_to_canvas(extent, size, size, margin)

    def to_canvas(arr: np.ndarray) -> np.ndarray:
        return np.column_stack([arr[:, 0] * scale + dx, dy - arr[:, 1] * scale])

    parts: list[str] = [
        f'<polyline points="{_points_attr(to_canvas(trace_arr))}" fill="none"'
        f' stroke="{_TRACE_COLOR}" stroke-width="{stroke_width}"/>'
    ]

    if centres and radii:
        centre_arr = to_canvas(np.array(centres, dtype=np.float64))
        # centres[i] is the hub of circle i; the last entry is the pen tip.
        for (cx, cy), r in zip(centre_arr[:-1], radii):
            parts.append(
                f'<circle cx="{cx:.2f}" cy="{cy:.2f}" r="{r * scale:.2f}" fill="none"'
                f' stroke="{_CIRCLE_COLOR}" stroke-width="0.5" stroke-opacity="0.6"/>'
            )
        parts.append(
            f'<polyline points="{_points_attr(centre_arr)}" fill="none"'
            f' stroke="{_ARM_COLOR}" stroke-width="1"/>'
        )

    return _svg_wrap("\n".join(parts), size, size)
