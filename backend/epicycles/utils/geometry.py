"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def bbox_diagonal(points: NDArray[np.float64]) -> float:
    """Euclidean length of the bounding-box diagonal."""
    xmin, ymin, xmax, ymax = bbox(points)
    return float(np.hypot(xmax - xmin, ymax - ymin))


def fit_to_canvas(
    points: NDArray[np.float64],
    width: float,
    height: float,
    margin: float = 0.0,
) -> tuple[NDArray[np.float64], float, tuple[float, float]]:
    """Uniformly scale + translate points into [margin, size - margin].

    Returns (fitted points, scale, (dx, dy)) so that extra geometry (circle
    centres, radii) can be mapped with the same transform. Y is flipped so
    larger y draws higher, as on a plot.
    """
    if len(points) == 0:
        return points, 1.0, (0.0, 0.0)
    xmin, ymin, xmax, ymax = bbox(points)
    span_x = xmax - xmin
    span_y = ymax - ymin
    avail_w = width - 2 * margin
    avail_h = height - 2 * margin
    if span_x <= 0 and span_y <= 0:
        scale = 1.0
    elif span_x <= 0:
        scale = avail_h / span_y
    elif span_y <= 0:
        scale = avail_w / span_x
    else:
        scale = min(avail_w / span_x, avail_h / span_y)

    # Centre the scaled box inside the canvas.
    dx = margin + (avail_w - span_x * scale) / 2 - xmin * scale
    dy = margin + (avail_h - span_y * scale) / 2 + ymax * scale
    fitted = np.column_stack([points[:, 0] * scale + dx, dy - points[:, 1] * scale])
    return fitted, scale, (dx, dy)
