"""Path loader — ``x,y`` text → validated, normalised ComplexValue samples.

One sample per line. The sample count must be a power of two for the
radix-2 transform; normalisation translates the bounding box to the origin
and scales by its diagonal.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np

from epicycles.engine.complex_value import ComplexValue
from epicycles.utils.geometry import bbox, bbox_diagonal

logger = logging.getLogger(__name__)


class WrongPathLengthError(ValueError):
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Path length of {length} is not a power of 2, add more data to input")


class PathFormatError(ValueError):
    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        super().__init__(f"Line {line_number}: expected 'x,y', got {line!r}")


def is_power_of_two(n: int) -> bool:
    return n != 0 and (n & (n - 1)) == 0


def assert_power_of_two_length(length: int) -> None:
    if not is_power_of_two(length):
        raise WrongPathLengthError(length)


def parse_path_text(text: str) -> list[ComplexValue]:
    """Parse ``x,y`` lines. Blank lines are skipped; anything else malformed raises."""
    samples: list[ComplexValue] = []
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        parts = line.split(",")
        if len(parts) != 2:
            raise PathFormatError(line_number, raw)
        try:
            samples.append(ComplexValue(float(parts[0].strip()), float(parts[1].strip())))
        except ValueError:
            raise PathFormatError(line_number, raw) from None
    return samples


def normalise(samples: Sequence[ComplexValue]) -> list[ComplexValue]:
    """Translate by (min re, min im), divide by the bounding-box diagonal.

    A zero-diagonal (single point) path is only translated.
    """
    if not samples:
        return []
    points = np.array([s.to_pair() for s in samples], dtype=np.float64)
    xmin, ymin, _, _ = bbox(points)
    diagonal = bbox_diagonal(points)
    shifted = points - np.array([xmin, ymin])
    if diagonal > 0:
        shifted = shifted / diagonal
    return ComplexValue.from_pairs(shifted)


def load_path_file(path: str | Path, normalise: bool = True) -> list[ComplexValue]:
    """Read, validate and (by default) normalise a path file."""
    path = Path(path)
    samples = parse_path_text(path.read_text(encoding="utf-8"))
    assert_power_of_two_length(len(samples))
    logger.info("Loaded path %s: %d samples", path.name, len(samples))
    if normalise:
        return _normalise(samples)
    return samples


# load_path_file's keyword shadows the function name inside its body.
_normalise = normalise
