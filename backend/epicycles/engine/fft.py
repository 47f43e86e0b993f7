"""Fourier transform engine — bit-reversal, radix-2 FFT and the direct DFT.

``fft`` works in place on a list of ComplexValue whose length is a power of
two. Length is not validated here; reject bad input upstream
(see epicycles.paths.loader.is_power_of_two).
"""

from __future__ import annotations

import logging
import math
from collections.abc import MutableSequence, Sequence
from typing import TypeVar

from epicycles.engine.complex_value import ONE, ZERO, ComplexValue

logger = logging.getLogger(__name__)

T = TypeVar("T")


def butterfly(data: MutableSequence[T]) -> MutableSequence[T]:
    """Bit-reversal permutation, in place.

    ``target`` is a bit-reversed counter: each step clears the run of set
    high bits and sets the first clear one below the top bit.
    """
    n = len(data)
    target = 0
    for position in range(n):
        if target > position:
            data[position], data[target] = data[target], data[position]
        mask = n >> 1
        while target & mask:
            target &= ~mask
            mask >>= 1
        target |= mask
    return data


def fft(data: MutableSequence[ComplexValue]) -> MutableSequence[ComplexValue]:
    """Iterative radix-2 decimation-in-time FFT. Destroys the input.

    Twiddle factors come from the recurrence w ← w·(α + iβ) + w with
    α = −2·sin²(δ/2), β = sin(δ), δ = −π/step: two sin() calls per stage.
    """
    butterfly(data)
    length = len(data)
    step = 1
    while step < length:
        jump = step << 1
        delta = -math.pi / step
        half_sin = math.sin(delta * 0.5)
        multiplier = ComplexValue(-2.0 * half_sin * half_sin, math.sin(delta))
        factor = ONE

        for group in range(step):
            for pair in range(group, length, jump):
                matched = pair + step
                product = ComplexValue.multiply(factor, data[matched])
                data[matched] = ComplexValue.minus(data[pair], product)
                data[pair] = ComplexValue.add(data[pair], product)
            factor = ComplexValue.add(ComplexValue.multiply(multiplier, factor), factor)

        logger.debug("fft stage step=%d complete (n=%d)", step, length)
        step = jump
    return data


def dft(data: Sequence[ComplexValue]) -> list[ComplexValue]:
    """Direct O(n²) DFT: X[k] = Σ x[n]·exp(−2πi·k·n/N). Any length, non-destructive."""
    n_samples = len(data)
    results: list[ComplexValue] = []
    for term in range(n_samples):
        total = ZERO
        for n, sample in enumerate(data):
            angle = 2.0 * math.pi * term * n / n_samples
            kernel = ComplexValue(math.cos(angle), -math.sin(angle))
            total = ComplexValue.add(total, ComplexValue.multiply(sample, kernel))
        results.append(total)
    return results
