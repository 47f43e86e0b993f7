"""Epicycle engine — complex values, FFT and the epicycle model."""

from epicycles.engine.complex_value import ComplexValue
from epicycles.engine.config import EpicycleConfig
from epicycles.engine.epicycle import Coordinate, EpicycleModel, FrequencyTerm, InvalidPrecisionError
from epicycles.engine.fft import butterfly, dft, fft

__all__ = [
    "ComplexValue",
    "EpicycleConfig",
    "Coordinate",
    "EpicycleModel",
    "FrequencyTerm",
    "InvalidPrecisionError",
    "butterfly",
    "dft",
    "fft",
]
