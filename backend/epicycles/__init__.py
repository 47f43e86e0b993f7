"""Fourier epicycles — transform closed 2-D paths and rebuild them from rotating vectors."""

__version__ = "0.1.0"
