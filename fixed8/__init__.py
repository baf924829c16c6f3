"""Signed 32-bit fixed-point numbers with eight fractional bits, and a demonstration command."""

__version__ = "0.1.0"
__all__ = ["__version__"]