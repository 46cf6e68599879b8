"""Escape-time fractal viewer: view state, iteration, palettes, controls and a pygame window."""

__version__ = "0.1.0"

__all__ = ["__version__"]