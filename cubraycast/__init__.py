"""Raycasting maze viewer: .cub scene parsing, map validation, rendering and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]