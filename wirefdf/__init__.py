"""Wireframe rendering of .fdf height maps, with a static and an interactive viewer."""

__version__ = "0.1.0"
__all__ = ["__version__"]