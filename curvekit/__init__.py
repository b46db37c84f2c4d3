"""Parametric 3D curves with points, derivatives, a text report and a matplotlib 3D viewer."""

__version__ = "1.0.0"
__all__ = ["__version__"]