"""Mesh generation, Wavefront OBJ handling, Bezier patches and scene generation."""

__version__ = "0.1.0"