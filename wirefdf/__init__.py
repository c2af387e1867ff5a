"""Isometric wireframe viewer for height-map files."""

__version__ = "0.1.0"