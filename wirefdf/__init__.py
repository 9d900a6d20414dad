"""Wireframe viewer for height-map files: map reading, projection, rasterising and a Tk window."""

__version__ = "0.1.0"
__all__ = ["app", "geometry", "mapfile", "scene", "textutil"]