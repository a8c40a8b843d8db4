"""Game AI toolkit: 2D geometry, polygons, graphs, path finding and decision making."""

__version__ = "0.1.0"