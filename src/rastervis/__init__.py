"""Visualizer of Bresenham's line and circle rasterization algorithms."""

__version__ = "0.1.0"
