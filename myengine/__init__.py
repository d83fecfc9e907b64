"""Scene graph, transform and camera maths, and a command console for a small 3D engine."""

__version__ = "0.1.0"