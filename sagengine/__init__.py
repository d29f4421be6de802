"""Scene graph, cameras and lights, queued input events, render passes and meshes for a small 3D engine."""

__version__ = "0.1.0"