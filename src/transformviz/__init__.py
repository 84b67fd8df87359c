"""Interactive 2D linear-transformation visualizer."""
__version__ = "0.1.0"
