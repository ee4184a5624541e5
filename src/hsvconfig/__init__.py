"""HitScoreVisualizer configuration management."""

__version__ = "3.4.0"
