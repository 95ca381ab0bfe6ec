"""Tile geometry, path finding, splash timing, UI palette and screen states for a turn-based village defence game."""

__version__ = "0.1.0"