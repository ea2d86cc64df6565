"""Tile-based puzzle game: collect every coin and reach the exit."""

__version__ = "1.0.0"
__all__ = ["mapfile", "game", "render"]