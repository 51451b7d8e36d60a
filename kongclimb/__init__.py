"""A terminal platform game with barrels, ghosts, ladders, recording and replay."""

__version__ = "0.1.0"
__all__ = ["__version__"]