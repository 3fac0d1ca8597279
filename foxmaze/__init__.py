"""A tile-based maze game: collect every item, avoid enemies, reach the exit."""

__version__ = "0.1.0"
__all__ = ["__version__"]