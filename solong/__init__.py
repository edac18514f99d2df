"""A tile-based puzzle game: collect every box on a .ber map, then reach the exit."""

__version__ = "1.0.0"

__all__ = ["__version__"]