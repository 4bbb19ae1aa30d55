"""Run with Mind: a terminal maze chase game with enemies, powerups and save files."""

__version__ = "1.0.0"
__all__ = ["__version__"]