"""Solutions to short programming-contest puzzles, as functions and a command."""

__version__ = "0.1.0"

__all__ = ["arithmetic", "decisions", "text", "grids", "cli"]