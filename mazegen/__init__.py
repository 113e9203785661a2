"""Random maze generation by depth-first backtracking, with text rendering and a command line tool."""

__version__ = "0.1.0"
__all__ = ["cli", "entities", "maze", "stack"]