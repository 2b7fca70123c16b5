"""Validation of .cub scene files and a pygame window with a walkable mini-map."""

__version__ = "0.1.0"