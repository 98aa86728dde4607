"""Procedural planet generation, an orbit camera and the screen flow of a small simulation game."""

__version__ = "0.1.0"