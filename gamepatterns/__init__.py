"""Runnable examples of classic design patterns with game-like objects."""

__version__ = "0.1.0"