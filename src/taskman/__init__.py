"""taskman - a console task tracker with JSON file persistence."""

__version__ = "0.1.0"
