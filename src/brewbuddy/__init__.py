"""brewbuddy — a small tea-brewing menu for the terminal."""

__version__ = "0.1.0"
