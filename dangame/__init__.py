"""Scene graph, commands, screen stack and scrolling world for a small aircraft game."""

__version__ = "0.1.0"