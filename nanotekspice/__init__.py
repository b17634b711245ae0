"""Tristate logic circuit simulator: circuit model, gates, file parser and shell."""

__version__ = "1.0.0"
__all__ = ["utils", "circuit", "components", "factory", "shell", "parsing", "cli"]