"""Warrior Arena - a turn-based battle resolution engine."""

__version__ = "0.1.0"
