"""Utility modules."""

from .stats import GameStats

__all__ = [
    "GameStats",
]
