"""Service layer for game logic."""

from .arena import ActionPolicy, ArenaService, always_attack, charge_then_attack, get_policy

__all__ = [
    "ArenaService",
    "ActionPolicy",
    "always_attack",
    "charge_then_attack",
    "get_policy",
]
