"""Battle engine module - handles turn order, action resolution and damage calculation."""

from .battle import ActionResult, Battle, BattleResult, BattleStatus
from .combatant import (
    CHARGE_MULTIPLIER,
    DEFEND_MULTIPLIER,
    Combatant,
    Opponent,
    Warrior,
    calculate_damage,
    round_half_up,
)
from .environment import Environment
from .logging import BattleLog, BattleLogger, LogEntry, LogEventType, StateSnapshot
from .turn import TurnResolver, determine_execution_order
from .types import ActionOutcome, BattleContext, EnvironmentOutcome, ExecutionOrder, TurnResult

__all__ = [
    "Combatant",
    "Warrior",
    "Opponent",
    "calculate_damage",
    "round_half_up",
    "CHARGE_MULTIPLIER",
    "DEFEND_MULTIPLIER",
    "Environment",
    "TurnResolver",
    "determine_execution_order",
    "ActionOutcome",
    "BattleContext",
    "EnvironmentOutcome",
    "ExecutionOrder",
    "TurnResult",
    "Battle",
    "BattleResult",
    "BattleStatus",
    "ActionResult",
    "BattleLogger",
    "BattleLog",
    "LogEntry",
    "LogEventType",
    "StateSnapshot",
]
