"""Type definitions for the battle engine."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..models.enums import ActionType, Side
from ..models.environments import StatDelta

if TYPE_CHECKING:
    from .combatant import Combatant
    from .environment import Environment


@dataclass(frozen=True)
class ExecutionOrder:
    """The order in which the two sides resolve their actions this turn."""

    first: Side
    second: Side

    @property
    def player_first(self) -> bool:
        return self.first is Side.PLAYER

    def __iter__(self) -> Iterator[Side]:
        return iter((self.first, self.second))


@dataclass
class ActionOutcome:
    """Result of one side executing its action."""

    side: Side
    action_type: ActionType
    success: bool = True
    damage: int = 0
    defense_multiplier: float = 1.0
    target_hp_after: int | None = None


@dataclass
class EnvironmentOutcome:
    """Result of applying the environment to one combatant."""

    side: Side
    delta: StatDelta
    hp_after: int


@dataclass
class TurnResult:
    """Result of processing a complete turn."""

    turn_number: int
    player_action: ActionType
    order: ExecutionOrder
    actions: list[ActionOutcome] = field(default_factory=list)
    environment_effects: list[EnvironmentOutcome] = field(default_factory=list)
    winner: Side | None = None
    is_battle_over: bool = False

    def get_action(self, side: Side) -> ActionOutcome | None:
        """Get the action a side executed this turn, if it acted."""
        for outcome in self.actions:
            if outcome.side is side:
                return outcome
        return None


@dataclass
class BattleContext:
    """Context for the current battle, shared by the turn resolver steps."""

    player: "Combatant"
    opponent: "Combatant"
    environment: "Environment"
    current_turn: int = 0

    def get(self, side: Side) -> "Combatant":
        """Get the combatant occupying a side."""
        return self.player if side is Side.PLAYER else self.opponent

    def both_alive(self) -> bool:
        return self.player.is_alive() and self.opponent.is_alive()
