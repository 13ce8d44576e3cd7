"""Battle environment - applies per-turn stat deltas to combatants."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.enums import EnvironmentType, Side
from ..models.environments import EnvironmentProfile, StatDelta, get_environment_profile

if TYPE_CHECKING:
    from .combatant import Combatant


class Environment:
    """The battlefield a battle takes place on.

    Holds no state beyond its profile; every effect is a pure function of
    the side the combatant occupies.
    """

    def __init__(self, profile: EnvironmentProfile) -> None:
        self.profile = profile

    @classmethod
    def from_type(cls, environment_type: EnvironmentType | str) -> Environment:
        return cls(get_environment_profile(environment_type))

    @property
    def environment_type(self) -> EnvironmentType:
        return self.profile.environment_type

    @property
    def name(self) -> str:
        return self.profile.name

    @property
    def description(self) -> str:
        """Effect summary for both sides."""
        return (
            f"Player: {self.profile.player_delta.describe()} | "
            f"Opponent: {self.profile.opponent_delta.describe()}"
        )

    def effect_for(self, side: Side) -> StatDelta:
        """Get the per-turn delta for a side."""
        return self.profile.delta_for(side)

    def apply(self, combatant: Combatant) -> StatDelta:
        """Apply this turn's delta to a combatant. Returns the delta applied."""
        delta = self.effect_for(combatant.side)
        if delta.hp < 0:
            combatant.lose_hp(-delta.hp)
        elif delta.hp > 0:
            combatant.heal(delta.hp)
        if delta.attack:
            combatant.gain_attack_bonus(delta.attack)
        if delta.defense:
            combatant.lose_defense(-delta.defense)
        return delta

    def __repr__(self) -> str:
        return f"Environment({self.environment_type.value!r})"
