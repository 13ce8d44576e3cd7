"""Environment definitions - per-turn stat deltas for each side."""

from dataclasses import dataclass

from .enums import EnvironmentType, Side


@dataclass(frozen=True)
class StatDelta:
    """Stat change applied to a combatant once per turn."""

    hp: int = 0
    attack: int = 0
    defense: int = 0

    def is_empty(self) -> bool:
        return self.hp == 0 and self.attack == 0 and self.defense == 0

    def describe(self) -> str:
        """Short human-readable form, e.g. '-1 HP, +1 Attack'."""
        parts = []
        if self.hp:
            parts.append(f"{self.hp:+d} HP")
        if self.attack:
            parts.append(f"{self.attack:+d} Attack")
        if self.defense:
            parts.append(f"{self.defense:+d} Defense")
        return ", ".join(parts) or "no effect"


@dataclass(frozen=True)
class EnvironmentProfile:
    """Fixed effect set for an environment variant."""

    environment_type: EnvironmentType
    name: str
    description: str
    player_delta: StatDelta
    opponent_delta: StatDelta

    def delta_for(self, side: Side) -> StatDelta:
        return self.player_delta if side is Side.PLAYER else self.opponent_delta


ENVIRONMENTS: dict[EnvironmentType, EnvironmentProfile] = {
    EnvironmentType.NEUTRAL: EnvironmentProfile(
        EnvironmentType.NEUTRAL,
        "Arena",
        "Neutral battleground",
        player_delta=StatDelta(),
        opponent_delta=StatDelta(),
    ),
    EnvironmentType.ATTRITION: EnvironmentProfile(
        EnvironmentType.ATTRITION,
        "Swamp",
        "Treacherous marshland",
        player_delta=StatDelta(hp=-1),
        opponent_delta=StatDelta(attack=1),
    ),
    EnvironmentType.ENERGIZING: EnvironmentProfile(
        EnvironmentType.ENERGIZING,
        "Colosseum",
        "Roaring crowd energizes you",
        player_delta=StatDelta(attack=1),
        opponent_delta=StatDelta(defense=-1),
    ),
}


def get_environment_profile(environment_type: EnvironmentType | str) -> EnvironmentProfile:
    """Look up an environment profile by type or type value.

    Raises:
        ValueError: If the environment type is unknown
    """
    try:
        return ENVIRONMENTS[EnvironmentType(environment_type)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown environment type: {environment_type}") from None
