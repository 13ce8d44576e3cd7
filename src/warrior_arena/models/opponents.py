"""Opponent definitions."""

from dataclasses import dataclass

from .enums import OpponentType


@dataclass(frozen=True)
class OpponentProfile:
    """Fixed stat line for an opponent variant."""

    opponent_type: OpponentType
    name: str
    hp: int
    attack: int
    defense: int
    speed: int
    description: str = ""


OPPONENTS: dict[OpponentType, OpponentProfile] = {
    OpponentType.THIEF: OpponentProfile(
        OpponentType.THIEF, "Thief", hp=150, attack=20, defense=20, speed=40,
        description="Swift and cunning, strikes from shadows",
    ),
    OpponentType.VIKING: OpponentProfile(
        OpponentType.VIKING, "Viking", hp=250, attack=30, defense=30, speed=30,
        description="Fierce warrior with balanced combat skills",
    ),
    OpponentType.MINOTAUR: OpponentProfile(
        OpponentType.MINOTAUR, "Minotaur", hp=350, attack=40, defense=40, speed=20,
        description="Massive beast with devastating power",
    ),
}


def get_opponent_profile(opponent_type: OpponentType | str) -> OpponentProfile:
    """Look up an opponent profile by type or type value.

    Raises:
        ValueError: If the opponent type is unknown
    """
    try:
        return OPPONENTS[OpponentType(opponent_type)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown opponent type: {opponent_type}") from None
