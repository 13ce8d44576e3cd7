"""Static game data - equipment, opponents and environments."""

from .enums import ActionType, ArmorType, BattlePhase, EnvironmentType, OpponentType, Side, WeaponType
from .environments import ENVIRONMENTS, EnvironmentProfile, StatDelta, get_environment_profile
from .equipment import ARMORS, WEAPONS, Armor, Weapon, get_armor, get_weapon
from .opponents import OPPONENTS, OpponentProfile, get_opponent_profile

__all__ = [
    # Enums
    "ActionType",
    "ArmorType",
    "BattlePhase",
    "EnvironmentType",
    "OpponentType",
    "Side",
    "WeaponType",
    # Equipment
    "Armor",
    "Weapon",
    "ARMORS",
    "WEAPONS",
    "get_armor",
    "get_weapon",
    # Opponents
    "OpponentProfile",
    "OPPONENTS",
    "get_opponent_profile",
    # Environments
    "EnvironmentProfile",
    "StatDelta",
    "ENVIRONMENTS",
    "get_environment_profile",
]
