"""Enums for game models."""

from enum import Enum


class ActionType(str, Enum):
    """Actions the player can declare for a turn."""

    ATTACK = "attack"
    DEFEND = "defend"  # Halves incoming damage, always resolves first
    CHARGE = "charge"  # Next attack deals triple damage


class Side(str, Enum):
    """Which side of the battle a combatant occupies."""

    PLAYER = "player"
    OPPONENT = "opponent"


class BattlePhase(str, Enum):
    """States of the battle turn loop."""

    AWAITING_ACTIONS = "awaiting_actions"
    RESOLVING_ACTIONS = "resolving_actions"
    APPLYING_ENVIRONMENT = "applying_environment"
    CHECKING_TERMINATION = "checking_termination"
    FINISHED = "finished"


class WeaponType(str, Enum):
    """Weapon variants - one may be equipped at a time."""

    DAGGER = "dagger"
    SWORD = "sword"
    BATTLE_AXE = "battle_axe"


class ArmorType(str, Enum):
    """Armor variants - one may be equipped at a time."""

    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


class OpponentType(str, Enum):
    """Opponent variants."""

    THIEF = "thief"
    VIKING = "viking"
    MINOTAUR = "minotaur"


class EnvironmentType(str, Enum):
    """Battlefield variants, selected once per battle."""

    NEUTRAL = "neutral"  # Arena - no effect
    ATTRITION = "attrition"  # Swamp - drains the player, feeds the opponent
    ENERGIZING = "energizing"  # Colosseum - fires up the player, rattles the opponent
