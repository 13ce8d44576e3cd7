"""Combatants - the player's Warrior and the enemy Opponent.

Both sides share one stat/action contract. Totals are recomputed on every
read from base stats, equipment and accumulated environment modifiers.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ..models.enums import ActionType, OpponentType, Side
from ..models.equipment import Armor, Weapon
from ..models.environments import StatDelta
from ..models.opponents import OpponentProfile, get_opponent_profile

if TYPE_CHECKING:
    from .environment import Environment

DEFEND_MULTIPLIER = 0.5
CHARGE_MULTIPLIER = 3
MIN_SPEED = 1

# Warrior base stats
WARRIOR_BASE_HP = 100
WARRIOR_BASE_ATTACK = 1
WARRIOR_BASE_DEFENSE = 1
WARRIOR_BASE_SPEED = 50


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def calculate_damage(incoming_attack: int, defense: int, defense_multiplier: float = 1.0) -> int:
    """Calculate damage dealt by an attack.

    damage = max(0, round(incoming * multiplier) - defense)

    Args:
        incoming_attack: Attack value of the hit (after charge multiplier)
        defense: Target's total defense
        defense_multiplier: 1.0 normally, DEFEND_MULTIPLIER when defending

    Returns:
        Non-negative damage value
    """
    modified = max(0, round_half_up(max(0, incoming_attack) * defense_multiplier))
    return max(0, modified - defense)


class Combatant:
    """A participant in a battle with mutable HP and derived stats."""

    def __init__(
        self,
        name: str,
        side: Side,
        max_hp: int,
        attack: int,
        defense: int,
        speed: int,
        armor: Armor | None = None,
        weapon: Weapon | None = None,
    ) -> None:
        if max_hp <= 0:
            raise ValueError(f"max_hp must be positive, got {max_hp}")

        self.name = name
        self.side = side
        self.max_hp = max_hp
        self.current_hp = max_hp
        self.base_attack = attack
        self.base_defense = defense
        self.base_speed = speed
        self.armor = armor
        self.weapon = weapon

        # Accumulated environment modifiers (never decay)
        self.environment_attack_bonus = 0
        self.environment_defense_penalty = 0

        # Charge state
        self.is_charging = False
        self.can_charge = True

    # ------------------------------------------------------------------
    # Equipment
    # ------------------------------------------------------------------

    def equip_weapon(self, weapon: Weapon) -> None:
        """Equip a weapon, replacing any current one."""
        self.weapon = weapon

    def equip_armor(self, armor: Armor) -> None:
        """Equip armor, replacing any current one."""
        self.armor = armor

    # ------------------------------------------------------------------
    # Derived stats
    # ------------------------------------------------------------------

    @property
    def total_attack(self) -> int:
        total = self.base_attack + self.environment_attack_bonus
        if self.weapon is not None:
            total += self.weapon.attack_bonus
        return total

    @property
    def total_defense(self) -> int:
        total = self.base_defense - self.environment_defense_penalty
        if self.armor is not None:
            total += self.armor.defense_bonus
        return max(0, total)

    @property
    def total_speed(self) -> int:
        total = self.base_speed
        if self.armor is not None:
            total += self.armor.speed_penalty
        if self.weapon is not None:
            total += self.weapon.speed_penalty
        return max(MIN_SPEED, total)

    def is_alive(self) -> bool:
        """Check if the combatant is still standing."""
        return self.current_hp > 0

    def available_actions(self) -> list[ActionType]:
        """Actions that may be declared this turn."""
        actions = [ActionType.ATTACK, ActionType.DEFEND]
        if self.can_charge:
            actions.append(ActionType.CHARGE)
        return actions

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def attack(self, target: Combatant, defense_multiplier: float = 1.0) -> int:
        """Attack a target. Returns actual damage dealt.

        A pending charge triples the attack and is consumed by this call.
        """
        incoming = self.total_attack
        if self.is_charging:
            incoming *= CHARGE_MULTIPLIER
            self.is_charging = False
            self.can_charge = True
        return target.take_damage(incoming, defense_multiplier)

    def defend(self) -> float:
        """Raise guard. Returns the multiplier for damage received this turn."""
        return DEFEND_MULTIPLIER

    def charge(self) -> bool:
        """Prepare a charged attack. Returns False if charging is not allowed."""
        if not self.can_charge:
            return False
        self.is_charging = True
        self.can_charge = False
        return True

    def take_damage(self, incoming_attack: int, defense_multiplier: float = 1.0) -> int:
        """Apply an incoming hit. Returns the hit's damage; HP stops at 0."""
        damage = calculate_damage(incoming_attack, self.total_defense, defense_multiplier)
        self.current_hp = max(0, self.current_hp - damage)
        return damage

    def update_charge_availability(self) -> None:
        """End-of-turn charge refresh: restore charging once the cooldown is over."""
        if not self.is_charging and not self.can_charge:
            self.can_charge = True

    # ------------------------------------------------------------------
    # Environment hooks
    # ------------------------------------------------------------------

    def apply_environment_effect(self, environment: Environment) -> StatDelta:
        """Apply one turn of the environment's effect for this side."""
        return environment.apply(self)

    def lose_hp(self, amount: int) -> int:
        """Lose HP outside of combat damage. Returns actual HP lost."""
        actual = min(self.current_hp, max(0, amount))
        self.current_hp -= actual
        return actual

    def heal(self, amount: int) -> int:
        """Restore HP up to max. Returns actual HP restored."""
        actual = min(self.max_hp - self.current_hp, max(0, amount))
        self.current_hp += actual
        return actual

    def gain_attack_bonus(self, amount: int) -> None:
        self.environment_attack_bonus += amount

    def lose_defense(self, amount: int) -> None:
        self.environment_defense_penalty += amount

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, hp={self.current_hp}/{self.max_hp}, "
            f"atk={self.total_attack}, def={self.total_defense}, spd={self.total_speed})"
        )


class Warrior(Combatant):
    """The player's combatant."""

    def __init__(
        self,
        max_hp: int = WARRIOR_BASE_HP,
        attack: int = WARRIOR_BASE_ATTACK,
        defense: int = WARRIOR_BASE_DEFENSE,
        speed: int = WARRIOR_BASE_SPEED,
        armor: Armor | None = None,
        weapon: Weapon | None = None,
        name: str = "Warrior",
    ) -> None:
        super().__init__(
            name=name,
            side=Side.PLAYER,
            max_hp=max_hp,
            attack=attack,
            defense=defense,
            speed=speed,
            armor=armor,
            weapon=weapon,
        )


class Opponent(Combatant):
    """The enemy combatant. Its only behavior is to attack."""

    def __init__(self, profile: OpponentProfile) -> None:
        super().__init__(
            name=profile.name,
            side=Side.OPPONENT,
            max_hp=profile.hp,
            attack=profile.attack,
            defense=profile.defense,
            speed=profile.speed,
        )
        self.profile = profile

    @classmethod
    def from_type(cls, opponent_type: OpponentType | str) -> Opponent:
        return cls(get_opponent_profile(opponent_type))

    @property
    def opponent_type(self) -> OpponentType:
        return self.profile.opponent_type

    def choose_action(self) -> ActionType:
        return ActionType.ATTACK
