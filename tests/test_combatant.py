"""Tests for combatants - stats, actions and damage."""

import pytest

from warrior_arena.engine.combatant import (
    CHARGE_MULTIPLIER,
    DEFEND_MULTIPLIER,
    Opponent,
    Warrior,
    calculate_damage,
    round_half_up,
)
from warrior_arena.models.enums import ActionType, ArmorType, OpponentType, Side, WeaponType
from warrior_arena.models.equipment import get_armor, get_weapon


class TestDamageCalculation:
    """Tests for the damage formula."""

    def test_basic_damage(self):
        """Damage is attack minus defense."""
        assert calculate_damage(21, 20) == 1

    def test_damage_never_negative(self):
        """Defense above attack yields zero damage."""
        assert calculate_damage(20, 21) == 0
        assert calculate_damage(0, 50) == 0

    def test_multiplier_applied_before_defense(self):
        """The multiplier scales the attack, then defense is subtracted."""
        assert calculate_damage(40, 1, DEFEND_MULTIPLIER) == 19

    def test_halves_round_up(self):
        """Half values round up."""
        assert round_half_up(10.5) == 11
        assert round_half_up(10.4) == 10
        assert calculate_damage(21, 0, DEFEND_MULTIPLIER) == 11
        assert calculate_damage(25, 3, DEFEND_MULTIPLIER) == 10

    def test_negative_attack_clamped(self):
        """A negative attack value is treated as zero."""
        assert calculate_damage(-10, 0) == 0


class TestWarriorStats:
    """Tests for derived warrior stats."""

    def test_base_stats(self):
        """An unequipped warrior has the base stat line."""
        warrior = Warrior()
        assert warrior.current_hp == 100
        assert warrior.max_hp == 100
        assert warrior.total_attack == 1
        assert warrior.total_defense == 1
        assert warrior.total_speed == 50
        assert warrior.side is Side.PLAYER
        assert warrior.can_charge
        assert not warrior.is_charging

    def test_equipment_bonuses(self, warrior):
        """Dagger and Light Armor give ATK 21, DEF 21, SPD 45."""
        assert warrior.total_attack == 21
        assert warrior.total_defense == 21
        assert warrior.total_speed == 45

    def test_heavy_loadout(self, slow_warrior):
        """Battle Axe and Heavy Armor give ATK 41, DEF 41, SPD 5."""
        assert slow_warrior.total_attack == 41
        assert slow_warrior.total_defense == 41
        assert slow_warrior.total_speed == 5

    def test_speed_floor(self):
        """Total speed never drops below 1."""
        warrior = Warrior(
            speed=10,
            weapon=get_weapon(WeaponType.BATTLE_AXE),
            armor=get_armor(ArmorType.HEAVY),
        )
        assert warrior.total_speed == 1

    def test_equip_replaces(self, warrior):
        """Equipping a new weapon replaces the old one instead of stacking."""
        warrior.equip_weapon(get_weapon(WeaponType.SWORD))
        assert warrior.total_attack == 31
        assert warrior.total_speed == 35

        warrior.equip_armor(get_armor(ArmorType.MEDIUM))
        assert warrior.total_defense == 31
        assert warrior.total_speed == 25

    def test_environment_bonus_in_total_attack(self, warrior):
        """Accumulated environment attack bonus is part of total attack."""
        warrior.gain_attack_bonus(1)
        warrior.gain_attack_bonus(1)
        assert warrior.environment_attack_bonus == 2
        assert warrior.total_attack == 23

    def test_invalid_max_hp(self):
        """A combatant needs positive max HP."""
        with pytest.raises(ValueError):
            Warrior(max_hp=0)


class TestOpponent:
    """Tests for opponents."""

    def test_from_type(self):
        """Opponents start at full HP with their profile stats."""
        viking = Opponent.from_type(OpponentType.VIKING)
        assert viking.name == "Viking"
        assert viking.opponent_type == OpponentType.VIKING
        assert viking.side is Side.OPPONENT
        assert viking.current_hp == viking.max_hp == 250
        assert viking.total_attack == 30
        assert viking.total_defense == 30
        assert viking.total_speed == 30

    def test_always_attacks(self, thief):
        """Opponent AI has no behavior besides attacking."""
        assert thief.choose_action() == ActionType.ATTACK

    def test_defense_penalty_floors_at_zero(self, thief):
        """Environment defense loss cannot push defense below zero."""
        thief.lose_defense(5)
        assert thief.total_defense == 15
        thief.lose_defense(100)
        assert thief.total_defense == 0


class TestAttack:
    """Tests for the attack action."""

    def test_attack_deals_damage(self, warrior, thief):
        """Warrior deals max(0, 21 - 20) = 1 damage to the Thief."""
        damage = warrior.attack(thief)
        assert damage == 1
        assert thief.current_hp == 149

    def test_attack_blocked_by_defense(self, warrior, thief):
        """Thief's 20 attack does nothing against 21 defense."""
        damage = thief.attack(warrior)
        assert damage == 0
        assert warrior.current_hp == 100

    def test_defended_attack(self, minotaur):
        """A defending target takes half the incoming attack before defense."""
        warrior = Warrior()
        damage = minotaur.attack(warrior, warrior.defend())
        assert damage == 19
        assert warrior.current_hp == 81

    def test_hp_floors_at_zero(self, minotaur):
        """HP never goes negative."""
        warrior = Warrior(max_hp=10, defense=0)
        damage = minotaur.attack(warrior)
        assert damage == 40
        assert warrior.current_hp == 0
        assert not warrior.is_alive()


class TestCharge:
    """Tests for the charge action."""

    def test_charge_sets_state(self, warrior):
        """A successful charge sets charging and starts the cooldown."""
        assert warrior.charge() is True
        assert warrior.is_charging
        assert not warrior.can_charge

    def test_charge_rejected_while_charging(self, warrior):
        """A second charge fails without changing state."""
        warrior.charge()
        assert warrior.charge() is False
        assert warrior.is_charging
        assert not warrior.can_charge

    def test_charged_attack_triples(self, warrior, thief):
        """Charged attack deals max(0, 21 * 3 - 20) = 43."""
        warrior.charge()
        damage = warrior.attack(thief)
        assert damage == 21 * CHARGE_MULTIPLIER - 20 == 43
        assert thief.current_hp == 107

    def test_charge_consumed_once(self, warrior, thief):
        """Only the first attack after a charge is tripled."""
        warrior.charge()
        warrior.attack(thief)
        assert not warrior.is_charging
        assert warrior.can_charge
        assert warrior.attack(thief) == 1

    def test_update_charge_availability_keeps_pending_charge(self, warrior):
        """The refresh does not restore charging while a charge is pending."""
        warrior.charge()
        warrior.update_charge_availability()
        assert warrior.is_charging
        assert not warrior.can_charge

    def test_update_charge_availability_restores_after_cooldown(self, warrior):
        """Cooldown without a pending charge is cleared by the refresh."""
        warrior.can_charge = False
        warrior.update_charge_availability()
        assert warrior.can_charge

    def test_available_actions(self, warrior):
        """Charge is offered only when it can be used."""
        assert warrior.available_actions() == [ActionType.ATTACK, ActionType.DEFEND, ActionType.CHARGE]
        warrior.charge()
        assert warrior.available_actions() == [ActionType.ATTACK, ActionType.DEFEND]


class TestHpMutation:
    """Tests for non-combat HP changes."""

    def test_lose_hp_clamped(self):
        """Losing more HP than remains stops at zero."""
        warrior = Warrior(max_hp=5)
        assert warrior.lose_hp(3) == 3
        assert warrior.lose_hp(10) == 2
        assert warrior.current_hp == 0

    def test_heal_clamped(self):
        """Healing stops at max HP."""
        warrior = Warrior()
        warrior.lose_hp(10)
        assert warrior.heal(25) == 10
        assert warrior.current_hp == 100
