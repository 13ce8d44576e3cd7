"""Shared fixtures for battle engine tests."""

import pytest

from warrior_arena.engine.battle import Battle
from warrior_arena.engine.combatant import Opponent, Warrior
from warrior_arena.engine.environment import Environment
from warrior_arena.engine.logging import BattleLogger
from warrior_arena.models.enums import ArmorType, EnvironmentType, OpponentType, WeaponType
from warrior_arena.models.equipment import get_armor, get_weapon


class FakeClock:
    """Deterministic clock returning queued timestamps (last one repeats)."""

    def __init__(self, *times: float) -> None:
        self.times = list(times) or [0.0]
        self.calls = 0

    def __call__(self) -> float:
        index = min(self.calls, len(self.times) - 1)
        self.calls += 1
        return self.times[index]


@pytest.fixture
def warrior() -> Warrior:
    """Warrior with Dagger and Light Armor: ATK 21, DEF 21, SPD 45."""
    return Warrior(weapon=get_weapon(WeaponType.DAGGER), armor=get_armor(ArmorType.LIGHT))


@pytest.fixture
def slow_warrior() -> Warrior:
    """Warrior with Battle Axe and Heavy Armor: ATK 41, DEF 41, SPD 5."""
    return Warrior(weapon=get_weapon(WeaponType.BATTLE_AXE), armor=get_armor(ArmorType.HEAVY))


@pytest.fixture
def thief() -> Opponent:
    """Thief: 150 HP, ATK 20, DEF 20, SPD 40."""
    return Opponent.from_type(OpponentType.THIEF)


@pytest.fixture
def minotaur() -> Opponent:
    """Minotaur: 350 HP, ATK 40, DEF 40, SPD 20."""
    return Opponent.from_type(OpponentType.MINOTAUR)


@pytest.fixture
def arena() -> Environment:
    return Environment.from_type(EnvironmentType.NEUTRAL)


@pytest.fixture
def swamp() -> Environment:
    return Environment.from_type(EnvironmentType.ATTRITION)


@pytest.fixture
def colosseum() -> Environment:
    return Environment.from_type(EnvironmentType.ENERGIZING)


@pytest.fixture
def battle_logger() -> BattleLogger:
    return BattleLogger(label="Test Battle")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(100.0, 100.5)


@pytest.fixture
def battle(warrior: Warrior, thief: Opponent, arena: Environment, battle_logger: BattleLogger, clock) -> Battle:
    """Scenario battle: Dagger + Light Armor warrior vs Thief in the Arena."""
    return Battle(warrior, thief, arena, logger=battle_logger, clock=clock)
