"""Arena service - builds battles from type selections and runs them."""

import logging
from collections.abc import Callable

from ..config import Settings, get_settings
from ..engine.battle import Battle, BattleResult
from ..engine.combatant import Opponent, Warrior
from ..engine.environment import Environment
from ..engine.logging import BattleLogger
from ..models.enums import ActionType, ArmorType, EnvironmentType, OpponentType, WeaponType
from ..models.equipment import get_armor, get_weapon
from ..utils.stats import GameStats

_log = logging.getLogger(__name__)

ActionPolicy = Callable[[Battle], ActionType]


def always_attack(battle: Battle) -> ActionType:
    """Attack every turn."""
    return ActionType.ATTACK


def charge_then_attack(battle: Battle) -> ActionType:
    """Charge whenever possible, attack otherwise."""
    if ActionType.CHARGE in battle.available_actions():
        return ActionType.CHARGE
    return ActionType.ATTACK


POLICIES: dict[str, ActionPolicy] = {
    "always_attack": always_attack,
    "charge_then_attack": charge_then_attack,
}


def get_policy(name: str) -> ActionPolicy:
    """Look up an action policy by name.

    Raises:
        ValueError: If no policy has that name
    """
    policy = POLICIES.get(name)
    if policy is None:
        raise ValueError(f"Unknown policy: {name}. Available: {', '.join(sorted(POLICIES))}")
    return policy


class ArenaService:
    """Service for setting up and running battles in a session."""

    def __init__(self, settings: Settings | None = None, stats: GameStats | None = None) -> None:
        self.settings = settings if settings is not None else get_settings()
        self.stats = stats if stats is not None else GameStats()

    def create_warrior(self, weapon_type: WeaponType | str, armor_type: ArmorType | str) -> Warrior:
        """Create a warrior with configured base stats and the chosen equipment."""
        base = self.settings.warrior
        return Warrior(
            max_hp=base.hp,
            attack=base.attack,
            defense=base.defense,
            speed=base.speed,
            weapon=get_weapon(weapon_type),
            armor=get_armor(armor_type),
        )

    def create_battle(
        self,
        weapon_type: WeaponType | str,
        armor_type: ArmorType | str,
        opponent_type: OpponentType | str,
        environment_type: EnvironmentType | str,
        logger: BattleLogger | None = None,
    ) -> Battle:
        """Create a ready-to-play battle.

        Args:
            weapon_type: Weapon for the warrior
            armor_type: Armor for the warrior
            opponent_type: Opponent variant to fight
            environment_type: Battlefield variant

        Returns:
            A Battle awaiting the first action

        Raises:
            ValueError: If any of the types is unknown
        """
        player = self.create_warrior(weapon_type, armor_type)
        opponent = Opponent.from_type(opponent_type)
        environment = Environment.from_type(environment_type)
        return Battle(player, opponent, environment, logger=logger)

    def create_default_battle(self) -> Battle:
        """Create a battle from the configured selections."""
        return self.create_battle(
            self.settings.weapon,
            self.settings.armor,
            self.settings.opponent,
            self.settings.environment,
        )

    def fight(
        self,
        battle: Battle,
        policy: ActionPolicy | str,
        max_turns: int | None = None,
    ) -> BattleResult:
        """Run a battle to completion and record it in the session stats."""
        choose_action = get_policy(policy) if isinstance(policy, str) else policy

        _log.info(
            "Battle starts: %s vs %s at %s",
            battle.player.name,
            battle.opponent.name,
            battle.environment.name,
        )
        result = battle.run(choose_action, max_turns=max_turns)
        self.stats.record_battle(result)
        return result
