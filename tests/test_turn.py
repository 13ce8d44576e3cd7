"""Tests for turn ordering and turn resolution."""

import pytest

from warrior_arena.engine.combatant import Warrior
from warrior_arena.engine.logging import BattleLogger, LogEventType
from warrior_arena.engine.turn import TurnResolver, determine_execution_order
from warrior_arena.engine.types import BattleContext, ExecutionOrder
from warrior_arena.models.enums import ActionType, Side


class TestExecutionOrder:
    """Tests for determine_execution_order."""

    @pytest.mark.parametrize(("player_speed", "opponent_speed"), [(1, 100), (50, 50), (100, 1)])
    def test_defend_always_first(self, player_speed, opponent_speed):
        """Defend resolves first regardless of speed."""
        order = determine_execution_order(ActionType.DEFEND, player_speed, opponent_speed)
        assert order == ExecutionOrder(first=Side.PLAYER, second=Side.OPPONENT)
        assert order.player_first

    @pytest.mark.parametrize("action", [ActionType.ATTACK, ActionType.CHARGE])
    def test_faster_player_first(self, action):
        """The strictly faster player goes first."""
        assert determine_execution_order(action, 45, 40).player_first

    @pytest.mark.parametrize("action", [ActionType.ATTACK, ActionType.CHARGE])
    def test_faster_opponent_first(self, action):
        """The strictly faster opponent goes first."""
        order = determine_execution_order(action, 5, 40)
        assert order.first is Side.OPPONENT
        assert list(order) == [Side.OPPONENT, Side.PLAYER]

    def test_tie_goes_to_player(self):
        """Equal speed resolves in favor of the player, every time."""
        orders = {determine_execution_order(ActionType.ATTACK, 30, 30) for _ in range(10)}
        assert orders == {ExecutionOrder(first=Side.PLAYER, second=Side.OPPONENT)}


class TestTurnResolver:
    """Tests for TurnResolver."""

    def setup_method(self):
        """Set up test fixtures."""
        self.resolver = TurnResolver()

    def test_scenario_attack_turn(self, warrior, thief, arena):
        """Warrior (SPD 45) acts before Thief (SPD 40): 1 damage dealt, 0 taken."""
        context = BattleContext(player=warrior, opponent=thief, environment=arena, current_turn=1)

        result = self.resolver.resolve_turn(context, ActionType.ATTACK)

        assert result.turn_number == 1
        assert result.order.player_first
        assert [a.side for a in result.actions] == [Side.PLAYER, Side.OPPONENT]
        assert result.get_action(Side.PLAYER).damage == 1
        assert result.get_action(Side.OPPONENT).damage == 0
        assert thief.current_hp == 149
        assert warrior.current_hp == 100
        assert not result.is_battle_over
        assert result.winner is None

    def test_defend_halves_opponent_attack(self, minotaur, arena):
        """A defending player takes half damage even when slower."""
        warrior = Warrior(speed=1)
        context = BattleContext(player=warrior, opponent=minotaur, environment=arena, current_turn=1)

        result = self.resolver.resolve_turn(context, ActionType.DEFEND)

        assert result.order.player_first
        opponent_action = result.get_action(Side.OPPONENT)
        assert opponent_action.defense_multiplier == 0.5
        assert opponent_action.damage == 19
        assert warrior.current_hp == 81
        assert minotaur.current_hp == 350

    def test_no_defend_full_damage(self, minotaur, arena):
        """Without defend the opponent hits at full multiplier."""
        warrior = Warrior(speed=1)
        context = BattleContext(player=warrior, opponent=minotaur, environment=arena, current_turn=1)

        result = self.resolver.resolve_turn(context, ActionType.CHARGE)

        assert result.order.first is Side.OPPONENT
        assert result.get_action(Side.OPPONENT).damage == 39
        assert result.get_action(Side.PLAYER).success
        assert warrior.is_charging

    def test_slower_player_acts_second(self, slow_warrior, thief, arena):
        """Opponent attacks first, then the surviving player attacks."""
        context = BattleContext(player=slow_warrior, opponent=thief, environment=arena, current_turn=1)

        result = self.resolver.resolve_turn(context, ActionType.ATTACK)

        assert [a.side for a in result.actions] == [Side.OPPONENT, Side.PLAYER]
        assert result.get_action(Side.PLAYER).damage == 21
        assert thief.current_hp == 129

    def test_dead_player_does_not_act(self, minotaur, swamp):
        """A player knocked out by a faster opponent neither acts nor feels the environment."""
        warrior = Warrior(max_hp=10, defense=0, speed=1)
        context = BattleContext(player=warrior, opponent=minotaur, environment=swamp, current_turn=1)

        result = self.resolver.resolve_turn(context, ActionType.ATTACK)

        assert [a.side for a in result.actions] == [Side.OPPONENT]
        assert minotaur.current_hp == 350
        assert warrior.current_hp == 0
        assert [e.side for e in result.environment_effects] == [Side.OPPONENT]
        assert minotaur.environment_attack_bonus == 1
        assert result.is_battle_over
        assert result.winner is Side.OPPONENT

    def test_dead_opponent_does_not_act(self, warrior, thief, swamp):
        """An opponent knocked out first neither attacks nor feels the environment."""
        thief.current_hp = 1
        context = BattleContext(player=warrior, opponent=thief, environment=swamp, current_turn=1)

        result = self.resolver.resolve_turn(context, ActionType.ATTACK)

        assert [a.side for a in result.actions] == [Side.PLAYER]
        assert thief.current_hp == 0
        assert thief.environment_attack_bonus == 0
        assert warrior.current_hp == 99
        assert result.winner is Side.PLAYER

    def test_double_knockout_is_opponent_win(self, warrior, thief, swamp):
        """Player lands the final blow, then the swamp drains the last HP: opponent wins."""
        warrior.current_hp = 1
        thief.current_hp = 1
        context = BattleContext(player=warrior, opponent=thief, environment=swamp, current_turn=1)

        result = self.resolver.resolve_turn(context, ActionType.ATTACK)

        assert warrior.current_hp == 0
        assert thief.current_hp == 0
        assert result.is_battle_over
        assert result.winner is Side.OPPONENT

    def test_environment_applied_player_first(self, warrior, thief, colosseum):
        """Environment hits the player, then the opponent."""
        context = BattleContext(player=warrior, opponent=thief, environment=colosseum, current_turn=1)

        result = self.resolver.resolve_turn(context, ActionType.DEFEND)

        assert [e.side for e in result.environment_effects] == [Side.PLAYER, Side.OPPONENT]
        assert warrior.total_attack == 22
        assert thief.total_defense == 19

    def test_logger_receives_events(self, warrior, thief, arena):
        """The resolver reports turn, order, action, environment and end events."""
        logger = BattleLogger()
        resolver = TurnResolver(logger=logger)
        context = BattleContext(player=warrior, opponent=thief, environment=arena, current_turn=1)

        resolver.resolve_turn(context, ActionType.ATTACK)

        event_types = [e.event_type for e in logger.get_log().entries]
        assert event_types == [
            LogEventType.TURN_START,
            LogEventType.TURN_ORDER,
            LogEventType.ACTION_EXECUTED,
            LogEventType.ACTION_EXECUTED,
            LogEventType.ENVIRONMENT_APPLIED,
            LogEventType.ENVIRONMENT_APPLIED,
            LogEventType.TURN_END,
        ]
        assert logger.total_damage_dealt == 1
        assert logger.total_damage_taken == 0
