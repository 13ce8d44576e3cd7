"""Turn resolver - decides action order and resolves one full turn."""

import logging
from typing import TYPE_CHECKING

from ..models.enums import ActionType, Side
from .combatant import Combatant
from .types import ActionOutcome, BattleContext, EnvironmentOutcome, ExecutionOrder, TurnResult

if TYPE_CHECKING:
    from .logging import BattleLogger

_log = logging.getLogger(__name__)


def determine_execution_order(
    player_action: ActionType,
    player_speed: int,
    opponent_speed: int,
) -> ExecutionOrder:
    """Decide which side resolves first.

    Defend always goes first. Otherwise the faster side goes first, and the
    player wins speed ties.
    """
    if player_action == ActionType.DEFEND or player_speed >= opponent_speed:
        return ExecutionOrder(first=Side.PLAYER, second=Side.OPPONENT)
    return ExecutionOrder(first=Side.OPPONENT, second=Side.PLAYER)


class TurnResolver:
    """Resolves a complete turn for the player and the opponent."""

    def __init__(self, logger: "BattleLogger | None" = None) -> None:
        self.logger = logger

    def resolve_turn(self, context: BattleContext, player_action: ActionType) -> TurnResult:
        """Resolve a complete turn.

        Turn flow:
        1. Determine execution order
        2. Each side acts in order while both are alive
        3. Environment effects hit every surviving combatant, player first
        4. Player charge availability refreshes
        5. Check win condition

        Args:
            context: Battle context with both combatants and the environment
            player_action: The action the player declared

        Returns:
            TurnResult with actions, environment effects and winner if any
        """
        result = self.resolve_actions(context, player_action)
        self.apply_environment(context, result)
        self.finish_turn(context, result)
        return result

    def resolve_actions(self, context: BattleContext, player_action: ActionType) -> TurnResult:
        """Execute both sides' actions in speed/priority order."""
        player = context.player
        opponent = context.opponent

        if self.logger:
            self.logger.log_turn_start(context.current_turn, player, opponent)

        order = determine_execution_order(player_action, player.total_speed, opponent.total_speed)
        result = TurnResult(turn_number=context.current_turn, player_action=player_action, order=order)

        if self.logger:
            self.logger.log_turn_order(context.current_turn, list(order))

        _log.debug(
            "Turn %d: player %s, order %s (speed %d vs %d)",
            context.current_turn,
            player_action.value,
            order.first.value,
            player.total_speed,
            opponent.total_speed,
        )

        # Multiplier for damage the player receives this turn
        player_guard = 1.0

        for side in order:
            if not context.both_alive():
                break

            if side is Side.PLAYER:
                outcome = self._execute_player_action(context, player_action)
                if player_action == ActionType.DEFEND:
                    player_guard = outcome.defense_multiplier
            else:
                outcome = self._execute_attack(context, opponent, player, player_guard)

            result.actions.append(outcome)

        return result

    def apply_environment(self, context: BattleContext, result: TurnResult) -> None:
        """Apply environment effects to every combatant still alive."""
        for combatant in (context.player, context.opponent):
            if not combatant.is_alive():
                continue

            before = self.logger.snapshot_state(combatant) if self.logger else None
            delta = combatant.apply_environment_effect(context.environment)
            if self.logger and before is not None:
                self.logger.log_environment_effect(context.current_turn, combatant, delta, before)

            result.environment_effects.append(
                EnvironmentOutcome(side=combatant.side, delta=delta, hp_after=combatant.current_hp)
            )

    def finish_turn(self, context: BattleContext, result: TurnResult) -> None:
        """Refresh charge state and check for a winner."""
        context.player.update_charge_availability()

        winner = self.check_winner(context)
        if winner is not None:
            result.winner = winner
            result.is_battle_over = True

        if self.logger:
            self.logger.log_turn_end(context.current_turn, context.player, context.opponent)
            if winner is not None:
                self.logger.log_battle_end(context.current_turn, winner)

    def check_winner(self, context: BattleContext) -> Side | None:
        """Check if there's a winner.

        Returns the winning side, or None while both are standing.
        If both fall in the same turn the opponent wins.
        """
        if context.both_alive():
            return None
        if context.player.is_alive():
            return Side.PLAYER
        return Side.OPPONENT

    def _execute_player_action(self, context: BattleContext, action: ActionType) -> ActionOutcome:
        player = context.player
        opponent = context.opponent

        match action:
            case ActionType.ATTACK:
                return self._execute_attack(context, player, opponent, 1.0)

            case ActionType.DEFEND:
                before = self.logger.snapshot_state(player) if self.logger else None
                multiplier = player.defend()
                if self.logger and before is not None:
                    self.logger.log_action(context.current_turn, player, opponent, action, 0, True, before)
                return ActionOutcome(side=Side.PLAYER, action_type=action, defense_multiplier=multiplier)

            case ActionType.CHARGE:
                before = self.logger.snapshot_state(player) if self.logger else None
                success = player.charge()
                if self.logger and before is not None:
                    self.logger.log_action(context.current_turn, player, opponent, action, 0, success, before)
                return ActionOutcome(side=Side.PLAYER, action_type=action, success=success)

            case _:
                raise ValueError(f"Unknown action type: {action}")

    def _execute_attack(
        self,
        context: BattleContext,
        attacker: Combatant,
        target: Combatant,
        defense_multiplier: float,
    ) -> ActionOutcome:
        before = self.logger.snapshot_state(attacker) if self.logger else None
        damage = attacker.attack(target, defense_multiplier)

        if self.logger and before is not None:
            self.logger.log_action(
                context.current_turn,
                attacker,
                target,
                ActionType.ATTACK,
                damage,
                True,
                before,
                defense_multiplier=defense_multiplier,
            )

        _log.debug("%s hits %s for %d (HP left %d)", attacker.name, target.name, damage, target.current_hp)

        return ActionOutcome(
            side=attacker.side,
            action_type=ActionType.ATTACK,
            damage=damage,
            defense_multiplier=defense_multiplier,
            target_hp_after=target.current_hp,
        )
