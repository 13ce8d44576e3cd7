"""Battle engine - orchestrates a battle from first turn to result."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..models.enums import ActionType, BattlePhase, Side
from .combatant import Combatant
from .environment import Environment
from .logging import BattleLogger
from .turn import TurnResolver
from .types import BattleContext, TurnResult

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BattleResult:
    """Final record of a finished battle. Produced exactly once."""

    player_victory: bool
    outcome: str  # "VICTORY" or "DEFEAT"
    turns_elapsed: int
    duration_ms: int
    final_player_hp: int
    final_opponent_hp: int
    total_damage_dealt: int
    total_damage_taken: int

    @property
    def damage_ratio(self) -> float:
        """Damage dealt per point taken (dealt itself when nothing was taken)."""
        if self.total_damage_taken > 0:
            return self.total_damage_dealt / self.total_damage_taken
        return float(self.total_damage_dealt)


@dataclass(frozen=True)
class BattleStatus:
    """Read-only view of a battle between turns."""

    turn_number: int
    phase: BattlePhase
    environment_name: str
    player_name: str
    player_hp: int
    player_max_hp: int
    opponent_name: str
    opponent_hp: int
    opponent_max_hp: int
    player_is_charging: bool
    player_can_charge: bool


@dataclass
class ActionResult:
    """Result of submitting an action to the battle."""

    success: bool
    message: str
    turn_result: TurnResult | None = None
    battle_result: BattleResult | None = None


ActionChooser = Callable[["Battle"], ActionType]


class Battle:
    """Turn-based battle between the player and one opponent.

    The battle is a state machine:
    AWAITING_ACTIONS -> RESOLVING_ACTIONS -> APPLYING_ENVIRONMENT ->
    CHECKING_TERMINATION -> AWAITING_ACTIONS (or FINISHED).
    """

    def __init__(
        self,
        player: Combatant,
        opponent: Combatant,
        environment: Environment,
        logger: BattleLogger | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if player.side is not Side.PLAYER or opponent.side is not Side.OPPONENT:
            raise ValueError("Battle needs a player-side and an opponent-side combatant")

        self.player = player
        self.opponent = opponent
        self.environment = environment
        self.logger = logger if logger is not None else BattleLogger(label=f"{player.name} vs {opponent.name}")
        self.turn_resolver = TurnResolver(logger=self.logger)
        self._context = BattleContext(player=player, opponent=opponent, environment=environment)
        self._clock = clock
        self._phase = BattlePhase.AWAITING_ACTIONS
        self._started_at: float | None = None
        self._result: BattleResult | None = None

        self.logger.log_battle_start(player, opponent, environment.name)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def phase(self) -> BattlePhase:
        return self._phase

    @property
    def turn_number(self) -> int:
        """Number of turns resolved so far."""
        return self._context.current_turn

    @property
    def is_finished(self) -> bool:
        return self._phase == BattlePhase.FINISHED

    @property
    def result(self) -> BattleResult | None:
        """The final result, once the battle is finished."""
        return self._result

    def available_actions(self) -> list[ActionType]:
        """Actions the player may submit for the next turn."""
        if self.is_finished:
            return []
        return self.player.available_actions()

    def status(self) -> BattleStatus:
        """Get the current state of the battle."""
        return BattleStatus(
            turn_number=self.turn_number,
            phase=self._phase,
            environment_name=self.environment.name,
            player_name=self.player.name,
            player_hp=self.player.current_hp,
            player_max_hp=self.player.max_hp,
            opponent_name=self.opponent.name,
            opponent_hp=self.opponent.current_hp,
            opponent_max_hp=self.opponent.max_hp,
            player_is_charging=self.player.is_charging,
            player_can_charge=self.player.can_charge,
        )

    # ------------------------------------------------------------------
    # Turn loop
    # ------------------------------------------------------------------

    def submit_action(self, action: ActionType) -> ActionResult:
        """Submit the player's action and resolve one full turn.

        Args:
            action: Action declared by the player

        Returns:
            ActionResult with the turn result, and the battle result if the
            battle ended this turn
        """
        try:
            action_type: ActionType | None = ActionType(action)
        except ValueError:
            action_type = None

        reason = None
        if self.is_finished:
            reason = "Battle is already finished"
        elif action_type is None:
            reason = f"Unknown action: {action}"
        elif action_type not in self.available_actions():
            reason = f"{action_type.value.capitalize()} is not available"

        if reason is not None:
            if action_type is not None:
                self.logger.log_action_rejected(self.turn_number + 1, action_type, reason)
            return ActionResult(success=False, message=reason)

        action = action_type

        if self._started_at is None:
            self._started_at = self._clock()

        self._context.current_turn += 1

        self._phase = BattlePhase.RESOLVING_ACTIONS
        turn_result = self.turn_resolver.resolve_actions(self._context, action)

        self._phase = BattlePhase.APPLYING_ENVIRONMENT
        self.turn_resolver.apply_environment(self._context, turn_result)

        self._phase = BattlePhase.CHECKING_TERMINATION
        self.turn_resolver.finish_turn(self._context, turn_result)

        if not turn_result.is_battle_over:
            self._phase = BattlePhase.AWAITING_ACTIONS
            return ActionResult(success=True, message="Turn resolved", turn_result=turn_result)

        self._phase = BattlePhase.FINISHED
        self._result = self._build_result()
        _log.info(
            "Battle finished: %s in %d turns (%s %d HP, %s %d HP)",
            self._result.outcome,
            self._result.turns_elapsed,
            self.player.name,
            self._result.final_player_hp,
            self.opponent.name,
            self._result.final_opponent_hp,
        )
        return ActionResult(
            success=True,
            message="Battle finished",
            turn_result=turn_result,
            battle_result=self._result,
        )

    def run(self, choose_action: ActionChooser, max_turns: int | None = None) -> BattleResult:
        """Drive the battle to completion.

        Args:
            choose_action: Called once per turn with this battle, returns the
                player's action
            max_turns: Optional cap on the number of turns

        Returns:
            The final BattleResult

        Raises:
            ValueError: If choose_action returns an unavailable action
            RuntimeError: If the battle is still running after max_turns
        """
        while self._result is None:
            if max_turns is not None and self.turn_number >= max_turns:
                raise RuntimeError(f"Battle did not finish within {max_turns} turns")

            action = choose_action(self)
            response = self.submit_action(action)
            if not response.success:
                raise ValueError(f"Invalid action {action!r}: {response.message}")

        return self._result

    def _build_result(self) -> BattleResult:
        """Determine the battle outcome from the final state and logger totals."""
        player_won = self.player.is_alive()
        started = self._started_at if self._started_at is not None else self._clock()
        duration_ms = max(0, round((self._clock() - started) * 1000))

        return BattleResult(
            player_victory=player_won,
            outcome="VICTORY" if player_won else "DEFEAT",
            turns_elapsed=self.turn_number,
            duration_ms=duration_ms,
            final_player_hp=self.player.current_hp,
            final_opponent_hp=self.opponent.current_hp,
            total_damage_dealt=self.logger.total_damage_dealt,
            total_damage_taken=self.logger.total_damage_taken,
        )
