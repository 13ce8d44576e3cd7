"""Battle logging system for tracking and reporting engine output.

Provides:
- Running totals of damage dealt/taken and action counts, read once at
  battle end to build the BattleResult
- A structured log of every turn event with before/after state snapshots
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..models.enums import ActionType, Side
from ..models.environments import StatDelta


class LogEventType(str, Enum):
    """Types of log events."""

    # Battle lifecycle
    BATTLE_START = "battle_start"
    BATTLE_END = "battle_end"

    # Turn lifecycle
    TURN_START = "turn_start"
    TURN_ORDER = "turn_order"
    TURN_END = "turn_end"

    # Actions
    ACTION_EXECUTED = "action_executed"
    ACTION_REJECTED = "action_rejected"

    # End-of-turn environment
    ENVIRONMENT_APPLIED = "environment_applied"


@dataclass
class StateSnapshot:
    """Snapshot of a combatant's state at a point in time."""

    name: str
    side: Side
    current_hp: int
    max_hp: int
    attack: int
    defense: int
    speed: int
    is_charging: bool = False
    can_charge: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "side": self.side.value,
            "current_hp": self.current_hp,
            "max_hp": self.max_hp,
            "attack": self.attack,
            "defense": self.defense,
            "speed": self.speed,
            "is_charging": self.is_charging,
            "can_charge": self.can_charge,
        }


@dataclass
class LogEntry:
    """A single log entry representing a battle event."""

    event_type: LogEventType
    turn_number: int
    timestamp_order: int = 0  # Order within the battle for deterministic sorting

    # Event-specific data
    side: Side | None = None
    target_side: Side | None = None
    action_type: ActionType | None = None
    value: int | None = None
    defense_multiplier: float | None = None
    success: bool | None = None
    description: str | None = None
    reason: str | None = None

    # State before/after for action and environment events
    state_before: StateSnapshot | None = None
    state_after: StateSnapshot | None = None

    # Turn order (first side first)
    order: list[Side] | None = None

    # For state snapshots - both sides
    all_states: dict[Side, StateSnapshot] | None = None

    # Outcome info
    winner: Side | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {
            "event_type": self.event_type.value,
            "turn_number": self.turn_number,
            "timestamp_order": self.timestamp_order,
        }

        if self.side is not None:
            result["side"] = self.side.value
        if self.target_side is not None:
            result["target_side"] = self.target_side.value
        if self.action_type is not None:
            result["action_type"] = self.action_type.value
        if self.value is not None:
            result["value"] = self.value
        if self.defense_multiplier is not None:
            result["defense_multiplier"] = self.defense_multiplier
        if self.success is not None:
            result["success"] = self.success
        if self.description is not None:
            result["description"] = self.description
        if self.reason is not None:
            result["reason"] = self.reason
        if self.state_before is not None:
            result["state_before"] = self.state_before.to_dict()
        if self.state_after is not None:
            result["state_after"] = self.state_after.to_dict()
        if self.order is not None:
            result["order"] = [side.value for side in self.order]
        if self.all_states is not None:
            result["all_states"] = {side.value: state.to_dict() for side, state in self.all_states.items()}
        if self.winner is not None:
            result["winner"] = self.winner.value

        return result


@dataclass
class BattleLog:
    """Complete log of one battle."""

    label: str
    entries: list[LogEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "label": self.label,
            "entries": [entry.to_dict() for entry in self.entries],
        }

    def get_entries_by_type(self, event_type: LogEventType) -> list[LogEntry]:
        """Get all entries of a specific type."""
        return [e for e in self.entries if e.event_type == event_type]

    def get_entries_for_turn(self, turn_number: int) -> list[LogEntry]:
        """Get all entries for a specific turn."""
        return [e for e in self.entries if e.turn_number == turn_number]

    def format_readable(self) -> str:
        """Format the log in a human-readable format."""
        lines: list[str] = []
        lines.append(f"=== Battle Log ({self.label}) ===")

        current_turn = 0
        for entry in self.entries:
            if entry.turn_number != current_turn and entry.turn_number > 0:
                current_turn = entry.turn_number
                lines.append(f"\n--- Turn {current_turn} ---")
            lines.append(self._format_entry(entry))

        return "\n".join(lines)

    def _format_entry(self, entry: LogEntry) -> str:
        """Format a single log entry."""
        match entry.event_type:
            case LogEventType.BATTLE_START:
                return f"  {entry.description}"

            case LogEventType.TURN_START:
                return f"  Turn {entry.turn_number} begins"

            case LogEventType.TURN_ORDER:
                order = " -> ".join(side.value for side in entry.order or [])
                return f"    Order: {order}"

            case LogEventType.ACTION_EXECUTED:
                action = entry.action_type.value if entry.action_type else "?"
                actor = entry.state_before.name if entry.state_before else entry.side
                if entry.action_type == ActionType.ATTACK:
                    defended = " (defended)" if entry.defense_multiplier and entry.defense_multiplier < 1.0 else ""
                    return f"    {actor} attacks for {entry.value} damage{defended}"
                status = "" if entry.success is not False else " (failed)"
                return f"    {actor} uses {action}{status}"

            case LogEventType.ACTION_REJECTED:
                action = entry.action_type.value if entry.action_type else "?"
                return f"    x Action '{action}' rejected: {entry.reason}"

            case LogEventType.ENVIRONMENT_APPLIED:
                hp_change = ""
                if entry.state_before and entry.state_after:
                    if entry.state_before.current_hp != entry.state_after.current_hp:
                        hp_change = f" [HP: {entry.state_before.current_hp} -> {entry.state_after.current_hp}]"
                name = entry.state_before.name if entry.state_before else entry.side
                return f"    Environment on {name}: {entry.description}{hp_change}"

            case LogEventType.TURN_END:
                if entry.all_states:
                    state_lines = [
                        f"      {state.name}: HP={state.current_hp}/{state.max_hp}, "
                        f"ATK={state.attack}, DEF={state.defense}, SPD={state.speed}"
                        for state in entry.all_states.values()
                    ]
                    return f"  Turn {entry.turn_number} ends\n" + "\n".join(state_lines)
                return f"  Turn {entry.turn_number} ends"

            case LogEventType.BATTLE_END:
                winner = entry.winner.value.upper() if entry.winner else "?"
                return f"  *** WINNER: {winner} ***"

            case _:
                return f"    {entry.event_type.value}: {entry.description or ''}"


class BattleLogger:
    """Aggregates battle statistics and records structured events.

    Usage:
        logger = BattleLogger(label="Warrior vs Thief")
        battle = Battle(player, opponent, environment, logger=logger)
        # ... play turns ...
        print(logger.total_damage_dealt)
        print(logger.get_log().format_readable())
    """

    def __init__(self, label: str = "Battle") -> None:
        """Initialize an empty logger."""
        self.label = label
        self._log = BattleLog(label=label)
        self._order_counter = 0
        self._reset_counters()

    def _reset_counters(self) -> None:
        self.total_damage_dealt = 0
        self.total_damage_taken = 0
        self.environment_damage = 0
        self.player_attacks = 0
        self.player_defends = 0
        self.player_charges = 0
        self.opponent_attacks = 0

    def _next_order(self) -> int:
        """Get the next timestamp order value."""
        self._order_counter += 1
        return self._order_counter

    def get_log(self) -> BattleLog:
        """Get the complete battle log."""
        return self._log

    def clear(self) -> None:
        """Clear all log entries and counters."""
        self._log.entries.clear()
        self._order_counter = 0
        self._reset_counters()

    @staticmethod
    def snapshot_state(combatant: Any) -> StateSnapshot:
        """Create a snapshot from a Combatant."""
        return StateSnapshot(
            name=combatant.name,
            side=combatant.side,
            current_hp=combatant.current_hp,
            max_hp=combatant.max_hp,
            attack=combatant.total_attack,
            defense=combatant.total_defense,
            speed=combatant.total_speed,
            is_charging=combatant.is_charging,
            can_charge=combatant.can_charge,
        )

    def _snapshot_both(self, player: Any, opponent: Any) -> dict[Side, StateSnapshot]:
        return {
            Side.PLAYER: self.snapshot_state(player),
            Side.OPPONENT: self.snapshot_state(opponent),
        }

    def log_battle_start(self, player: Any, opponent: Any, environment_name: str) -> None:
        """Log the opening state of a battle."""
        self._log.entries.append(
            LogEntry(
                event_type=LogEventType.BATTLE_START,
                turn_number=0,
                timestamp_order=self._next_order(),
                description=f"{player.name} vs {opponent.name} at {environment_name}",
                all_states=self._snapshot_both(player, opponent),
            )
        )

    def log_turn_start(self, turn_number: int, player: Any, opponent: Any) -> None:
        """Log the start of a turn with initial state snapshot."""
        self._log.entries.append(
            LogEntry(
                event_type=LogEventType.TURN_START,
                turn_number=turn_number,
                timestamp_order=self._next_order(),
                all_states=self._snapshot_both(player, opponent),
            )
        )

    def log_turn_order(self, turn_number: int, order: list[Side]) -> None:
        """Log which side resolves first."""
        self._log.entries.append(
            LogEntry(
                event_type=LogEventType.TURN_ORDER,
                turn_number=turn_number,
                timestamp_order=self._next_order(),
                order=list(order),
            )
        )

    def log_action(
        self,
        turn_number: int,
        actor: Any,
        target: Any,
        action_type: ActionType,
        value: int,
        success: bool,
        state_before: StateSnapshot,
        defense_multiplier: float | None = None,
    ) -> None:
        """Log an executed action and update the running totals.

        Args:
            turn_number: Current turn
            actor: Combatant performing the action
            target: Combatant on the receiving end
            action_type: The action performed
            value: Damage dealt (0 for non-attacks)
            success: False for a charge that was not allowed
            state_before: Actor snapshot taken before the action
            defense_multiplier: Multiplier applied to an attack's damage
        """
        if actor.side is Side.PLAYER:
            match action_type:
                case ActionType.ATTACK:
                    self.total_damage_dealt += value
                    self.player_attacks += 1
                case ActionType.DEFEND:
                    self.player_defends += 1
                case ActionType.CHARGE:
                    if success:
                        self.player_charges += 1
        elif action_type == ActionType.ATTACK:
            self.total_damage_taken += value
            self.opponent_attacks += 1

        self._log.entries.append(
            LogEntry(
                event_type=LogEventType.ACTION_EXECUTED,
                turn_number=turn_number,
                timestamp_order=self._next_order(),
                side=actor.side,
                target_side=target.side,
                action_type=action_type,
                value=value,
                defense_multiplier=defense_multiplier,
                success=success,
                state_before=state_before,
                state_after=self.snapshot_state(actor),
            )
        )

    def log_action_rejected(self, turn_number: int, action_type: ActionType, reason: str) -> None:
        """Log an action submission that was refused before resolution."""
        self._log.entries.append(
            LogEntry(
                event_type=LogEventType.ACTION_REJECTED,
                turn_number=turn_number,
                timestamp_order=self._next_order(),
                side=Side.PLAYER,
                action_type=action_type,
                success=False,
                reason=reason,
            )
        )

    def log_environment_effect(
        self,
        turn_number: int,
        combatant: Any,
        delta: StatDelta,
        state_before: StateSnapshot,
    ) -> None:
        """Log an environment effect applied to a combatant."""
        state_after = self.snapshot_state(combatant)
        hp_lost = state_before.current_hp - state_after.current_hp
        if combatant.side is Side.PLAYER and hp_lost > 0:
            self.environment_damage += hp_lost

        self._log.entries.append(
            LogEntry(
                event_type=LogEventType.ENVIRONMENT_APPLIED,
                turn_number=turn_number,
                timestamp_order=self._next_order(),
                side=combatant.side,
                value=hp_lost,
                description=delta.describe(),
                state_before=state_before,
                state_after=state_after,
            )
        )

    def log_turn_end(self, turn_number: int, player: Any, opponent: Any) -> None:
        """Log the end of a turn with final state snapshot."""
        self._log.entries.append(
            LogEntry(
                event_type=LogEventType.TURN_END,
                turn_number=turn_number,
                timestamp_order=self._next_order(),
                all_states=self._snapshot_both(player, opponent),
            )
        )

    def log_battle_end(self, turn_number: int, winner: Side) -> None:
        """Log the winner determination."""
        self._log.entries.append(
            LogEntry(
                event_type=LogEventType.BATTLE_END,
                turn_number=turn_number,
                timestamp_order=self._next_order(),
                winner=winner,
            )
        )
