"""Session statistics accumulated across battles."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..engine.battle import BattleResult


@dataclass
class GameStats:
    """Running totals for a play session."""

    total_games: int = 0
    victories: int = 0
    defeats: int = 0
    total_turns: int = 0
    total_play_time_ms: int = 0
    total_damage_dealt: int = 0
    total_damage_taken: int = 0

    def record_battle(self, result: "BattleResult") -> None:
        """Record a completed battle and update statistics."""
        self.total_games += 1
        self.total_turns += result.turns_elapsed
        self.total_play_time_ms += result.duration_ms
        self.total_damage_dealt += result.total_damage_dealt
        self.total_damage_taken += result.total_damage_taken

        if result.player_victory:
            self.victories += 1
        else:
            self.defeats += 1

    @property
    def win_rate(self) -> float:
        """Win rate as a percentage (0 when no games were played)."""
        if self.total_games == 0:
            return 0.0
        return self.victories / self.total_games * 100

    @property
    def average_turns(self) -> float:
        if self.total_games == 0:
            return 0.0
        return self.total_turns / self.total_games

    @property
    def average_play_time_seconds(self) -> float:
        if self.total_games == 0:
            return 0.0
        return self.total_play_time_ms / self.total_games / 1000.0

    @property
    def damage_ratio(self) -> float | None:
        """Overall damage dealt per point taken, or None if nothing was taken."""
        if self.total_damage_taken == 0:
            return None
        return self.total_damage_dealt / self.total_damage_taken

    def summary_lines(self) -> list[str]:
        """Format the session statistics for display."""
        if self.total_games == 0:
            return ["No battles fought yet!"]

        lines = [
            f"Games Played: {self.total_games}",
            f"Victories: {self.victories}",
            f"Defeats: {self.defeats}",
            f"Win Rate: {self.win_rate:.1f}%",
            f"Average Battle Time: {self.average_play_time_seconds:.1f} seconds",
            f"Average Turns per Battle: {self.average_turns:.1f}",
            f"Total Damage Dealt: {self.total_damage_dealt}",
            f"Total Damage Taken: {self.total_damage_taken}",
        ]
        ratio = self.damage_ratio
        if ratio is not None:
            lines.append(f"Overall Damage Ratio: {ratio:.2f}")
        return lines
