"""Entry point for running an automated Warrior Arena battle."""

import logging
import sys

from warrior_arena.config import get_settings
from warrior_arena.services.arena import ArenaService


def main() -> int:
    """Run one battle from the configured selections."""
    settings = get_settings()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    service = ArenaService(settings)
    battle = service.create_default_battle()

    try:
        result = service.fight(battle, settings.policy, max_turns=settings.max_turns)
    except (RuntimeError, ValueError) as e:
        logging.error("Battle aborted: %s", e)
        return 1

    if settings.show_combat_log:
        print(battle.logger.get_log().format_readable())

    print(f"{result.outcome} after {result.turns_elapsed} turns")
    print(f"Remaining HP: {result.final_player_hp}/{battle.player.max_hp}")
    print(f"Damage Dealt: {result.total_damage_dealt}")
    print(f"Damage Taken: {result.total_damage_taken}")
    print(f"Damage Ratio: {result.damage_ratio:.2f}")
    for line in service.stats.summary_lines():
        logging.info(line)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
