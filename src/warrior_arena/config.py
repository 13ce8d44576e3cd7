"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .engine.combatant import WARRIOR_BASE_ATTACK, WARRIOR_BASE_DEFENSE, WARRIOR_BASE_HP, WARRIOR_BASE_SPEED
from .models.enums import ArmorType, EnvironmentType, OpponentType, WeaponType


class WarriorStats(BaseModel):
    """Base stats of the player's warrior before equipment."""

    hp: int = Field(default=WARRIOR_BASE_HP, gt=0)
    attack: int = WARRIOR_BASE_ATTACK
    defense: int = WARRIOR_BASE_DEFENSE
    speed: int = WARRIOR_BASE_SPEED


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    debug: bool = False

    # Battle setup for automated runs
    weapon: WeaponType = WeaponType.DAGGER
    armor: ArmorType = ArmorType.LIGHT
    opponent: OpponentType = OpponentType.THIEF
    environment: EnvironmentType = EnvironmentType.NEUTRAL
    policy: str = "charge_then_attack"  # "always_attack" or "charge_then_attack"
    max_turns: int = Field(default=1000, gt=0)  # Safety cap for automated runs

    # Print the full structured battle log after the result
    show_combat_log: bool = False

    # Warrior balance (WARRIOR__HP, WARRIOR__ATTACK, ...)
    warrior: WarriorStats = Field(default_factory=WarriorStats)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
