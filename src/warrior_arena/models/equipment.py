"""Weapon and armor definitions."""

from dataclasses import dataclass

from .enums import ArmorType, WeaponType


@dataclass(frozen=True)
class Weapon:
    """Weapon equipment - adds attack, may cost speed."""

    weapon_type: WeaponType
    name: str
    attack_bonus: int
    speed_penalty: int  # Zero or negative
    description: str = ""

    def describe(self) -> str:
        """One-line summary of the weapon's modifiers."""
        speed_text = "No speed penalty" if self.speed_penalty == 0 else f"{self.speed_penalty} Speed"
        return f"+{self.attack_bonus} Attack, {speed_text}"


@dataclass(frozen=True)
class Armor:
    """Armor equipment - adds defense, costs speed."""

    armor_type: ArmorType
    name: str
    defense_bonus: int
    speed_penalty: int  # Zero or negative
    description: str = ""

    def describe(self) -> str:
        """One-line summary of the armor's modifiers."""
        return f"+{self.defense_bonus} Defense, {self.speed_penalty} Speed"


WEAPONS: dict[WeaponType, Weapon] = {
    WeaponType.DAGGER: Weapon(WeaponType.DAGGER, "Dagger", 20, 0, "Quick and precise strikes"),
    WeaponType.SWORD: Weapon(WeaponType.SWORD, "Sword", 30, -10, "Balanced offensive weapon"),
    WeaponType.BATTLE_AXE: Weapon(WeaponType.BATTLE_AXE, "Battle Axe", 40, -20, "Devastating but slow attacks"),
}

ARMORS: dict[ArmorType, Armor] = {
    ArmorType.LIGHT: Armor(ArmorType.LIGHT, "Light Armor", 20, -5, "Swift and agile protection"),
    ArmorType.MEDIUM: Armor(ArmorType.MEDIUM, "Medium Armor", 30, -15, "Balanced defense and mobility"),
    ArmorType.HEAVY: Armor(ArmorType.HEAVY, "Heavy Armor", 40, -25, "Maximum protection, reduced speed"),
}


def get_weapon(weapon_type: WeaponType | str) -> Weapon:
    """Look up a weapon by type or type value.

    Raises:
        ValueError: If the weapon type is unknown
    """
    try:
        return WEAPONS[WeaponType(weapon_type)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown weapon type: {weapon_type}") from None


def get_armor(armor_type: ArmorType | str) -> Armor:
    """Look up an armor by type or type value.

    Raises:
        ValueError: If the armor type is unknown
    """
    try:
        return ARMORS[ArmorType(armor_type)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown armor type: {armor_type}") from None
