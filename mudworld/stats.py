"""Ability statistics carried by players."""

from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_STRENGTH = 1
DEFAULT_DEFENSE = 1
DEFAULT_INTELLIGENCE = 1
DEFAULT_DEXTERITY = 1
DEFAULT_CHARISMA = 1


@dataclass
class AbilityStats:
    """The five ability scores of a character."""

    strength: int = DEFAULT_STRENGTH
    defense: int = DEFAULT_DEFENSE
    intelligence: int = DEFAULT_INTELLIGENCE
    dexterity: int = DEFAULT_DEXTERITY
    charisma: int = DEFAULT_CHARISMA

    def level_up(self) -> None:
        """Raise every ability score by one."""
        self.strength += 1
        self.defense += 1
        self.intelligence += 1
        self.dexterity += 1
        self.charisma += 1

    def copy(self) -> AbilityStats:
        """Return an independent copy of these stats."""
        return replace(self)