"""Living things that have health."""

from __future__ import annotations


class Entity:
    """Something with health bounded between a minimum and a maximum."""

    MIN_HEALTH = 0

    def __init__(self, max_health: int) -> None:
        self.max_health = max_health
        self._health = max_health
        self.health = max_health

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        self._health = max(self.MIN_HEALTH, min(value, self.max_health))

    def damage(self, amount: int) -> None:
        """Reduce health by ``amount``, never below the minimum."""
        self.health = self.health - amount

    def heal(self, amount: int) -> None:
        """Increase health by ``amount``, never above the maximum."""
        self.health = self.health + amount

    def is_alive(self) -> bool:
        return self.health > self.MIN_HEALTH