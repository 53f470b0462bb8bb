"""Non-player characters."""

from __future__ import annotations

from .entity import Entity

DEFAULT_HEALTH = 10
DEFAULT_DAMAGE = 1


class NPC(Entity):
    """A non-player character with descriptions, keywords and an attack."""

    DEAD_DAMAGE = 0

    def __init__(self, npc_id: str) -> None:
        super().__init__(DEFAULT_HEALTH)
        self.npc_id = npc_id
        self.description = ""
        self.long_desc = ""
        self.short_desc = ""
        self.keywords: list[str] = []
        self.base_damage = DEFAULT_DAMAGE

    def __repr__(self) -> str:
        return f"NPC({self.npc_id!r}, health={self.health})"

    def add_keyword(self, keyword: str) -> None:
        self.keywords.append(keyword)

    def add_keywords(self, keywords) -> None:
        for keyword in keywords:
            self.add_keyword(keyword)

    def has_keyword(self, keyword: str) -> bool:
        """True if any keyword matches, ignoring case."""
        wanted = keyword.lower()
        return any(k.lower() == wanted for k in self.keywords)

    def remove_keyword(self, keyword: str) -> None:
        """Remove exact matches of ``keyword``; raise KeyError if none is known."""
        if not self.has_keyword(keyword):
            raise KeyError(f"keyword {keyword!r} does not exist")
        self.keywords = [k for k in self.keywords if k != keyword]

    def clear_keywords(self) -> None:
        self.keywords.clear()

    def attack_damage(self) -> int:
        """Damage dealt by this NPC; a dead NPC deals none."""
        return self.base_damage if self.is_alive() else self.DEAD_DAMAGE

    def copy(self) -> NPC:
        """Return a fresh NPC with the same data and full health."""
        clone = NPC(self.npc_id)
        clone.description = self.description
        clone.long_desc = self.long_desc
        clone.short_desc = self.short_desc
        clone.base_damage = self.attack_damage()
        clone.keywords = list(self.keywords)
        return clone