"""Objects that can lie in rooms and be carried."""

from __future__ import annotations

from dataclasses import dataclass, field

BOOST_DAMAGE = 1


@dataclass
class Item:
    """A game object with descriptions and case-insensitive keywords."""

    item_id: str
    long_desc: str = ""
    short_desc: str = ""
    extra_desc: str = ""
    keywords: list[str] = field(default_factory=list)
    boost: int = BOOST_DAMAGE

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

    def copy(self) -> Item:
        """Return a new item with the same id, descriptions and keywords."""
        return Item(
            self.item_id,
            long_desc=self.long_desc,
            short_desc=self.short_desc,
            keywords=list(self.keywords),
        )