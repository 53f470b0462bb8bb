"""Items carried by a player."""

from __future__ import annotations

from typing import Iterator, Optional

from .item import Item

NOT_IN_INVENTORY = "\nItem was not in your inventory\n"


class Inventory:
    """An ordered collection of carried items."""

    def __init__(self, items=None) -> None:
        self.items: list[Item] = list(items) if items is not None else []

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def find(self, keyword: str) -> Optional[Item]:
        """Return the first item matching ``keyword``, or None."""
        return next((item for item in self.items if item.has_keyword(keyword)), None)

    def names(self) -> list[str]:
        return [item.short_desc for item in self.items]

    def item_name(self, keyword: str) -> str:
        """Short description of the matching item; KeyError if absent."""
        item = self.find(keyword)
        if item is None:
            raise KeyError(keyword)
        return item.short_desc

    def describe(self) -> str:
        """Text listing of the inventory's contents."""
        text = "\nYour inventory contains: \n"
        if not self.items:
            return text
        text += "".join(f" - {item.short_desc}\n" for item in self.items)
        return text + "\n"

    def remove_item(self, keyword: str) -> str:
        """Remove the first matching item and report what happened."""
        item = self.find(keyword)
        if item is None:
            return NOT_IN_INVENTORY
        self.items.remove(item)
        return f"\n{item.short_desc} was removed from your inventory\n"

    def item_description(self, keyword: str) -> str:
        """Long description of the matching item; KeyError if absent."""
        item = self.find(keyword)
        if item is None:
            raise KeyError(keyword)
        return item.long_desc

    def use_item(self, keyword: str) -> str:
        """Use up the matching item, removing it from the inventory."""
        return "\n" + self.remove_item(keyword) + " and used. \n"

    def copy(self) -> Inventory:
        """Return a new inventory holding the same items."""
        return Inventory(self.items)