"""Rooms of the game world and the doors that join them."""

from __future__ import annotations

from typing import Iterable, Optional

from .item import Item
from .npc import NPC

NO_ID = "no_id"
NO_DIR = "no_dir"
NO_DESC = "no_desc"
NO_NAME = "no_name"
NO_EXT_DESC = "no_extDesc"
OBJECT_NOT_FOUND = "Object not found!"


def _same_text(a: str, b: str) -> bool:
    return a.lower() == b.lower()


class Door:
    """An exit from one room that leads to another.

    A door built with a direction has that direction as its first keyword.
    """

    def __init__(
        self,
        door_id: str = NO_ID,
        direction: Optional[str] = None,
        description: str = NO_DESC,
        leads_to: Optional[Room] = None,
    ) -> None:
        self.door_id = door_id
        self.direction = NO_DIR if direction is None else direction
        self.description = description
        self.leads_to = leads_to
        self.state = ""
        self.keywords: list[str] = [] if direction is None else [direction]

    def __repr__(self) -> str:
        return f"Door({self.door_id!r}, {self.direction!r})"

    def add_keyword(self, keyword: str) -> None:
        self.keywords.append(keyword)

    def add_keywords(self, keywords: Iterable[str]) -> None:
        for keyword in keywords:
            self.add_keyword(keyword)

    def has_keyword(self, keyword: str) -> bool:
        """True if any keyword matches, ignoring case."""
        return any(_same_text(keyword, k) for k in self.keywords)

    def copy(self) -> Door:
        """Return a new door with the same data, leading to the same room."""
        clone = Door(self.door_id, None, self.description, self.leads_to)
        clone.direction = self.direction
        clone.keywords = list(self.keywords)
        return clone

    def _matches(self, keyword: str) -> bool:
        if self.has_keyword(keyword):
            return True
        return self.leads_to is not None and self.leads_to.has_keyword(keyword)


class Room:
    """A location holding doors, NPCs, items and users.

    A room built with a name has that name as its first keyword.
    """

    def __init__(
        self,
        room_id: str = NO_ID,
        name: Optional[str] = None,
        description: str = NO_DESC,
        ext_description: str = NO_EXT_DESC,
    ) -> None:
        self.room_id = room_id
        self.name = NO_NAME if name is None else name
        self.description = description
        self.ext_description = ext_description
        self.keywords: list[str] = [] if name is None else [name]
        self.doors: list[Door] = []
        self.npcs: list[NPC] = []
        self.items: list[Item] = []
        self.users: list = []

    def __repr__(self) -> str:
        return f"Room({self.room_id!r}, {self.name!r})"

    # keywords

    def add_keyword(self, keyword: str) -> None:
        self.keywords.append(keyword)

    def add_keywords(self, keywords: Iterable[str]) -> None:
        for keyword in keywords:
            self.add_keyword(keyword)

    def remove_keyword(self, keyword: str) -> None:
        """Remove every keyword equal to ``keyword``, ignoring case."""
        self.keywords = [k for k in self.keywords if not _same_text(keyword, k)]

    def has_keyword(self, keyword: str) -> bool:
        """True if any keyword matches, ignoring case."""
        return any(_same_text(keyword, k) for k in self.keywords)

    # lookups

    def find_npc(self, keyword: str) -> Optional[NPC]:
        """First NPC answering to ``keyword``, or None."""
        return next((npc for npc in self.npcs if npc.has_keyword(keyword)), None)

    def find_entity(self, name: str):
        """A user with exactly this name, else an NPC with this keyword, else None."""
        for user in self.users:
            if user.user_name == name:
                return user
        return self.find_npc(name)

    def object_keywords(self, name: str) -> list[str]:
        """Keywords of the first thing in the room that answers to ``name``."""
        if self.has_keyword(name):
            return list(self.keywords)
        for door in self.doors:
            if door._matches(name):
                return list(door.keywords)
        for npc in self.npcs:
            if npc.has_keyword(name):
                return list(npc.keywords)
        for item in self.items:
            if item.has_keyword(name):
                return list(item.keywords)
        return [OBJECT_NOT_FOUND]

    # doors

    def add_door(self, door_id: str, direction: str, description: str, leads_to) -> None:
        self.doors.append(Door(door_id, direction, description, leads_to))

    def set_door_state(self, door_number: int, state: str) -> None:
        """Set the state of the doors when ``door_number`` is this room's id."""
        for door in self.doors:
            if door_number == int(self.room_id):
                door.state = state

    # descriptions

    def exits_description(self) -> str:
        return "".join(f"Looking {d.direction}: {d.description}\n" for d in self.doors)

    def object_list(self) -> str:
        """Names of every exit, NPC, user and item in the room, one per line."""
        names = [d.leads_to.name for d in self.doors if d.leads_to is not None]
        names += [npc.short_desc for npc in self.npcs]
        names += [user.user_name for user in self.users]
        names += [item.short_desc for item in self.items]
        return "".join(f"{name}\n" for name in names)

    def look_around(self) -> str:
        text = "\n" + self.description + "\n"
        text += "".join(f"You see a {k} in the Room.\n" for k in self.keywords)
        text += "".join(f"You see {u.user_name} in the Room.\n" for u in self.users)
        text += "".join(f"You see {n.short_desc} in the Room.\n" for n in self.npcs)
        text += "".join(f"You see {i.short_desc} in the Room.\n" for i in self.items)
        return text + "\n"

    def look_at(self, name: str) -> str:
        """Describe whatever in the room answers to ``name``."""
        if self.has_keyword(name):
            return "\n" + self.ext_description + "\n"
        for door in self.doors:
            if door._matches(name):
                return "\n" + door.description + "\n"
        for npc in self.npcs:
            if npc.has_keyword(name):
                return "\n" + npc.description + "\n"
        for user in self.users:
            if _same_text(name, user.user_name):
                return "\n" + user.description + "\n"
        for item in self.items:
            if item.has_keyword(name):
                return "\n" + item.short_desc + "\n"
        return f'"{name}" not found!\n'

    # occupants

    def add_user(self, user) -> None:
        self.users.append(user)

    def remove_user(self, name: str) -> None:
        self.users = [u for u in self.users if not _same_text(name, u.user_name)]

    def transfer_user(self, name: str, destination: Room) -> None:
        """Move users with this name (ignoring case) into ``destination``."""
        staying = []
        for user in self.users:
            if _same_text(name, user.user_name):
                destination.add_user(user)
            else:
                staying.append(user)
        self.users = staying

    def add_npc(self, npc: NPC) -> None:
        self.npcs.append(npc)

    def remove_npc(self, npc_id: str) -> None:
        self.npcs = [npc for npc in self.npcs if npc.npc_id != npc_id]

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def remove_item(self, item_id: str) -> None:
        self.items = [item for item in self.items if item.item_id != item_id]

    def has_item(self, item_id: str) -> bool:
        return any(item.item_id == item_id for item in self.items)

    def count_npcs_with_id(self, npc_id: str) -> int:
        return sum(1 for npc in self.npcs if npc.npc_id == npc_id)

    def broadcast(self, sender, message: str) -> None:
        """Send ``message`` to every user in the room except ``sender``."""
        for user in self.users:
            if user is not sender:
                user.notify(message)

    def copy(self) -> Room:
        """Return a room with the same data, keywords and doors."""
        clone = Room(self.room_id, None, self.description, self.ext_description)
        clone.name = self.name
        clone.keywords = list(self.keywords)
        clone.doors = list(self.doors)
        return clone