"""Resets that repopulate rooms with NPCs and items and set door states."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Sequence, Union

from .item import Item
from .library import DEFAULT_AREA_PATH, load_area
from .npc import NPC
from .room import Room

MISSING = "NULL"


def find_npc(npc_id: str, npcs: Iterable[NPC]) -> Optional[NPC]:
    """The first NPC with this id, or None."""
    return next((npc for npc in npcs if npc.npc_id == npc_id), None)


def find_room(room_id: str, rooms: Iterable[Room]) -> Optional[Room]:
    """The first room with this id, or None."""
    return next((room for room in rooms if room.room_id == room_id), None)


def find_item(item_id: str, items: Iterable[Item]) -> Optional[Item]:
    """The first item with this id, or None."""
    return next((item for item in items if item.item_id == item_id), None)


def rooms_with_door(room_id: str, rooms: Iterable[Room]) -> list[Room]:
    """Rooms holding a door with this id, once for every such door."""
    return [room for room in rooms for door in room.doors if door.door_id == room_id]


@dataclass
class NpcReset:
    """Places copies of an NPC in a room until ``limit`` of them are there."""

    room: Room
    npc: NPC
    limit: int

    def perform(self) -> None:
        if self.room.count_npcs_with_id(self.npc.npc_id) < self.limit:
            self.room.add_npc(self.npc.copy())


@dataclass
class ItemReset:
    """Places a copy of an item in a room."""

    room: Room
    item: Item

    def perform(self) -> None:
        self.room.add_item(self.item.copy())


@dataclass
class DoorReset:
    """Sets the state of a room's doors."""

    room: Room
    door_number: int
    state: str

    def perform(self) -> None:
        self.room.set_door_state(self.door_number, self.state)


Reset = Union[NpcReset, ItemReset, DoorReset]


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None or isinstance(value, (list, dict)):
        raise ValueError(f"expected a scalar, got {value!r}")
    return str(value)


def _required(entry: Any, key: str) -> str:
    value = entry.get(key) if isinstance(entry, dict) else None
    if value is None or isinstance(value, (list, dict)):
        raise ValueError(f"reset field {key!r} must be a scalar")
    return _text(value)


def _optional(entry: Any, key: str) -> str:
    if not isinstance(entry, dict) or entry.get(key) is None:
        return MISSING
    return _text(entry[key])


def _number(text: str, key: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(f"reset field {key!r} is not a number: {text!r}") from None


class ResetLibrary:
    """The resets of an area."""

    def __init__(self, resets: Optional[Iterable[Reset]] = None) -> None:
        self.resets: list[Reset] = list(resets) if resets is not None else []

    def __len__(self) -> int:
        return len(self.resets)

    def __iter__(self) -> Iterator[Reset]:
        return iter(self.resets)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path] = DEFAULT_AREA_PATH,
        npcs: Sequence[NPC] = (),
        rooms: Sequence[Room] = (),
        items: Sequence[Item] = (),
    ) -> ResetLibrary:
        """Build the resets from the RESETS section of an area file."""
        return cls.from_data(load_area(path), npcs, rooms, items)

    @classmethod
    def from_data(
        cls,
        data: dict,
        npcs: Sequence[NPC],
        rooms: Sequence[Room],
        items: Sequence[Item],
    ) -> ResetLibrary:
        """Build the resets from an already loaded area mapping.

        Resets naming unknown rooms, NPCs or items are left out.
        """
        library = cls()
        entries = data.get("RESETS")
        if not isinstance(entries, list):
            return library
        for entry in entries:
            action = _required(entry, "action")
            reset_id = _required(entry, "id")
            limit = _optional(entry, "limit")
            room_id = _optional(entry, "room")
            state = _optional(entry, "state")

            if action == "npc":
                room = find_room(room_id, rooms)
                npc = find_npc(reset_id, npcs)
                if room is not None and npc is not None:
                    library.resets.append(NpcReset(room, npc, _number(limit, "limit")))
            elif action == "object":
                room = find_room(room_id, rooms)
                item = find_item(reset_id, items)
                if room is not None and item is not None:
                    library.resets.append(ItemReset(room, item))
            elif action == "door":
                for affected in rooms_with_door(room_id, rooms):
                    library.resets.append(
                        DoorReset(affected, _number(reset_id, "id"), state)
                    )
        return library