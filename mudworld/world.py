"""The game world: rooms, content libraries and resets."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from .library import DEFAULT_AREA_PATH, ItemLibrary, NpcLibrary, RoomLibrary
from .npc import NPC
from .resets import Reset, ResetLibrary
from .room import Room
from .spells import DEFAULT_SPELLS_PATH, SpellLibrary

CANNOT_GO = "Cannot go there"
STARTING_ITEMS = ("3000", "3001")


class World:
    """All rooms of the game together with the libraries they are built from."""

    def __init__(
        self,
        rooms: Optional[Iterable[Room]] = None,
        npc_library: Optional[NpcLibrary] = None,
        item_library: Optional[ItemLibrary] = None,
        spell_library: Optional[SpellLibrary] = None,
        reset_library: Optional[ResetLibrary] = None,
    ) -> None:
        self.rooms: list[Room] = list(rooms) if rooms is not None else []
        self.npc_library = npc_library if npc_library is not None else NpcLibrary()
        self.item_library = item_library if item_library is not None else ItemLibrary()
        self.spell_library = spell_library if spell_library is not None else SpellLibrary()
        self.reset_library = reset_library if reset_library is not None else ResetLibrary()
        self.resets: list[Reset] = []
        self.current_room: Optional[Room] = None

    @classmethod
    def from_files(
        cls,
        area_path: Union[str, Path] = DEFAULT_AREA_PATH,
        spells_path: Union[str, Path] = DEFAULT_SPELLS_PATH,
    ) -> World:
        """Load an area and its spells, perform the resets and stock the first room."""
        rooms = RoomLibrary.from_file(area_path)
        npcs = NpcLibrary.from_file(area_path)
        items = ItemLibrary.from_file(area_path)
        spells = SpellLibrary.from_file(spells_path)
        resets = ResetLibrary.from_file(area_path, npcs.npcs, rooms.rooms, items.items)
        world = cls(rooms.rooms, npcs, items, spells, resets)
        world.perform_resets()
        if world.rooms:
            first = world.rooms[0]
            for item_id in STARTING_ITEMS:
                item = items.spawn(item_id)
                if item is not None:
                    first.add_item(item)
        return world

    def get_room(self, key: Union[int, str]) -> Optional[Room]:
        """A room by position (IndexError if out of range) or by id (None if unknown)."""
        if isinstance(key, int):
            return self.rooms[key]
        return next((room for room in self.rooms if room.room_id == key), None)

    def get_npc(self, npc_id: str) -> Optional[NPC]:
        return self.npc_library.get(npc_id)

    def add_reset(self, reset: Reset) -> None:
        self.resets.append(reset)

    def perform_resets(self) -> None:
        """Perform every reset of the reset library."""
        for reset in self.reset_library:
            reset.perform()

    def move_to(self, direction: str) -> str:
        """Move the current room through the first door answering to ``direction``."""
        if self.current_room is None:
            raise RuntimeError("the world has no current room")
        for door in self.current_room.doors:
            destination = door.leads_to
            if door.has_keyword(direction) or (
                destination is not None and destination.has_keyword(direction)
            ):
                self.current_room = destination
                return destination.description
        return CANNOT_GO

    def copy(self) -> World:
        """A world sharing the same rooms and current room."""
        clone = World(self.rooms)
        clone.current_room = self.current_room
        return clone