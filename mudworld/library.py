"""Game content loaded from area files: items, NPCs and rooms."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Iterator, Optional

import yaml

from .item import Item
from .npc import NPC
from .room import Room

DEFAULT_AREA_PATH = Path("gameYaml") / "midgaard.yaml"


def load_area(path) -> dict:
    """Read an area file and return its top-level mapping."""
    with open(path, encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"area file {str(path)!r} does not hold a mapping")
    return data


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None or isinstance(value, (list, dict)):
        raise ValueError(f"expected a scalar, got {value!r}")
    return str(value)


def _field(entry: Any, key: str) -> Any:
    return entry.get(key) if isinstance(entry, dict) else None


def _scalar(entry: Any, key: str) -> str:
    value = _field(entry, key)
    if value is None or isinstance(value, (list, dict)):
        raise ValueError(f"field {key!r} must be a scalar")
    return _text(value)


def _sequence(entry: Any, key: str) -> list:
    value = _field(entry, key)
    return value if isinstance(value, list) else []


def _strings(entry: Any, key: str) -> list[str]:
    return [_text(value) for value in _sequence(entry, key)]


def _section(data: dict, name: str) -> list:
    value = data.get(name)
    return value if isinstance(value, list) else []


def _new_item(
    item_id: str,
    keywords: Iterable[str],
    long_desc: str,
    short_desc: str,
    extra_desc: str,
) -> Item:
    item = Item(item_id)
    item.add_keywords(keywords)
    item.long_desc = long_desc
    item.short_desc = short_desc
    item.extra_desc = extra_desc
    return item


def _new_npc(
    npc_id: str,
    description: str,
    long_desc: str,
    short_desc: str,
    keywords: Iterable[str],
) -> NPC:
    npc = NPC(npc_id)
    npc.add_keywords(keywords)
    npc.description = description
    npc.short_desc = short_desc
    npc.long_desc = long_desc
    return npc


def _new_room(
    name: str,
    room_id: str,
    description: str,
    ext_description: str,
    keywords: Iterable[str],
) -> Room:
    room = Room(room_id, None, description, ext_description)
    room.name = name
    room.add_keywords(keywords)
    return room


def _parse_item(entry: Any) -> Item:
    extra = ""
    for block in _sequence(entry, "extra"):
        if isinstance(block, dict) and "desc" in block:
            extra += "".join(f"{line}\n" for line in _strings(block, "desc"))
        else:
            extra = ""
    item_id = _scalar(entry, "id")
    keywords = _strings(entry, "keywords")
    long_desc = " " + "".join(f"{line}\n" for line in _strings(entry, "longdesc"))
    short_desc = _scalar(entry, "shortdesc")
    return _new_item(item_id, keywords, long_desc, short_desc, extra)


def _parse_npc(entry: Any) -> NPC:
    description = "".join(f"{line}\n" for line in _strings(entry, "description"))
    npc_id = _scalar(entry, "id")
    keywords = _strings(entry, "keywords")
    long_desc = "".join(_strings(entry, "longdesc"))
    short_desc = _scalar(entry, "shortdesc")
    return _new_npc(npc_id, description, long_desc, short_desc, keywords)


class ItemLibrary:
    """The item templates of an area."""

    def __init__(self, items: Optional[Iterable[Item]] = None) -> None:
        self.items: list[Item] = list(items) if items is not None else []

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    @classmethod
    def from_file(cls, path=DEFAULT_AREA_PATH) -> ItemLibrary:
        """Build the library from the OBJECTS section of an area file."""
        library = cls()
        for entry in _section(load_area(path), "OBJECTS"):
            library.add(_parse_item(entry))
        return library

    def add(self, item: Item) -> None:
        self.items.append(item)

    def get(self, item_id: str) -> Optional[Item]:
        """The template with this id, or None."""
        return next((item for item in self.items if item.item_id == item_id), None)

    def spawn(self, item_id: str) -> Optional[Item]:
        """A fresh item built from the template with this id, or None."""
        template = self.get(item_id)
        if template is None:
            return None
        return _new_item(
            template.item_id,
            template.keywords,
            template.long_desc,
            template.short_desc,
            template.extra_desc,
        )


class NpcLibrary:
    """The NPC templates of an area."""

    def __init__(self, npcs: Optional[Iterable[NPC]] = None) -> None:
        self.npcs: list[NPC] = list(npcs) if npcs is not None else []

    def __len__(self) -> int:
        return len(self.npcs)

    def __iter__(self) -> Iterator[NPC]:
        return iter(self.npcs)

    @classmethod
    def from_file(cls, path=DEFAULT_AREA_PATH) -> NpcLibrary:
        """Build the library from the NPCS section of an area file."""
        library = cls()
        for entry in _section(load_area(path), "NPCS"):
            library.add(_parse_npc(entry))
        return library

    def add(self, npc: NPC) -> None:
        self.npcs.append(npc)

    def get(self, npc_id: str) -> Optional[NPC]:
        """The template with this id, or None."""
        return next((npc for npc in self.npcs if npc.npc_id == npc_id), None)

    def spawn(self, npc_id: str) -> Optional[NPC]:
        """A fresh NPC built from the template with this id, or None."""
        template = self.get(npc_id)
        if template is None:
            return None
        return _new_npc(
            template.npc_id,
            template.description,
            template.long_desc,
            template.short_desc,
            template.keywords,
        )


class RoomLibrary:
    """The rooms of an area, with their doors linked to one another."""

    def __init__(self, rooms: Optional[Iterable[Room]] = None) -> None:
        self.rooms: list[Room] = list(rooms) if rooms is not None else []

    def __len__(self) -> int:
        return len(self.rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self.rooms)

    @classmethod
    def from_file(cls, path=DEFAULT_AREA_PATH) -> RoomLibrary:
        """Build the rooms from the ROOMS section of an area file.

        A room without extended descriptions keeps those of the room before it.
        A door whose target is unknown leads back to its own room.
        """
        library = cls()
        ext_description = ""
        ext_keywords: list[str] = []
        for entry in _section(load_area(path), "ROOMS"):
            description = " " + "".join(f"{line}\n" for line in _strings(entry, "desc"))
            name = _scalar(entry, "name")
            room_id = _scalar(entry, "id")
            for block in _sequence(entry, "extended_descriptions"):
                ext_description = " " + "".join(
                    f"{line}\n" for line in _strings(block, "desc")
                )
                ext_keywords = _strings(block, "keywords")
            room = _new_room(name, room_id, description, ext_description, ext_keywords)
            library.add(room)
            for door in _sequence(entry, "doors"):
                lines = _strings(door, "desc")
                door_description = lines[-1] if lines else " "
                direction = _scalar(door, "dir")
                target = _scalar(door, "to")
                room.add_door(target, direction, door_description, room)
        library._link_doors()
        return library

    def _link_doors(self) -> None:
        by_id = {room.room_id: room for room in self.rooms}
        for room in self.rooms:
            for door in room.doors:
                if door.door_id in by_id:
                    door.leads_to = by_id[door.door_id]

    def add(self, room: Room) -> None:
        self.rooms.append(room)

    def get(self, room_id: str) -> Optional[Room]:
        """The room with this id, or None."""
        return next((room for room in self.rooms if room.room_id == room_id), None)