"""Blank world objects for administrators to fill in."""

from __future__ import annotations

from .item import Item
from .npc import NPC
from .room import Room


def create_room() -> Room:
    """A room holding placeholder text and no keywords."""
    room = Room("no_id", None, "no_desc", "no_extdesc")
    room.name = "no_name"
    return room


def create_item() -> Item:
    """An item holding placeholder text."""
    return Item(
        "no_id",
        long_desc="no_longdesc",
        short_desc="no_shortdesc",
        extra_desc="no_extdesc",
    )


def create_npc() -> NPC:
    """An NPC holding placeholder text."""
    npc = NPC("no_id")
    npc.description = "no_description"
    npc.long_desc = "no_longdesc"
    npc.short_desc = "no_shortdesc"
    return npc