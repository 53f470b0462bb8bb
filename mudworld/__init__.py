"""World model for a multi-user dungeon: rooms, doors, NPCs, items, users, resets and spells."""

__version__ = "0.1.0"