# mudworld

A world model for a text-based multi-user dungeon. Doors join rooms, and NPCs,
items and users live in the rooms. The world is loaded from a YAML area file and a
YAML spell file. Resets put NPCs and items back in their rooms.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Loading a world

An area file has top-level `ROOMS`, `NPCS`, `OBJECTS` and `RESETS` sections. A spell
file has `defense` and `offense` sections.

```python
from mudworld.world import World

world = World.from_files("gameYaml/midgaard.yaml", "gameYaml/spells.yaml")

first = world.get_room(0)            # by position; IndexError if out of range
temple = world.get_room("3001")      # by room id; None if unknown

print(first.look_around())
print(first.exits_description())
print(first.look_at("north"))
```

Both paths default to `gameYaml/midgaard.yaml` and `gameYaml/spells.yaml`. These
paths are relative to the working directory. `World.from_files` does these steps in
order:

1. It parses the rooms, NPCs, items and spells.
2. It builds the resets from the area file and performs them once.
3. It puts fresh copies of items `3000` and `3001` in the first room, for each of
   them the area defines.

`World.perform_resets()` runs the area's resets again. Resets added with
`World.add_reset` are kept in `world.resets` but are not run by `perform_resets`.

`World.move_to(direction)` moves `world.current_room` through the first matching
door and returns the new room's description. It returns `"Cannot go there"` if no
door matches. It raises `RuntimeError` if no current room has been set.

## Libraries

Each kind of game object can also be loaded on its own from `mudworld.library`:

```python
from mudworld.library import ItemLibrary, NpcLibrary, RoomLibrary, load_area

items = ItemLibrary.from_file("gameYaml/midgaard.yaml")
npcs = NpcLibrary.from_file("gameYaml/midgaard.yaml")
rooms = RoomLibrary.from_file("gameYaml/midgaard.yaml")

template = npcs.get("3000")          # the shared prototype, or None
fresh = npcs.spawn("3000")           # a new NPC built from it, or None
```

`spawn` returns a new object built from the prototype, so changes to it do not touch
the library. `get` returns the prototype itself. `RoomLibrary.from_file` links each
door to the room whose id it names. A door whose target is not in the file leads
back to its own room. `load_area(path)` returns the file's top-level mapping, and an
empty dict for an empty file.

## Resets

`mudworld.resets` has three reset types:

- `NpcReset(room, npc, limit)` adds a copy of the NPC until the room holds `limit`
  NPCs with that id.
- `ItemReset(room, item)` adds a copy of the item.
- `DoorReset(room, door_number, state)` sets the `state` of the room's doors.

`ResetLibrary.from_file` and `ResetLibrary.from_data` build resets from `npc`,
`object` and `door` entries. They leave out entries that name unknown rooms, NPCs or
items.

## Spells

```python
from mudworld.spells import SpellLibrary

spells = SpellLibrary.from_file("gameYaml/spells.yaml")
heal = spells.get("HEAL")            # names match case-insensitively
```

Each `Spell` records its `kind` (`SpellKind.HEALING` or `SpellKind.DAMAGE`),
`name`, `mana` and `min_level`. `Mana`, `Minlevel` and `Name` are required in every
entry. A spell missing one of them, or with a mana or level that is not a number,
raises `ValueError`.

## Rooms and users

A `Room` (in `mudworld.room`) tracks its keywords, doors, NPCs, items and users.
Keyword matching ignores case.

A `User` (in `mudworld.user`) acts through the room it stands in with these
methods. Each returns the text to show the player:

- `move_to`
- `look_at`
- `look_around`
- `look_exits`
- `look_objects`
- `take_item`
- `toss_item`
- `use_item`
- `view_inventory`
- `attack_npc`

`Room.broadcast` sends messages to the other users in the room through their
`notify` method. `notify` passes the text to the user's `message_displayer`
callable. It raises `RuntimeError` if none has been set. Set a displayer on every
user that may receive broadcasts:

```python
from mudworld.user import User

player = User(False, "PlayerOne", "password", first, "This is PlayerOne.")
player.message_displayer = print
first.add_user(player)
```

`mudworld.admin` provides `create_room`, `create_item` and `create_npc`. They return
blank objects holding placeholder text.

## What this package does not do

This package is a library only. It has no network server, no client and no command
line, and it does not parse typed commands. It stores no player accounts and saves
no game state. A door's `state` is recorded but does not stop anyone from passing
through. Spells carry only their name, kind, mana cost and minimum level, and
casting them has no effect.