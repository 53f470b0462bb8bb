import pytest

from mudworld.library import NpcLibrary
from mudworld.npc import NPC
from mudworld.resets import NpcReset, ResetLibrary
from mudworld.room import Room
from mudworld.spells import SpellKind
from mudworld.world import World


def _rooms():
    lobby = Room("1", "Lobby", "lobby desc")
    hall = Room("2", "Hall", "hall desc")
    lobby.add_door("2", "north", "door north", hall)
    hall.add_door("1", "south", "door south", lobby)
    return lobby, hall


def test_get_room_by_index_and_id():
    lobby, hall = _rooms()
    world = World([lobby, hall])
    assert world.get_room(0) is lobby
    assert world.get_room("2") is hall
    assert world.get_room("9") is None
    with pytest.raises(IndexError):
        world.get_room(5)


def test_move_to_follows_doors():
    lobby, hall = _rooms()
    world = World([lobby, hall])
    world.current_room = lobby
    assert world.move_to("north") == "hall desc"
    assert world.current_room is hall
    assert world.move_to("lobby") == "lobby desc"
    assert world.current_room is lobby


def test_move_to_unknown_direction():
    lobby, hall = _rooms()
    world = World([lobby, hall])
    world.current_room = lobby
    assert world.move_to("east") == "Cannot go there"
    assert world.current_room is lobby


def test_move_to_without_current_room_is_an_error():
    world = World(_rooms())
    with pytest.raises(RuntimeError):
        world.move_to("north")


def test_get_npc_uses_library():
    smurf = NPC("100")
    world = World(npc_library=NpcLibrary([smurf]))
    assert world.get_npc("100") is smurf
    assert world.get_npc("101") is None


def test_perform_resets_runs_reset_library():
    lobby, hall = _rooms()
    reset = NpcReset(lobby, NPC("7"), 2)
    world = World([lobby, hall], reset_library=ResetLibrary([reset]))
    world.perform_resets()
    world.perform_resets()
    world.perform_resets()
    assert lobby.count_npcs_with_id("7") == 2


def test_add_reset_keeps_it():
    lobby, _ = _rooms()
    reset = NpcReset(lobby, NPC("7"), 1)
    world = World([lobby])
    world.add_reset(reset)
    assert world.resets == [reset]


def test_copy_shares_rooms_and_current_room():
    lobby, hall = _rooms()
    world = World([lobby, hall])
    world.current_room = hall
    clone = world.copy()
    assert clone.rooms == world.rooms
    assert clone.rooms is not world.rooms
    assert clone.current_room is hall


AREA = """\
ROOMS:
  - id: 3001
    name: Temple
    desc: [The temple.]
    doors:
      - dir: north
        desc: [A door.]
        keywords: []
        to: 3002
  - id: 3002
    name: Square
    desc: [The square.]
NPCS:
  - id: 100
    description: [A smurf.]
    keywords: [smurf]
    longdesc: [The smurf stands here.]
    shortdesc: a smurf
OBJECTS:
  - id: 3000
    keywords: [glasses]
    longdesc: [Glasses.]
    shortdesc: a pair of glasses
  - id: 3001
    keywords: [berries]
    longdesc: [Berries.]
    shortdesc: some berries
RESETS:
  - action: npc
    id: 100
    limit: 1
    room: 3002
"""

SPELLS = """\
defense:
  - Name: heal
    Mana: 5
    Minlevel: 1
offense:
  - Name: zap
    Mana: 2
    Minlevel: 1
"""


def test_from_files_builds_and_populates(tmp_path):
    area = tmp_path / "area.yaml"
    area.write_text(AREA, encoding="utf-8")
    spells = tmp_path / "spells.yaml"
    spells.write_text(SPELLS, encoding="utf-8")

    world = World.from_files(area, spells)

    temple = world.get_room(0)
    square = world.get_room("3002")
    assert temple.name == "Temple"
    assert temple.has_item("3000") and temple.has_item("3001")
    assert temple.doors[0].leads_to is square
    assert square.count_npcs_with_id("100") == 1
    assert square.npcs[0] is not world.get_npc("100")
    assert world.spell_library.get("zap").kind is SpellKind.DAMAGE
    assert world.current_room is None


def test_from_files_then_move(tmp_path):
    area = tmp_path / "area.yaml"
    area.write_text(AREA, encoding="utf-8")
    spells = tmp_path / "spells.yaml"
    spells.write_text(SPELLS, encoding="utf-8")
    world = World.from_files(area, spells)
    world.current_room = world.get_room(0)
    assert world.move_to("north") == world.get_room("3002").description
    assert world.current_room is world.get_room("3002")