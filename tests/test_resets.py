import pytest

from mudworld.item import Item
from mudworld.npc import NPC
from mudworld.resets import (
    DoorReset,
    ItemReset,
    NpcReset,
    ResetLibrary,
    find_item,
    find_npc,
    find_room,
    rooms_with_door,
)
from mudworld.room import Room


def test_npc_reset_with_multiple_resets():
    room = Room()
    npc1 = NPC("50")
    npc2 = NPC("35")
    reset1 = NpcReset(room, npc1, 3)
    reset2 = NpcReset(room, npc2, 2)
    for _ in range(5):
        reset1.perform()
    for _ in range(5):
        reset2.perform()
    assert room.count_npcs_with_id("50") == 3
    assert room.count_npcs_with_id("35") == 2
    assert len(room.npcs) == 5
    assert room.npcs[0] is not npc1
    assert room.npcs[0] is not room.npcs[1]


def test_npc_reset_counts_up_to_limit():
    room = Room()
    npc = NPC("50")
    reset = NpcReset(room, npc, 3)
    reset.perform()
    assert room.count_npcs_with_id("50") == 1
    reset.perform()
    assert room.count_npcs_with_id("50") == 2
    reset.perform()
    assert room.count_npcs_with_id("50") == 3
    reset.perform()
    assert room.count_npcs_with_id("50") == 3


def test_npc_reset_with_limit_zero():
    room = Room()
    reset = NpcReset(room, NPC("50"), 0)
    assert room.npcs == []
    reset.perform()
    assert room.npcs == []


def test_door_reset_sets_state_when_number_matches_room():
    room1 = Room("0", "Closet")
    room2 = Room()
    room1.add_door("12345", "north", "the door that leads north", room2)
    reset = DoorReset(room1, 0, "Lock")
    reset.perform()
    assert room1.doors[0].state == "Lock"


def test_door_reset_leaves_state_when_number_differs():
    room1 = Room("7", "Closet")
    room1.add_door("12345", "north", "the door that leads north", Room())
    DoorReset(room1, 0, "Lock").perform()
    assert room1.doors[0].state == ""


def test_item_reset():
    room = Room()
    item = Item("20")
    reset = ItemReset(room, item)
    assert not room.has_item("20")
    reset.perform()
    assert room.has_item("20")
    assert room.items[0] is not item


def test_find_helpers():
    npcs = [NPC("1"), NPC("2")]
    rooms = [Room("a", "A"), Room("b", "B")]
    items = [Item("x"), Item("y")]
    assert find_npc("2", npcs) is npcs[1]
    assert find_npc("3", npcs) is None
    assert find_room("a", rooms) is rooms[0]
    assert find_room("z", rooms) is None
    assert find_item("y", items) is items[1]
    assert find_item("q", items) is None


def test_rooms_with_door_lists_each_matching_door():
    target = Room("t", "Target")
    first = Room("1", "First")
    second = Room("2", "Second")
    first.add_door("t", "north", "n", target)
    first.add_door("t", "up", "u", target)
    second.add_door("other", "south", "s", target)
    assert rooms_with_door("t", [first, second, target]) == [first, first]


def _world():
    hall = Room("10", "Hall")
    closet = Room("0", "Closet")
    closet.add_door("10", "east", "to the hall", hall)
    return [NPC("50")], [hall, closet], [Item("20")]


def test_library_from_data_builds_each_kind():
    npcs, rooms, items = _world()
    data = {
        "RESETS": [
            {"action": "npc", "id": "50", "limit": 2, "room": "10"},
            {"action": "object", "id": "20", "room": "10"},
            {"action": "door", "id": 0, "room": "10", "state": "locked"},
            {"action": "equip", "id": "20"},
            {"action": "npc", "id": "50", "limit": 1, "room": "missing"},
        ]
    }
    library = ResetLibrary.from_data(data, npcs, rooms, items)
    kinds = [type(reset) for reset in library]
    assert kinds == [NpcReset, ItemReset, DoorReset]
    npc_reset = library.resets[0]
    assert npc_reset.limit == 2 and npc_reset.room is rooms[0]
    door_reset = library.resets[2]
    assert door_reset.room is rooms[1]
    for reset in library:
        reset.perform()
    assert rooms[0].count_npcs_with_id("50") == 1
    assert rooms[0].has_item("20")
    assert rooms[1].doors[0].state == "locked"


def test_library_npc_without_limit_is_an_error():
    npcs, rooms, items = _world()
    data = {"RESETS": [{"action": "npc", "id": "50", "room": "10"}]}
    with pytest.raises(ValueError):
        ResetLibrary.from_data(data, npcs, rooms, items)


def test_library_missing_action_is_an_error():
    npcs, rooms, items = _world()
    with pytest.raises(ValueError):
        ResetLibrary.from_data({"RESETS": [{"id": "50"}]}, npcs, rooms, items)


def test_library_without_resets_section_is_empty():
    npcs, rooms, items = _world()
    assert len(ResetLibrary.from_data({}, npcs, rooms, items)) == 0


def test_library_from_file(tmp_path):
    npcs, rooms, items = _world()
    path = tmp_path / "area.yaml"
    path.write_text(
        "RESETS:\n"
        "  - action: object\n"
        "    id: 20\n"
        "    room: 10\n",
        encoding="utf-8",
    )
    library = ResetLibrary.from_file(path, npcs, rooms, items)
    assert len(library) == 1
    assert library.resets[0].item is items[0]