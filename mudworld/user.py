"""Players who walk the world, carry items and fight."""

from __future__ import annotations

from typing import Callable, Optional

from .entity import Entity
from .inventory import Inventory
from .npc import NPC
from .room import Room
from .stats import AbilityStats

START_LEVEL = 1
KILLED_NPC_EXPERIENCE = 100
USER_MAX_HEALTH = 10

DEFAULT_USER_NAME = "testUser"
PASSWORD = "password"

CANNOT_GO = "Cannot go there!\n"
CANNOT_TAKE = "\nCannot take that item.\n"
NPC_NOT_FOUND = "\nSomehow the NPC could not be found\n"
COMBAT_PROMPT = "enter y to enter combat or n to decline\n"

MessageDisplayer = Callable[[str], None]
CombatListener = Callable[[Callable[[], None]], None]


class User(Entity):
    """A player character located in a room."""

    def __init__(
        self,
        is_admin: bool = True,
        user_name: str = DEFAULT_USER_NAME,
        password: str = PASSWORD,
        room: Optional[Room] = None,
        description: str = "",
    ) -> None:
        super().__init__(USER_MAX_HEALTH)
        self.is_admin = is_admin
        self.user_name = user_name
        self.password = password
        self.room = room
        self.description = description
        self.stats = AbilityStats()
        self.inventory = Inventory()
        self.level = START_LEVEL
        self.xp = 0
        self.in_combat = False
        self.message_displayer: Optional[MessageDisplayer] = None
        self.begin_combat_listener: Optional[CombatListener] = None

    def __repr__(self) -> str:
        return f"User({self.user_name!r}, level={self.level})"

    # ability scores

    @property
    def charisma(self) -> int:
        return self.stats.charisma

    @property
    def defense(self) -> int:
        return self.stats.defense

    @property
    def dexterity(self) -> int:
        return self.stats.dexterity

    @property
    def intelligence(self) -> int:
        return self.stats.intelligence

    @property
    def strength(self) -> int:
        return self.stats.strength

    # progression

    def _broadcast(self, message: str) -> None:
        if self.room is not None:
            self.room.broadcast(self, message)

    def level_up(self) -> None:
        """Gain a level, raise every ability and tell the room."""
        self.level += 1
        self.stats.level_up()
        self._broadcast(f"{self.user_name} just levelled up! Hooray!")

    def increase_xp(self, amount: int) -> None:
        """Add experience; level up when experience divided by level equals the level."""
        self.xp += amount
        if self.level == self.xp // self.level:
            self.level_up()

    # session hooks

    def notify(self, message: str) -> None:
        """Pass ``message`` to the attached message displayer."""
        if self.message_displayer is None:
            raise RuntimeError(f"user {self.user_name!r} has no message displayer")
        self.message_displayer(message)

    def listen_for_combat(self, callback: Callable[[], None]) -> None:
        """Register ``callback`` with the combat listener and prompt the player."""
        if self.begin_combat_listener is None:
            raise RuntimeError(f"user {self.user_name!r} has no combat listener")
        self.begin_combat_listener(callback)
        self.notify(COMBAT_PROMPT)

    # room interaction

    def move_to(self, direction: str) -> str:
        """Walk through the first door answering to ``direction``."""
        for door in self.room.doors:
            destination = door.leads_to
            if door.has_keyword(direction) or (
                destination is not None and destination.has_keyword(direction)
            ):
                self._broadcast(f"{self.user_name} left the room.\n")
                self.room.transfer_user(self.user_name, destination)
                self.room = destination
                self._broadcast(f"{self.user_name} has entered the room.\n")
                return (
                    f"You are now in the {destination.name}.\n\n"
                    f"{destination.description}\n"
                )
        return CANNOT_GO

    def look_at(self, keyword: str) -> str:
        return self.room.look_at(keyword)

    def look_around(self) -> str:
        return self.room.look_around()

    def look_exits(self) -> str:
        return self.room.exits_description()

    def look_objects(self) -> str:
        return self.room.object_list()

    def look_object_keywords(self, keyword: str) -> str:
        return "".join(f"{k}\n" for k in self.room.object_keywords(keyword))

    def take_item(self, keyword: str) -> str:
        """Move the first matching item from the room into the inventory."""
        for item in list(self.room.items):
            if item.has_keyword(keyword):
                self.inventory.add_item(item)
                self.room.remove_item(item.item_id)
                self._broadcast(f"{self.user_name} took {item.short_desc}.\n")
                return f"\nYou took {item.short_desc}\n"
        return CANNOT_TAKE

    # inventory interaction

    def view_inventory(self) -> str:
        return self.inventory.describe()

    def use_item(self, keyword: str) -> str:
        return self.inventory.use_item(keyword)

    def toss_item(self, keyword: str) -> str:
        """Drop the matching item from the inventory."""
        item = self.inventory.find(keyword)
        result = self.inventory.remove_item(keyword)
        if item is not None:
            result += " and thrown on the floor\n"
            self._broadcast(
                f"{self.user_name} just tossed {item.short_desc} on the floor.\n"
            )
        return result

    def inventory_item_description(self, keyword: str) -> str:
        return self.inventory.item_description(keyword)

    # combat

    def attack_npc(self, keyword: str) -> str:
        """Hit the first NPC answering to ``keyword`` and take its counterattack."""
        for npc in self.room.npcs:
            if npc.has_keyword(keyword):
                npc.damage(self.stats.strength)
                npc_attack = npc.attack_damage() if npc.is_alive() else NPC.DEAD_DAMAGE
                short = npc.short_desc
                self._broadcast(f"{self.user_name} just attacked {short}\n")
                return self.get_attacked(npc_attack, short) + short
        return NPC_NOT_FOUND

    def get_attacked(self, npc_attack: int, npc_short_desc: str) -> str:
        """Resolve an NPC's counterattack of ``npc_attack`` damage."""
        if npc_attack == 0:
            self._broadcast(f"{self.user_name} just killed {npc_short_desc}\n")
            self.increase_xp(KILLED_NPC_EXPERIENCE)
            return "\nYou have just succeeded in killing\n"
        if self.health > npc_attack:
            self.damage(npc_attack)
            return f"You have just taken {npc_attack} damage from "
        self._broadcast(f"{self.user_name} was just killed by {npc_short_desc}\n")
        return "You have just been killed. Awwwwwe\n"

    def copy(self) -> User:
        """Return a user with the same identity, room and level."""
        clone = User(
            self.is_admin,
            self.user_name,
            self.password,
            self.room,
            self.description,
        )
        clone.level = self.level
        return clone