"""Spells read from a spells file."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Union

from .library import load_area

DEFAULT_SPELLS_PATH = Path("gameYaml") / "spells.yaml"


class SpellKind(Enum):
    """Whether a spell heals or harms."""

    HEALING = "defense"
    DAMAGE = "offense"


@dataclass(frozen=True)
class Spell:
    """A castable spell."""

    kind: SpellKind
    name: str
    mana: int
    min_level: int


def _text(value: Any, key: str) -> str:
    if value is None or isinstance(value, (list, dict)):
        raise ValueError(f"spell field {key!r} must be a scalar")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _number(entry: Any, key: str) -> int:
    value = entry.get(key) if isinstance(entry, dict) else None
    text = _text(value, key)
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(f"spell field {key!r} is not a number: {text!r}") from None


def _parse(entry: Any, kind: SpellKind) -> Spell:
    mana = _number(entry, "Mana")
    min_level = _number(entry, "Minlevel")
    name_value = entry.get("Name") if isinstance(entry, dict) else None
    return Spell(kind, _text(name_value, "Name"), mana, min_level)


class SpellLibrary:
    """All spells known to the game, healing spells first."""

    def __init__(self, spells: Optional[Iterable[Spell]] = None) -> None:
        self.spells: list[Spell] = list(spells) if spells is not None else []

    def __len__(self) -> int:
        return len(self.spells)

    def __iter__(self) -> Iterator[Spell]:
        return iter(self.spells)

    @classmethod
    def from_file(cls, path: Union[str, Path] = DEFAULT_SPELLS_PATH) -> SpellLibrary:
        return cls.from_data(load_area(path))

    @classmethod
    def from_data(cls, data: dict) -> SpellLibrary:
        """Build spells from the ``defense`` and ``offense`` sections.

        Every spell needs a numeric Mana and Minlevel and a Name.
        """
        library = cls()
        for kind in (SpellKind.HEALING, SpellKind.DAMAGE):
            entries = data.get(kind.value)
            if isinstance(entries, list):
                library.spells.extend(_parse(entry, kind) for entry in entries)
        return library

    def get(self, name: str) -> Optional[Spell]:
        """The spell with this name, ignoring case, or None."""
        wanted = name.lower()
        return next((s for s in self.spells if s.name.lower() == wanted), None)