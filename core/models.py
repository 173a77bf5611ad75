from __future__ import annotations

"""Dataclasses representing characters, items and equipment state."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple

logger = logging.getLogger(__name__)


class Race(Enum):
    HUMAN = "Human"
    ELF = "Elf"
    DWARF = "Dwarf"
    HOBBIT = "Hobbit"
    ORC = "Orc"

    @classmethod
    def parse(cls, text: str) -> "Race":
        for race in cls:
            if race.value.lower() == text.strip().lower():
                return race
        raise ValueError(f"Unknown race: {text!r}")


class Failure(Enum):
    INVALID_DROP_INDEX = "invalid_drop_index"
    ITEM_TOO_HEAVY = "item_too_heavy"
    UNRECOGNIZED_ITEM = "unrecognized_item"
    EMPTY_SLOT = "empty_slot"


@dataclass(frozen=True)
class ActionResult:
    """Outcome of an equipment action. Truthy when the action was accepted."""

    ok: bool
    message: str
    error: Failure | None = None

    def __bool__(self) -> bool:
        return self.ok


# ---- Items ----
@dataclass(frozen=True)
class Weapon:
    name: str
    weight: int
    attack_bonus: int
    kind: str = field(default="weapon", init=False)

    def describe(self) -> str:
        return f"{self.name} (Weapon, Attack +{self.attack_bonus}, Weight: {self.weight})"


@dataclass(frozen=True)
class Armour:
    name: str
    weight: int
    defence_bonus: int
    attack_penalty: int
    kind: str = field(default="armour", init=False)

    def describe(self) -> str:
        return (f"{self.name} (Armour, Defence +{self.defence_bonus}, "
                f"Attack -{self.attack_penalty}, Weight: {self.weight})")


@dataclass(frozen=True)
class Shield:
    name: str
    weight: int
    defence_bonus: int
    attack_penalty: int
    kind: str = field(default="shield", init=False)

    def describe(self) -> str:
        return (f"{self.name} (Shield, Defence +{self.defence_bonus}, "
                f"Attack -{self.attack_penalty}, Weight: {self.weight})")


@dataclass(frozen=True)
class Ring:
    name: str
    weight: int
    health_delta: int
    strength_bonus: int
    kind: str = field(default="ring", init=False)

    def describe(self) -> str:
        sign = "+" if self.health_delta >= 0 else ""
        return (f"{self.name} (Ring, Health {sign}{self.health_delta}, "
                f"Strength +{self.strength_bonus}, Weight: {self.weight})")


Item = Weapon | Armour | Shield | Ring


class Totals(NamedTuple):
    attack: int
    defence: int
    strength: int
    health: int


# ---- Characters ----
@dataclass
class Character:
    name: str
    race: Race
    attack: int
    attack_chance: float
    defence: int
    defence_chance: float
    health: int
    strength: int
    weapon: Weapon | None = None
    armour: Armour | None = None
    shield: Shield | None = None
    rings: List[Ring] = field(default_factory=list)
    inventory: list = field(default_factory=list)
    # Only orcs react to the time of day
    is_night: bool = False

    # Derived stats are recomputed from live equipment on every read.
    @property
    def total_attack(self) -> int:
        total = self.attack
        if self.weapon:
            total += self.weapon.attack_bonus
        if self.armour:
            total -= self.armour.attack_penalty
        if self.shield:
            total -= self.shield.attack_penalty
        for ring in self.rings:
            total += ring.strength_bonus
        return total

    @property
    def total_defence(self) -> int:
        total = self.defence
        if self.armour:
            total += self.armour.defence_bonus
        if self.shield:
            total += self.shield.defence_bonus
        return total

    @property
    def total_strength(self) -> int:
        return self.strength + sum(ring.strength_bonus for ring in self.rings)

    @property
    def total_health(self) -> int:
        return self.health + sum(ring.health_delta for ring in self.rings)

    @property
    def is_defeated(self) -> bool:
        return self.total_health <= 0

    def totals(self) -> Totals:
        return Totals(self.total_attack, self.total_defence, self.total_strength, self.total_health)

    def current_weight(self) -> int:
        total = 0
        for slot in (self.weapon, self.armour, self.shield):
            if slot:
                total += slot.weight
        for ring in self.rings:
            total += ring.weight
        return total

    def change_health(self, delta: int) -> int:
        """Apply ``delta`` to base health, flooring at zero. Returns the new value."""
        self.health = max(0, self.health + delta)
        return self.health

    # ---- Equipment ----
    def pick_up(self, item) -> ActionResult:
        """Equip ``item`` from the ground.

        Capacity is checked against the *base* strength field even though
        equipped rings already add to both weight and total strength.
        A Weapon is equipped without being recorded in the inventory;
        Armour, Shield and Ring pickups are recorded.
        """
        weight = getattr(item, "weight", 0)
        if self.current_weight() + weight > self.strength:
            logger.debug("%s cannot carry %s (%d + %d > %d)", self.name,
                         getattr(item, "name", item), self.current_weight(), weight, self.strength)
            return ActionResult(False, "Item too heavy", Failure.ITEM_TOO_HEAVY)
        kind = getattr(item, "kind", None)
        if kind == "weapon":
            self.weapon = item
        elif kind == "armour":
            self.armour = item
            self.inventory.append(item)
        elif kind == "shield":
            self.shield = item
            self.inventory.append(item)
        elif kind == "ring":
            self.rings.append(item)
            self.inventory.append(item)
        else:
            return ActionResult(False, "Item not recognized.", Failure.UNRECOGNIZED_ITEM)
        return ActionResult(True, f"Picked up {item.describe()}")

    def _drop_slot(self, slot: str, label: str) -> ActionResult:
        item = getattr(self, slot)
        if not item:
            return ActionResult(False, f"No {label} to drop.", Failure.EMPTY_SLOT)
        setattr(self, slot, None)
        return ActionResult(True, f"Dropping {label}: {item.name}")

    def drop_weapon(self) -> ActionResult:
        return self._drop_slot("weapon", "weapon")

    def drop_armour(self) -> ActionResult:
        return self._drop_slot("armour", "armour")

    def drop_shield(self) -> ActionResult:
        return self._drop_slot("shield", "shield")

    def drop_ring(self, index: int) -> ActionResult:
        """Drop the ring at zero-based ``index``."""
        if 0 <= index < len(self.rings):
            ring = self.rings.pop(index)
            return ActionResult(True, f"Dropping ring: {ring.name}")
        return ActionResult(False, "Invalid ring choice.", Failure.INVALID_DROP_INDEX)

    # ---- Presentation ----
    def describe(self) -> str:
        line = (f"{self.name}, race: {self.race.value}, attack: {self.total_attack}, "
                f"defence: {self.total_defence}, health: {self.total_health}, "
                f"strength: {self.total_strength}")
        if self.race is Race.ORC:
            line += " [Night]" if self.is_night else " [Day]"
        return line

    def describe_equipment(self) -> list[str]:
        lines = ["Equipped Items:"]
        for label, item in (("Weapon", self.weapon), ("Armour", self.armour), ("Shield", self.shield)):
            lines.append(f"{label}: {item.describe() if item else 'None'}")
        if not self.rings:
            lines.append("Rings: None")
        else:
            lines.append("Rings:")
            for i, ring in enumerate(self.rings, start=1):
                lines.append(f"  {i}. {ring.describe()}")
        return lines


def compute_totals(character: Character) -> Totals:
    return character.totals()


def pick_up(character: Character, item) -> bool:
    return bool(character.pick_up(item))


def make_character(name: str, race: Race | str) -> Character:
    """Create a character with the base stats of ``race``."""
    from .data import RACE_STATS

    if isinstance(race, str):
        race = Race.parse(race)
    stats = RACE_STATS[race]
    return Character(name=name, race=race, **stats)
