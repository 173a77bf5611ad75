from __future__ import annotations

"""Static game data: race stat blocks, the item catalogue and the default roster."""

from .models import Armour, Race, Ring, Shield, Weapon

# attack, attack_chance, defence, defence_chance, health, strength
RACE_STATS = {
    Race.HUMAN:  {"attack": 30, "attack_chance": 2 / 3, "defence": 20, "defence_chance": 1 / 2, "health": 60, "strength": 100},
    Race.ELF:    {"attack": 40, "attack_chance": 1.0,   "defence": 10, "defence_chance": 1 / 4, "health": 40, "strength": 70},
    Race.DWARF:  {"attack": 30, "attack_chance": 2 / 3, "defence": 20, "defence_chance": 2 / 3, "health": 50, "strength": 130},
    Race.HOBBIT: {"attack": 25, "attack_chance": 1 / 3, "defence": 20, "defence_chance": 2 / 3, "health": 70, "strength": 85},
    Race.ORC:    {"attack": 25, "attack_chance": 0.25,  "defence": 10, "defence_chance": 0.25,  "health": 50, "strength": 130},
}

SWORD = Weapon("Sword", weight=10, attack_bonus=10)
DAGGER = Weapon("Dagger", weight=5, attack_bonus=5)
PLATE_ARMOUR = Armour("Plate Armour", weight=40, defence_bonus=10, attack_penalty=5)
LEATHER_ARMOUR = Armour("Leather Armour", weight=20, defence_bonus=5, attack_penalty=0)
LARGE_SHIELD = Shield("Large Shield", weight=30, defence_bonus=10, attack_penalty=5)
SMALL_SHIELD = Shield("Small Shield", weight=10, defence_bonus=5, attack_penalty=0)
RING_OF_LIFE = Ring("Ring of Life", weight=1, health_delta=10, strength_bonus=0)
RING_OF_STRENGTH = Ring("Ring of Strength", weight=1, health_delta=-10, strength_bonus=50)

# Items scattered on a fresh board
LOOT_TABLE = [SWORD, DAGGER, LEATHER_ARMOUR, PLATE_ARMOUR, RING_OF_LIFE, RING_OF_STRENGTH]

# Enemies placed on a fresh board
ENEMIES = [
    ("Bob", Race.HUMAN),
    ("Legolas", Race.ELF),
    ("Gimli", Race.DWARF),
    ("Frodo", Race.HOBBIT),
    ("Azog", Race.ORC),
]
