"""Tests for attack resolution and defence reactions."""

import os
import sys

# Ensure project root is on sys.path for direct imports
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from core.combat import Outcome, defense_reaction, resolve_attack
from core.data import LARGE_SHIELD, PLATE_ARMOUR, RING_OF_STRENGTH, SWORD
from core.models import Race, make_character


class ScriptedRandom:
    """Returns queued rolls so each branch of an attack can be forced."""

    def __init__(self, rolls=(), ints=()):
        self.rolls = list(rolls)
        self.ints = list(ints)

    def random(self):
        return self.rolls.pop(0)

    def randint(self, a, b):
        value = self.ints.pop(0)
        assert a <= value <= b
        return value


def test_roll_above_attack_chance_misses():
    attacker = make_character("Bob", Race.HUMAN)
    attacker.attack_chance = 0
    defender = make_character("Gimli", Race.DWARF)
    report = resolve_attack(attacker, defender, ScriptedRandom([0.3]))
    assert report.outcome is Outcome.MISS
    assert defender.health == 50
    assert not report.defeated


def test_elf_defence_gains_one_health():
    attacker = make_character("Azog", Race.ORC)
    elf = make_character("Legolas", Race.ELF)
    assert elf.health == 40
    report = resolve_attack(attacker, elf, ScriptedRandom([0.0, 0.1]))
    assert report.outcome is Outcome.DEFENDED
    assert elf.health == 41
    assert report.health_delta == 1
    assert report.damage == 0


def test_hobbit_defence_loses_random_health():
    attacker = make_character("Bob", Race.HUMAN)
    hobbit = make_character("Frodo", Race.HOBBIT)
    report = resolve_attack(attacker, hobbit, ScriptedRandom([0.0, 0.1], ints=[3]))
    assert report.outcome is Outcome.DEFENDED
    assert hobbit.health == 67


def test_hobbit_defence_floors_at_zero():
    hobbit = make_character("Frodo", Race.HOBBIT)
    hobbit.health = 2
    resolve_attack(make_character("Bob", Race.HUMAN), hobbit, ScriptedRandom([0.0, 0.1], ints=[5]))
    assert hobbit.health == 0


def test_human_and_dwarf_defence_has_no_effect():
    attacker = make_character("Legolas", Race.ELF)
    for race in (Race.HUMAN, Race.DWARF):
        defender = make_character("D", race)
        before = defender.health
        report = resolve_attack(attacker, defender, ScriptedRandom([0.0, 0.0]))
        assert report.outcome is Outcome.DEFENDED
        assert defender.health == before


def test_orc_day_defence_clamps_negative_difference():
    attacker = make_character("Bob", Race.HUMAN)
    attacker.attack = 10
    orc = make_character("Azog", Race.ORC)
    orc.defence = 30
    assert defense_reaction(Race.ORC, attacker, orc, False) == 0
    report = resolve_attack(attacker, orc, ScriptedRandom([0.0, 0.0]))
    assert report.outcome is Outcome.DEFENDED
    assert orc.health == 50


def test_orc_day_defence_takes_quarter_of_base_difference():
    attacker = make_character("Bob", Race.HUMAN)
    attacker.attack = 45
    orc = make_character("Azog", Race.ORC)
    # (45 - 10) // 4
    assert defense_reaction(Race.ORC, attacker, orc, False) == -8
    resolve_attack(attacker, orc, ScriptedRandom([0.0, 0.0]))
    assert orc.health == 42


def test_orc_day_defence_ignores_equipment_bonuses():
    attacker = make_character("Bob", Race.HUMAN)
    attacker.attack = 45
    assert attacker.pick_up(SWORD)
    assert attacker.pick_up(RING_OF_STRENGTH)
    orc = make_character("Azog", Race.ORC)
    assert orc.pick_up(PLATE_ARMOUR)
    # Totals would wound for (105 - 20) // 4 == 21
    assert (attacker.total_attack, orc.total_defence) == (105, 20)
    assert defense_reaction(Race.ORC, attacker, orc, False) == -(max(0, 45 - 10) // 4)
    resolve_attack(attacker, orc, ScriptedRandom([0.0, 0.0]))
    assert orc.health == 42


def test_orc_day_defence_wounds_even_when_totals_would_clamp():
    attacker = make_character("Bob", Race.HUMAN)
    orc = make_character("Azog", Race.ORC)
    assert orc.pick_up(PLATE_ARMOUR)
    assert orc.pick_up(LARGE_SHIELD)
    assert attacker.total_attack - orc.total_defence <= 0
    # (30 - 10) // 4
    assert defense_reaction(Race.ORC, attacker, orc, False) == -5
    resolve_attack(attacker, orc, ScriptedRandom([0.0, 0.0]))
    assert orc.health == 45


def test_hobbit_reports_health_after_zero_roll():
    hobbit = make_character("Frodo", Race.HOBBIT)
    report = resolve_attack(make_character("Bob", Race.HUMAN), hobbit, ScriptedRandom([0.0, 0.1], ints=[0]))
    assert hobbit.health == 70
    assert report.messages[-1] == "Frodo health reduced to 70"


def test_orc_night_defence_gains_one_health():
    orc = make_character("Azog", Race.ORC)
    orc.is_night = True
    resolve_attack(make_character("Bob", Race.HUMAN), orc, ScriptedRandom([0.0, 0.0]))
    assert orc.health == 51


def test_defense_reaction_does_not_mutate():
    attacker = make_character("Bob", Race.HUMAN)
    elf = make_character("Legolas", Race.ELF)
    assert defense_reaction(Race.ELF, attacker, elf, False) == 1
    assert elf.health == 40


def test_hit_subtracts_attack_minus_defence():
    elf = make_character("Legolas", Race.ELF)
    human = make_character("Bob", Race.HUMAN)
    report = resolve_attack(elf, human, ScriptedRandom([0.0, 0.99]))
    assert report.outcome is Outcome.HIT
    assert report.damage == 20
    assert human.health == 40


def test_hit_floors_health_and_reports_defeat():
    elf = make_character("Legolas", Race.ELF)
    human = make_character("Bob", Race.HUMAN)
    human.health = 5
    report = resolve_attack(elf, human, ScriptedRandom([0.0, 0.99]))
    assert human.health == 0
    assert report.defeated


def test_hit_caps_health_at_total_health():
    elf = make_character("Legolas", Race.ELF)
    human = make_character("Bob", Race.HUMAN)
    human.pick_up(RING_OF_STRENGTH)
    resolve_attack(elf, human, ScriptedRandom([0.0, 0.99]))
    # 60 - 20 = 40 is above the ring-reduced maximum of 40 - 10
    assert human.health == 30


def test_attack_not_exceeding_defence_is_blocked():
    hobbit = make_character("Frodo", Race.HOBBIT)
    dwarf = make_character("Gimli", Race.DWARF)
    dwarf.pick_up(PLATE_ARMOUR)
    report = resolve_attack(hobbit, dwarf, ScriptedRandom([0.0, 0.99]))
    assert report.outcome is Outcome.BLOCKED
    assert report.damage == 0
    assert dwarf.health == 50
