"""Turn-based attack resolution and race-specific defence reactions."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .models import Character, Race

logger = logging.getLogger(__name__)


class Outcome(Enum):
    MISS = "miss"
    DEFENDED = "defended"
    HIT = "hit"
    BLOCKED = "blocked"


@dataclass
class AttackReport:
    attacker: str
    defender: str
    outcome: Outcome
    damage: int = 0
    # Health change caused by a defence reaction
    health_delta: int = 0
    defeated: bool = False
    messages: List[str] = field(default_factory=list)


def defense_reaction(race: Race, attacker: Character, defender: Character,
                     is_night: bool, rng=None) -> int:
    """Return the health change a successful defence causes for ``defender``."""
    rng = rng or random
    if race is Race.ELF:
        return 1
    if race is Race.HOBBIT:
        return -rng.randint(0, 5)
    if race is Race.ORC:
        if is_night:
            return 1
        # Base stats only; equipment plays no part in the orc's daytime wound
        return -(max(0, attacker.attack - defender.defence) // 4)
    return 0


def resolve_attack(attacker: Character, defender: Character, rng=None) -> AttackReport:
    """Resolve one attack of ``attacker`` on ``defender``, mutating defender health."""
    rng = rng or random
    report = AttackReport(attacker.name, defender.name, Outcome.MISS)
    report.messages.append(f"{attacker.name} attacks {defender.name}")

    attack_roll = rng.random()
    if attack_roll > attacker.attack_chance:
        logger.debug("%s missed (roll %.3f > %.3f)", attacker.name, attack_roll, attacker.attack_chance)
        report.messages.append(f"{attacker.name} missed!")
        return report

    defence_roll = rng.random()
    if defence_roll < defender.defence_chance:
        report.outcome = Outcome.DEFENDED
        report.messages.append(f"{defender.name} defended successfully!")
        delta = defense_reaction(defender.race, attacker, defender, defender.is_night, rng)
        # Hobbits always report their health, even after a roll of 0
        if delta or defender.race is Race.HOBBIT:
            before = defender.health
            defender.change_health(delta)
            report.health_delta = defender.health - before
            direction = "increased" if delta > 0 else "reduced"
            report.messages.append(f"{defender.name} health {direction} to {defender.health}")
        logger.debug("%s defended (roll %.3f), health delta %d", defender.name, defence_roll, report.health_delta)
    else:
        attack, defence = attacker.total_attack, defender.total_defence
        if attack > defence:
            report.outcome = Outcome.HIT
            report.damage = attack - defence
            defender.change_health(-report.damage)
            if defender.health > defender.total_health:
                defender.health = max(0, defender.total_health)
            report.messages.append(f"{defender.name} takes {report.damage} hits of damage")
            report.messages.append(f"{defender.name} health: {defender.total_health}")
        else:
            report.outcome = Outcome.BLOCKED
            report.messages.append(f"{defender.name} blocked the attack")

    if defender.is_defeated:
        report.defeated = True
        report.messages.append(f"{defender.name} defeated")
    return report
