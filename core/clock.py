"""Day/night cycle driven by the player's command count."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from . import config
from .models import Character

logger = logging.getLogger(__name__)


def is_night_at(command_count: int) -> bool:
    return command_count % config.DAY_NIGHT_CYCLE >= config.DAY_NIGHT_PERIOD


def toggle_time_of_day(is_night: bool, orcs: Iterable[Character]) -> None:
    """Overwrite every orc's attack/defence quadruple for the given time of day."""
    attack, attack_chance, defence, defence_chance = (
        config.ORC_NIGHT_STATS if is_night else config.ORC_DAY_STATS
    )
    for orc in orcs:
        orc.is_night = is_night
        orc.attack = attack
        orc.attack_chance = attack_chance
        orc.defence = defence
        orc.defence_chance = defence_chance


@dataclass
class DayNightClock:
    command_count: int = 0
    is_night: bool = False

    def tick(self) -> None:
        self.command_count += 1

    def sync(self, orcs: Iterable[Character]) -> str | None:
        """Flip to the time of day the command count calls for.

        Orc stats are only rewritten on a transition. Returns the announcement
        for a flip, ``None`` when nothing changed.
        """
        night = is_night_at(self.command_count)
        if night == self.is_night:
            return None
        self.is_night = night
        toggle_time_of_day(night, orcs)
        logger.debug("Time of day flipped at command %d: night=%s", self.command_count, night)
        return "It is now night." if night else "It is now daytime."

    @property
    def label(self) -> str:
        return "Night" if self.is_night else "Day"
