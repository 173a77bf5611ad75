"""Game object holding the board, the player and the command handlers."""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, List

from . import config
from .clock import DayNightClock
from .combat import resolve_attack
from .data import ENEMIES, LOOT_TABLE
from .grid import Board, populate_board
from .models import Character, Race, make_character

logger = logging.getLogger(__name__)

# direction -> (row delta, col delta, edge name)
DIRECTIONS = {
    "up": (-1, 0, "top"),
    "down": (1, 0, "bottom"),
    "left": (0, -1, "left"),
    "right": (0, 1, "right"),
}


@dataclass
class Game:
    """Container for one play session.

    Front ends call the command methods and display the messages they
    return; the most recent messages are also kept in :attr:`log`.
    """

    board: Board
    player: Character
    row: int = 0
    col: int = 0
    gold: int = 0
    clock: DayNightClock = field(default_factory=DayNightClock)
    rng: Any = None
    over: bool = False
    won: bool = False
    log: Deque[str] = field(default_factory=lambda: deque(maxlen=config.LOG_HISTORY_LIMIT))

    def __post_init__(self) -> None:
        self.board.square(self.row, self.col).player = True

    # ---- Bookkeeping ----
    def _finish(self, messages: List[str], counted: bool = True) -> List[str]:
        if counted:
            self.clock.tick()
        announcement = self.clock.sync(self.board.orcs())
        if announcement:
            messages.append(announcement)
        self.log.extend(messages)
        return messages

    def note(self, *lines: str) -> None:
        """Add front-end lines to the message log without spending a command."""
        self.log.extend(lines)

    def _describe_square(self) -> List[str]:
        lines = []
        enemy = self.board.enemy_at(self.row, self.col)
        item = self.board.item_at(self.row, self.col)
        if enemy:
            lines.append("*** You've encountered an enemy! ***")
            lines.append(enemy.describe())
        if item:
            lines.append("*** You've found an item! ***")
            lines.append(item.describe())
        return lines

    # ---- Commands ----
    def move(self, direction: str) -> List[str]:
        if direction not in DIRECTIONS:
            return self._finish([f"Unknown direction: {direction}"], counted=False)
        d_row, d_col, edge = DIRECTIONS[direction]
        messages = [f"moving {direction}"]
        new_row, new_col = self.row + d_row, self.col + d_col
        if self.board.in_bounds(new_row, new_col):
            self.board.square(self.row, self.col).player = False
            self.row, self.col = new_row, new_col
            self.board.square(self.row, self.col).player = True
            messages.extend(self._describe_square())
        else:
            messages.append(f"Cannot move {direction}! You're at the {edge} edge of the board.")
        return self._finish(messages)

    def pick_up(self) -> List[str]:
        item = self.board.item_at(self.row, self.col)
        if item is None:
            return self._finish(["No item here!"])
        result = self.player.pick_up(item)
        if result:
            self.board.clear_item(self.row, self.col)
        return self._finish([result.message])

    def attack(self) -> List[str]:
        enemy = self.board.enemy_at(self.row, self.col)
        if enemy is None:
            return self._finish(["No enemy to attack"])
        messages = [self.player.describe(), enemy.describe()]
        report = resolve_attack(self.player, enemy, self.rng)
        messages.extend(report.messages)
        if enemy.is_defeated:
            self.board.clear_enemy(self.row, self.col)
            self.gold += config.GOLD_PER_KILL
            messages.append(f"{enemy.race.value} Defeated!  Received {config.GOLD_PER_KILL} gold!")
            logger.info("%s defeated %s", self.player.name, enemy.name)
            if not self.board.has_enemies():
                messages.append("Congratulations! You defeated all the enemies and won the game!")
                self.over = True
                self.won = True
            return self._finish(messages)
        counter = resolve_attack(enemy, self.player, self.rng)
        messages.extend(counter.messages)
        if self.player.is_defeated:
            messages.append("You Died! Game over!")
            self.over = True
        return self._finish(messages)

    def drop(self, slot: str, ring_index: int | None = None) -> List[str]:
        """Drop an equipped item. ``ring_index`` is zero-based."""
        if slot == "weapon":
            result = self.player.drop_weapon()
        elif slot == "armour":
            result = self.player.drop_armour()
        elif slot == "shield":
            result = self.player.drop_shield()
        elif slot == "ring":
            if not self.player.rings:
                return self._finish(["No rings to drop."])
            if ring_index is None:
                choices = "  ".join(f"{i}) {r.name}" for i, r in enumerate(self.player.rings, start=1))
                return self._finish([f"Which ring? {choices}"], counted=False)
            result = self.player.drop_ring(ring_index)
        else:
            return self._finish(["Invalid choice! Please choose weapon, armour, shield or ring."])
        return self._finish([result.message])

    def look(self) -> List[str]:
        messages = ["Information about current square:"]
        enemy = self.board.enemy_at(self.row, self.col)
        item = self.board.item_at(self.row, self.col)
        if enemy:
            messages += ["Enemy here:", enemy.describe()]
        if item:
            messages += ["Item here:", item.describe()]
        # The player is not counted as an occupant of the square being examined
        if not enemy and not item:
            messages.append("Square is empty!")
        return self._finish(messages)

    def inventory(self) -> List[str]:
        messages = self.player.describe_equipment()
        messages.append(f"Total gold collected: {self.gold}")
        return self._finish(messages)

    def quit(self) -> List[str]:
        self.over = True
        return self._finish(["Exit"], counted=False)

    def status(self) -> List[str]:
        return [
            f"Current location: {self.row} {self.col}",
            self.player.describe(),
            f"Gold: {self.gold}",
            f"Current Time: {self.clock.label}",
        ]


def new_game(player_name: str, race: Race | str, width: int = config.GRID_W,
             height: int = config.GRID_H, rng=None, reseed: bool = False) -> Game:
    """Build a populated board with the default roster and place the player at (0, 0)."""
    board = Board(width, height)
    enemies = [make_character(name, enemy_race) for name, enemy_race in ENEMIES]
    populate_board(enemies, list(LOOT_TABLE), board, rng=rng, reseed=reseed)
    player = make_character(player_name, race)
    logger.info("New %dx%d game for %s the %s", width, height, player.name, player.race.value)
    return Game(board=board, player=player, rng=rng)
