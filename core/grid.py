"""Grid board, squares and random enemy/item placement."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from .models import Character, Race

logger = logging.getLogger(__name__)


@dataclass
class Square:
    # Indices into Board.enemies / Board.items; the square never owns them.
    enemy: int | None = None
    item: int | None = None
    player: bool = False

    def is_empty(self) -> bool:
        return self.enemy is None and self.item is None and not self.player


@dataclass
class Board:
    width: int
    height: int
    grid: List[List[Square]] = field(init=False)
    enemies: List[Character] = field(default_factory=list)
    items: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.grid = [[Square() for _ in range(self.width)] for _ in range(self.height)]

    def square(self, row: int, col: int) -> Square:
        return self.grid[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def enemy_at(self, row: int, col: int) -> Character | None:
        idx = self.grid[row][col].enemy
        return None if idx is None else self.enemies[idx]

    def item_at(self, row: int, col: int):
        idx = self.grid[row][col].item
        return None if idx is None else self.items[idx]

    def clear_enemy(self, row: int, col: int) -> None:
        self.grid[row][col].enemy = None

    def clear_item(self, row: int, col: int) -> None:
        self.grid[row][col].item = None

    def iter_enemies(self) -> Iterator[Tuple[int, int, Character]]:
        """Yield ``(row, col, enemy)`` for every enemy still on the board."""
        for r, row in enumerate(self.grid):
            for c, sq in enumerate(row):
                if sq.enemy is not None:
                    yield r, c, self.enemies[sq.enemy]

    def orcs(self) -> List[Character]:
        return [enemy for _, _, enemy in self.iter_enemies() if enemy.race is Race.ORC]

    def has_enemies(self) -> bool:
        return any(True for _ in self.iter_enemies())

    def render(self) -> str:
        """ASCII board: ``#`` player, ``*`` enemy, ``+`` item."""
        lines = []
        for row in self.grid:
            cells = []
            for sq in row:
                mark = "#" if sq.player else "*" if sq.enemy is not None else "+" if sq.item is not None else " "
                cells.append(f"|{mark}|")
            lines.append("".join(cells))
        return "\n".join(lines)


def populate_board(enemies, items, board: Board, rng=None, reseed: bool = False) -> Board:
    """Scatter ``enemies`` then ``items`` across ``board``.

    Each enemy lands on a uniformly random square without an enemy; each item
    on a square holding neither an enemy nor an item. The caller must ensure
    ``len(enemies) + len(items) <= width * height``: the retry loop never
    terminates otherwise.

    ``rng`` is any object with ``randrange``/``seed`` (defaults to the
    module-level generator). With ``reseed`` the generator is reseeded from
    wall-clock time on every call.
    """
    rng = rng or random
    if reseed:
        rng.seed(time.time())
    for enemy in enemies:
        board.enemies.append(enemy)
        idx = len(board.enemies) - 1
        row, col = rng.randrange(board.height), rng.randrange(board.width)
        while board.grid[row][col].enemy is not None:
            row, col = rng.randrange(board.height), rng.randrange(board.width)
        board.grid[row][col].enemy = idx
        logger.debug("Placed %s at (%d, %d)", enemy.name, row, col)
    for item in items:
        board.items.append(item)
        idx = len(board.items) - 1
        row, col = rng.randrange(board.height), rng.randrange(board.width)
        sq = board.grid[row][col]
        while sq.enemy is not None or sq.item is not None:
            row, col = rng.randrange(board.height), rng.randrange(board.width)
            sq = board.grid[row][col]
        sq.item = idx
        logger.debug("Placed %s at (%d, %d)", item.name, row, col)
    return board
