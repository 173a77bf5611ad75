"""Tests for board population."""

import os
import random
import sys

import pytest

# Ensure project root is on sys.path for direct imports
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from core.data import ENEMIES, LOOT_TABLE
from core.grid import Board, populate_board
from core.models import Race, make_character


def fresh_roster():
    return [make_character(name, race) for name, race in ENEMIES]


@pytest.mark.parametrize("seed", range(25))
def test_enemies_never_share_and_items_avoid_enemies(seed):
    board = populate_board(fresh_roster(), list(LOOT_TABLE), Board(12, 12), rng=random.Random(seed))
    enemy_cells = [(r, c) for r, c, _ in board.iter_enemies()]
    assert len(enemy_cells) == len(ENEMIES)
    item_cells = [
        (r, c) for r, row in enumerate(board.grid) for c, sq in enumerate(row) if sq.item is not None
    ]
    assert len(item_cells) == len(LOOT_TABLE)
    assert not set(enemy_cells) & set(item_cells)


def test_full_board_places_everything():
    capacity = len(ENEMIES) + len(LOOT_TABLE)
    board = populate_board(fresh_roster(), list(LOOT_TABLE), Board(capacity, 1), rng=random.Random(7))
    assert all(not sq.is_empty() for sq in board.grid[0])
    assert all(sq.enemy is None or sq.item is None for sq in board.grid[0])


def test_same_seed_gives_same_layout():
    first = populate_board(fresh_roster(), list(LOOT_TABLE), Board(6, 6), rng=random.Random(1337))
    second = populate_board(fresh_roster(), list(LOOT_TABLE), Board(6, 6), rng=random.Random(1337))
    assert first.grid == second.grid


def test_squares_reference_the_pools():
    roster = fresh_roster()
    board = populate_board(roster, list(LOOT_TABLE), Board(5, 5), rng=random.Random(3))
    found = {enemy.name for _, _, enemy in board.iter_enemies()}
    assert found == {name for name, _ in ENEMIES}
    for r, c, enemy in board.iter_enemies():
        assert board.enemy_at(r, c) is enemy
        assert any(enemy is original for original in roster)


def test_legacy_mode_reseeds_from_clock(monkeypatch):
    seeds = []

    class RecordingRandom(random.Random):
        def seed(self, a=None, version=2):
            seeds.append(a)
            super().seed(a, version)

    monkeypatch.setattr("core.grid.time.time", lambda: 424242.0)
    rng = RecordingRandom(1)
    seeds.clear()
    populate_board(fresh_roster(), [], Board(4, 4), rng=rng, reseed=True)
    assert seeds == [424242.0]


def test_orcs_lists_only_orcs_on_board():
    board = populate_board(fresh_roster(), [], Board(4, 4), rng=random.Random(9))
    orcs = board.orcs()
    assert [o.race for o in orcs] == [Race.ORC]
    r, c = next((r, c) for r, c, e in board.iter_enemies() if e.race is Race.ORC)
    board.clear_enemy(r, c)
    assert board.orcs() == []


def test_render_symbols():
    board = Board(3, 1)
    board.enemies.append(make_character("Bob", Race.HUMAN))
    board.items.append(LOOT_TABLE[0])
    board.square(0, 0).player = True
    board.square(0, 1).enemy = 0
    board.square(0, 2).item = 0
    assert board.render() == "|#||*||+|"
