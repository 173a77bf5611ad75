#!/usr/bin/env python3
"""
adventure_cli.py - console client for the grid adventure
========================================================

Usage:
    python adventure_cli.py --name Aragorn --race human
    python adventure_cli.py --width 8 --height 8 --seed 1337
    python adventure_cli.py --legacy-seed -v
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List

from core import config
from core.data import ENEMIES, LOOT_TABLE
from core.game import Game, new_game
from core.models import Race, make_character

logger = logging.getLogger(__name__)

MOVE_KEYS = {"w": "up", "s": "down", "a": "left", "d": "right"}
DROP_KEYS = {"1": "weapon", "2": "armour", "3": "shield", "4": "ring"}

HELP_TEXT = "w/a/s/d = move, g = pickup, j = attack, h = drop, k = look, l = inventory, x = exit"


def _reply(game: Game, *lines: str) -> List[str]:
    game.note(*lines)
    return list(lines)


def handle_command(cmd: str, game: Game) -> List[str]:
    """Dispatch one console command to ``game`` and return the messages it produced.

    Drops take their arguments inline: ``h <slot> [ring number]`` with slot
    1=Weapon 2=Armour 3=Shield 4=Ring and a one-based ring number.
    """
    parts = cmd.strip().lower().split()
    if not parts:
        return _reply(game, "Invalid command! Please enter one of the following:", HELP_TEXT)
    head, args = parts[0], parts[1:]
    if head in MOVE_KEYS:
        return game.move(MOVE_KEYS[head])
    if head == "g":
        return game.pick_up()
    if head == "j":
        return game.attack()
    if head == "k":
        return game.look()
    if head == "l":
        return game.inventory()
    if head == "x":
        return game.quit()
    if head == "h":
        if not args or args[0] not in DROP_KEYS:
            return _reply(game, "Drop what? (1=Weapon, 2=Armour, 3=Shield, 4=Ring)")
        slot = DROP_KEYS[args[0]]
        if slot != "ring" or len(args) < 2:
            return game.drop(slot)
        try:
            ring_number = int(args[1])
        except ValueError:
            ring_number = 0
        return game.drop(slot, ring_number - 1)
    return _reply(game, "Invalid command! Please enter one of the following:", HELP_TEXT)


def choose_race() -> Race:
    races = list(Race)
    while True:
        print("Select race of player: ")
        for i, race in enumerate(races, start=1):
            print(f"{i}.")
            print(make_character(race.value, race).describe())
        choice = input("Enter your choice (1-5): ").strip()
        if choice.isdigit() and 1 <= int(choice) <= len(races):
            return races[int(choice) - 1]
        print("Invalid Choice! Please enter a number between 1 and 5.")


def play(game: Game) -> None:
    print("\n".join(game.status()))
    print(game.board.render())
    while not game.over:
        print(f"Enter command ({HELP_TEXT}): ")
        print(f"Current Time: {game.clock.label}")
        try:
            cmd = input("> ")
        except EOFError:
            break
        if cmd.strip().lower() == "h":
            cmd += " " + input("Drop what? (1=Weapon, 2=Armour, 3=Shield, 4=Ring): ")
            if cmd.split()[-1] == "4" and game.player.rings:
                print(game.drop("ring")[0])
                cmd += " " + input("> ")
        for line in handle_command(cmd, game):
            print(line)
        print("\n".join(game.status()))
        print(game.board.render())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turn-based grid adventure")
    parser.add_argument("--name", help="Player name (prompted when omitted)")
    parser.add_argument("--race", choices=[r.value.lower() for r in Race],
                        help="Player race (prompted when omitted)")
    parser.add_argument("--width", type=int, default=config.GRID_W, help="Board width")
    parser.add_argument("--height", type=int, default=config.GRID_H, help="Board height")
    parser.add_argument("--seed", type=int, default=config.SEED, help="Seed for repeatable games")
    parser.add_argument("--legacy-seed", action="store_true", default=config.LEGACY_RESEED,
                        help="Reseed from the wall clock when populating the board (not with --seed)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    if args.seed is not None and args.legacy_seed:
        # Legacy reseeding would overwrite the requested seed
        print("--seed cannot be combined with --legacy-seed.", file=sys.stderr)
        return 2
    capacity = len(ENEMIES) + len(LOOT_TABLE)
    if args.width < 1 or args.height < 1 or args.width * args.height < capacity:
        # populate_board would never finish placing everything
        print(f"Board must have at least {capacity} squares.", file=sys.stderr)
        return 2
    rng = random.Random(args.seed) if args.seed is not None else None
    name = args.name or input("Enter Name: ").strip() or "Player"
    race = Race.parse(args.race) if args.race else choose_race()
    game = new_game(name, race, width=args.width, height=args.height, rng=rng, reseed=args.legacy_seed)
    print("You selected: " + game.player.describe())
    play(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())
