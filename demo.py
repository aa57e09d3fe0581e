#!/usr/bin/env python3
"""
Watch an automated player work through a few boards.

Usage:
    python demo.py [--difficulty LEVEL] [--player {random,rule}] [--delay S]
"""
import argparse
import os
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import Difficulty, GameStatus, MinesweeperEnv, config_for  # noqa: E402
from minefield.render import render_header  # noqa: E402
from players import BasePlayer, RandomPlayer, RulePlayer  # noqa: E402


MOVE_NAMES = ("reveal", "flag", "chord")


def redraw(env: MinesweeperEnv, title: str, caption: str = "") -> None:
    """Clear the terminal and draw the header, board and a caption."""
    os.system("cls" if os.name == "nt" else "clear")
    print(title)
    print(render_header(env.game.state, env.game.elapsed_seconds()))
    print(env.render())
    if caption:
        print(caption)


def watch_game(
    env: MinesweeperEnv, player: BasePlayer, title: str, delay: float
) -> GameStatus:
    """Play one game to the end, redrawing after every move."""
    obs, _ = env.reset()
    player.reset()
    redraw(env, title)

    terminated = truncated = False
    while not (terminated or truncated):
        time.sleep(delay)
        action = player.select_action(obs, env.get_action_mask())
        action_type, row, col = player.decode(action)
        obs, _, terminated, truncated, _ = env.step(action)
        redraw(env, title, f"{MOVE_NAMES[action_type]} {row}-{col}")

    return env.game.status


def main() -> None:
    levels = [d.value for d in Difficulty if d != Difficulty.CUSTOM]
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--difficulty", choices=levels, default="BEGINNER")
    parser.add_argument("--player", choices=["random", "rule"], default="rule")
    parser.add_argument("--games", type=int, default=5)
    parser.add_argument(
        "--delay", type=float, default=0.3, help="Seconds between moves"
    )
    args = parser.parse_args()

    config = config_for(args.difficulty)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    player_cls = RulePlayer if args.player == "rule" else RandomPlayer
    player = player_cls(config.rows, config.cols)

    results = []
    for number in range(1, args.games + 1):
        title = f"{args.difficulty} game {number}/{args.games}"
        status = watch_game(env, player, title, args.delay)
        results.append(status)
        print("Cleared!" if status == GameStatus.WON else "Boom.")
        time.sleep(1.0)

    wins = results.count(GameStatus.WON)
    print(f"\n{args.player} player won {wins} of {args.games}")


if __name__ == "__main__":
    main()
