#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--difficulty LEVEL | --rows R --cols C --mines M]
    python main.py demo [--player {random,rule}] [--games N]
    python main.py scores [--difficulty LEVEL]
"""
import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import (  # noqa: E402
    BoardConfig,
    Difficulty,
    Game,
    GameStatus,
    HighscoreTable,
    MinesweeperEnv,
    config_for,
    parse_key,
)
from minefield.render import render_board, render_header  # noqa: E402
from players import RandomPlayer, RulePlayer  # noqa: E402


DEFAULT_SCORES = Path.home() / ".minefield" / "highscores.json"

HELP_TEXT = (
    "Commands: r ROW-COL (reveal), f ROW-COL (flag), c ROW-COL (chord), "
    "n (new game), q (quit)"
)


def _is_custom(args: argparse.Namespace) -> bool:
    return any(v is not None for v in (args.rows, args.cols, args.mines))


def _resolve_config(args: argparse.Namespace) -> BoardConfig:
    """Board config from --difficulty or explicit dimensions."""
    if _is_custom(args):
        preset = config_for(Difficulty.BEGINNER)
        return BoardConfig(
            rows=args.rows if args.rows is not None else preset.rows,
            cols=args.cols if args.cols is not None else preset.cols,
            mines=args.mines if args.mines is not None else preset.mines,
        )
    return config_for(args.difficulty)


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    scores = HighscoreTable(args.scores)
    try:
        config = _resolve_config(args)
    except ValueError as e:
        print(f"Invalid board: {e}")
        return
    difficulty = (
        Difficulty.CUSTOM if _is_custom(args) else Difficulty(args.difficulty)
    )

    game = Game(difficulty, config, on_win=scores.record_win)
    print(HELP_TEXT)

    while True:
        print()
        print(render_header(game.state, game.elapsed_seconds()))
        print(render_board(game.state))

        if game.status == GameStatus.WON:
            print(f"You won in {game.elapsed_seconds()} seconds!")
        elif game.status == GameStatus.LOST:
            print("Game over! Try again!")

        try:
            line = input("> ").strip()
        except EOFError:
            break
        if not line:
            continue

        command, _, target = line.partition(" ")
        command = command.lower()
        if command == "q":
            break
        if command == "n":
            game.reset_game()
            continue

        try:
            key = parse_key(target.strip())
        except ValueError:
            print(HELP_TEXT)
            continue

        if command == "r":
            game.reveal_cell(key)
        elif command == "f":
            game.toggle_flag(key)
        elif command == "c":
            game.auto_open(key)
        else:
            print(HELP_TEXT)


def demo(args: argparse.Namespace) -> None:
    """Let an automated player play several games."""
    config = config_for(args.difficulty)
    env = MinesweeperEnv(config=config, render_mode="ansi")

    if args.player == "random":
        player = RandomPlayer(config.rows, config.cols, seed=args.seed)
    else:
        player = RulePlayer(config.rows, config.cols, seed=args.seed)

    wins = 0
    for game_number in range(args.games):
        seed = None if args.seed is None else args.seed + game_number
        obs, _ = env.reset(seed=seed)
        player.reset()
        done = False
        info = {}

        while not done:
            action = player.select_action(obs, env.get_action_mask())
            obs, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        if info.get("game_state") == GameStatus.WON.value:
            wins += 1
        print(
            f"Game {game_number + 1}/{args.games}: {info.get('game_state')} "
            f"after {info.get('steps')} steps"
        )

    print(f"\nWins: {wins}/{args.games} ({wins / args.games:.0%})")


def scores(args: argparse.Namespace) -> None:
    """Print best times."""
    table = HighscoreTable(args.scores)
    difficulties = (
        [Difficulty(args.difficulty)] if args.difficulty else list(Difficulty)
    )

    for difficulty in difficulties:
        print(f"{difficulty.value}:")
        entries = table.get(difficulty)
        if not entries:
            print("  (no times yet)")
        for rank, entry in enumerate(entries, start=1):
            print(f"  {rank:>2}. {entry.time:>4}s  {entry.name:<12} {entry.date}")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Play Minesweeper in the terminal"
    )
    parser.add_argument(
        "--log-level", default="WARNING", help="Logging level (e.g. DEBUG)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    levels = [d.value for d in Difficulty if d != Difficulty.CUSTOM]

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--difficulty", choices=levels, default="BEGINNER", help="Preset"
    )
    play_parser.add_argument("--rows", type=int, help="Custom row count")
    play_parser.add_argument("--cols", type=int, help="Custom column count")
    play_parser.add_argument("--mines", type=int, help="Custom mine count")
    play_parser.add_argument(
        "--scores", type=Path, default=DEFAULT_SCORES, help="Best-times file"
    )

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Watch a player")
    demo_parser.add_argument(
        "--player", choices=["random", "rule"], default="rule"
    )
    demo_parser.add_argument(
        "--difficulty", choices=levels, default="BEGINNER", help="Preset"
    )
    demo_parser.add_argument(
        "--games", type=int, default=10, help="Number of games to play"
    )
    demo_parser.add_argument("--seed", type=int, default=None)

    # Scores command
    scores_parser = subparsers.add_parser("scores", help="Show best times")
    scores_parser.add_argument(
        "--difficulty", choices=[d.value for d in Difficulty], default=None
    )
    scores_parser.add_argument(
        "--scores", type=Path, default=DEFAULT_SCORES, help="Best-times file"
    )

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper())

    if args.command == "play":
        play(args)
    elif args.command == "demo":
        demo(args)
    elif args.command == "scores":
        scores(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
