#!/usr/bin/env python3
"""
Minesweeper board engine - console entry point.

Usage:
    python main.py play [--rows N] [--columns N] [--mines N] [--seed S]
    python main.py evaluate [--games N] [--rows N] [--columns N] [--mines N]
"""
import argparse
import sys
from pathlib import Path

# Allow running from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from board_engine import (
    BoardConfig,
    BoundsError,
    ConfigurationError,
    Game,
    SafeZone,
    render_board,
)
from playtest import Evaluator, RandomAgent


HELP_TEXT = "Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), q (quit)"


def _make_config(args: argparse.Namespace) -> BoardConfig:
    return BoardConfig(
        rows=args.rows,
        columns=args.columns,
        mine_count=args.mines,
        safe_zone=SafeZone[args.safe_zone.upper()],
    )


def _print_board(game: Game) -> None:
    print()
    print(render_board(game))
    print(
        f"Flags left: {game.remaining_flags} | "
        f"Moves: {game.elapsed_time} | "
        f"Status: {game.status.name}"
    )


def _handle_command(game: Game, command: str, row: int, column: int) -> None:
    if command == "r":
        changed = game.reveal(row, column)
    else:
        changed = game.toggle_flag(row, column)
    if changed:
        game.tick()


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    game = Game.from_config(_make_config(args), seed=args.seed)
    game.start()
    print(HELP_TEXT)
    _print_board(game)

    while True:
        try:
            line = input("> ").strip().lower()
        except EOFError:
            break
        parts = line.split()
        if not parts:
            continue

        if parts[0] == "q":
            break
        if parts[0] == "n":
            game.start()
            _print_board(game)
            continue
        if parts[0] not in ("r", "f") or len(parts) != 3:
            print(HELP_TEXT)
            continue

        try:
            row, column = int(parts[1]), int(parts[2])
        except ValueError:
            print(HELP_TEXT)
            continue
        try:
            _handle_command(game, parts[0], row, column)
        except BoundsError as exc:
            print(exc)
            continue

        _print_board(game)
        if game.is_won:
            print("\n*** WIN! ***  (n for a new game, q to quit)")
        elif game.is_lost:
            print("\n*** LOST (hit mine) ***  (n for a new game, q to quit)")


def evaluate(args: argparse.Namespace) -> None:
    """Play the random agent through many games and report results."""
    config = _make_config(args)
    evaluator = Evaluator(
        config,
        num_games=args.games,
        log_frequency=max(1, args.games // 10),
        verbose=True,
        seed=args.seed,
    )

    print(f"\nEvaluating random agent over {args.games} games...")
    stats = evaluator.evaluate(RandomAgent(config.rows, config.columns, seed=args.seed))

    print(f"Results ({config.rows}x{config.columns}, {config.mine_count} mines):")
    print(f"  Win rate: {stats.win_rate:.1%}")
    print(f"  Wins/Losses: {stats.wins}/{stats.losses}")
    print(f"  Avg steps: {stats.avg_steps:.1f}")
    print(f"  Avg revealed: {stats.avg_revealed:.1f} tiles")


def _add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--rows", type=int, default=9, help="Number of rows")
    parser.add_argument("--columns", type=int, default=9, help="Number of columns")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--safe-zone",
        choices=["lateral", "cell"],
        default="lateral",
        help="Cells kept mine-free by the first reveal",
    )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper board engine - play or playtest"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    _add_board_arguments(play_parser)

    eval_parser = subparsers.add_parser(
        "evaluate", help="Playtest with a random agent"
    )
    _add_board_arguments(eval_parser)
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()

    try:
        if args.command == "play":
            play(args)
        elif args.command == "evaluate":
            evaluate(args)
        else:
            parser.print_help()
    except ConfigurationError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
