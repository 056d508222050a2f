#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play SEED
    python main.py show SEED [--reveal INDEX ...] [--show-mines]
    python main.py demo [--seed SEED | --width W --height H --mines M]
"""
import argparse
import logging
import sys
import time
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import GameSession, parse_seed, initialize, reveal_index
from players import Evaluator, RandomPlayer


def print_session(session: GameSession) -> None:
    """Redraw the board, with the game-over banner once the game ends."""
    board = session.board
    if board is None:
        print("No game. Enter 'n SEED' to start one.")
        return
    print(board.render(show_mines=board.is_lost))
    if board.is_won:
        print("\nYou Won - enter 'r' to restart")
    elif board.is_lost:
        print("\nYou Lost - enter 'r' to restart")


def parse_move(text: str, width: int) -> int:
    """Read 'row col' or a flat index."""
    parts = text.replace(",", " ").split()
    if len(parts) == 2:
        row, col = (int(part) for part in parts)
        if not 0 <= col < width:
            return -1
        return row * width + col
    return int(parts[0])


def play(args: argparse.Namespace) -> None:
    """Play interactively from a seed."""
    session = GameSession()
    session.subscribe(print_session)

    result = session.start(args.seed)
    if not result.ok:
        print(f"Invalid seed: {result.detail}")

    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            break

        if line in ("q", "quit"):
            break
        if line in ("r", "restart"):
            session.restart()
            continue
        if line.startswith("n "):
            result = session.start(line[2:])
            if not result.ok:
                print(f"Invalid seed: {result.detail}")
            continue
        if session.board is None:
            print("No game. Enter 'n SEED' to start one.")
            continue
        if session.is_over or not line:
            continue

        try:
            index = parse_move(line, session.board.width)
        except ValueError:
            print("Enter 'row col', a cell index, 'n SEED', 'r' or 'q'")
            continue
        if not session.click(index):
            print("Nothing to reveal there")


def show(args: argparse.Namespace) -> None:
    """Apply reveals to a seeded board and print it."""
    result = parse_seed(args.seed)
    if not result.ok:
        print(f"Invalid seed ({result.error.value}): {result.detail}")
        sys.exit(1)

    board = initialize(result.config)
    for index in args.reveal:
        reveal_index(board, index)

    print(board.render(show_mines=args.show_mines))
    print(f"\nStatus: {board.status.name}")


def demo(args: argparse.Namespace) -> None:
    """Watch the random player."""
    config = None
    width, height, mines = args.width, args.height, args.mines
    if args.seed:
        result = parse_seed(args.seed)
        if not result.ok:
            print(f"Invalid seed: {result.detail}")
            sys.exit(1)
        config = result.config
        width, height = config.width, config.height

    evaluator = Evaluator(
        config=config,
        width=width,
        height=height,
        num_mines=mines,
        num_episodes=args.games,
        seed=args.rng_seed,
    )
    player = RandomPlayer(height, width, seed=args.rng_seed)

    def on_step(env) -> None:
        print(env.board.render(show_mines=env.board.is_lost))
        print(f"Status: {env.board.status.name}\n")
        time.sleep(args.delay)

    results = evaluator.evaluate(player, on_step=on_step if args.delay > 0 else None)

    print(f"Results over {args.games} games:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - seeded mine-avoidance puzzle"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log engine transitions"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play interactively")
    play_parser.add_argument("seed", help="Seed such as 9,9,3,17,40")

    show_parser = subparsers.add_parser("show", help="Print a seeded board")
    show_parser.add_argument("seed", help="Seed such as 9,9,3,17,40")
    show_parser.add_argument(
        "--reveal", type=int, nargs="*", default=[], help="Cell indices to reveal"
    )
    show_parser.add_argument(
        "--show-mines", action="store_true", help="Draw hidden mines"
    )

    demo_parser = subparsers.add_parser("demo", help="Watch the random player")
    demo_parser.add_argument("--seed", default=None, help="Replay this board")
    demo_parser.add_argument("--width", type=int, default=9)
    demo_parser.add_argument("--height", type=int, default=9)
    demo_parser.add_argument("--mines", type=int, default=10)
    demo_parser.add_argument("--games", type=int, default=5, help="Number of games")
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves (0 = quiet)"
    )
    demo_parser.add_argument("--rng-seed", type=int, default=None)

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == "play":
        play(args)
    elif args.command == "show":
        show(args)
    elif args.command == "demo":
        demo(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
