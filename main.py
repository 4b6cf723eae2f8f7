#!/usr/bin/env python3
"""
Minesweeper cascade - Main entry point.

Usage:
    python main.py demo [--height H] [--width W]
    python main.py render --mines R,C ... [--reveal R,C ...]
"""
import argparse
import logging
from typing import List, Optional, Sequence

from src.sweeper.board import Board, BoardConfig, Coordinate, LARGEST
from src.sweeper.render import render_grid


DEMO_MINES: List[Coordinate] = [
    (0, 0), (0, 7), (0, 9), (0, 10), (2, 0), (3, 3), (3, 7),
    (4, 9), (5, 11), (6, 1), (6, 2), (6, 3), (7, 8), (7, 10),
]
DEMO_REVEALS: List[Coordinate] = [(5, 7), (3, 0)]


def parse_coordinate(text: str) -> Coordinate:
    """Parse a "row,col" argument."""
    try:
        row, col = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Expected ROW,COL but got {text!r}"
        ) from None
    return row, col


def play(
    config: BoardConfig,
    mines: Sequence[Coordinate],
    reveals: Sequence[Coordinate],
) -> Board:
    """Build a board, place the mines, and print it after every reveal."""
    board = Board(config)
    placed = board.place_mines(mines)
    print(f"Board: {config.height}x{config.width} with {placed} mines")

    for row, col in reveals:
        result = board.reveal(row, col)
        print(f"\nReveal ({row}, {col}): {result.name}")
        print(render_grid(board))

    print(f"\nPlayer alive: {board.is_player_alive}")
    print(f"Game state: {board.game_state.name}")
    return board


def demo(args: argparse.Namespace) -> None:
    """Run the fixed sample layout."""
    play(BoardConfig(args.height, args.width), DEMO_MINES, DEMO_REVEALS)


def render(args: argparse.Namespace) -> None:
    """Render a board built from command-line coordinates."""
    play(BoardConfig(args.height, args.width), args.mines, args.reveal)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Minesweeper cascade - place mines and reveal cells"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run the sample layout")
    demo_parser.add_argument(
        "--height", type=int, default=LARGEST.height, help="Number of rows"
    )
    demo_parser.add_argument(
        "--width", type=int, default=LARGEST.width, help="Number of columns"
    )

    # Render command
    render_parser = subparsers.add_parser(
        "render", help="Place mines, reveal cells and print the board"
    )
    render_parser.add_argument(
        "--height", type=int, default=LARGEST.height, help="Number of rows"
    )
    render_parser.add_argument(
        "--width", type=int, default=LARGEST.width, help="Number of columns"
    )
    render_parser.add_argument(
        "--mines", type=parse_coordinate, nargs="*", default=[],
        metavar="ROW,COL", help="Mine positions",
    )
    render_parser.add_argument(
        "--reveal", type=parse_coordinate, nargs="*", default=[],
        metavar="ROW,COL", help="Cells to reveal, in order",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command in ("demo", "render"):
        try:
            config = BoardConfig(args.height, args.width)
        except ValueError as exc:
            parser.error(str(exc))
        if not config.within_limits:
            parser.error(
                f"Board size {config.height}x{config.width} "
                f"is outside the supported limits"
            )

    if args.command == "demo":
        demo(args)
    elif args.command == "render":
        render(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
