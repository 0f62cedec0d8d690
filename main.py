#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--rows N] [--cols N] [--mines N] [--log FILE]
    python main.py frame [--clicks N] [--out FILE]
"""
import argparse
import json
from pathlib import Path
from typing import Any, Dict, List

import numpy as np

from src.minesweeper.board import BoardConfig, new_board
from src.minesweeper.environment import ClickEnv, PRIMARY_BUTTON
from src.minesweeper.ui import InputAdapter, TextRenderer


HELP_TEXT = """Commands:
  click PX PY   reveal the cell under canvas pixel (PX, PY)
  flag PX PY    toggle a flag under canvas pixel (PX, PY)
  reveal ROW COL
  mark ROW COL  toggle a flag on (ROW, COL)
  show          print the board
  quit"""


def make_config(args: argparse.Namespace) -> BoardConfig:
    """Build a board configuration from command line options."""
    return BoardConfig(
        width=args.cols,
        height=args.rows,
        num_mines=args.mines,
        cell_size=args.cell_size,
    )


def play(args: argparse.Namespace) -> None:
    """Play a game interactively in the terminal."""
    config = make_config(args)
    rng = np.random.default_rng(args.seed)
    board = new_board(config, rng=rng)
    renderer = TextRenderer(config.height, config.width, config.cell_size)

    events: List[Dict[str, Any]] = []

    def on_mine_revealed(row: int, col: int) -> None:
        print(f"Boom! Mine at ({row}, {col})")
        events[-1]["mine"] = True

    adapter = InputAdapter(
        board, renderer,
        cell_size=config.cell_size,
        on_mine_revealed=on_mine_revealed,
    )
    adapter.draw_board()

    print(
        f"Board: {config.height} rows x {config.width} cols, "
        f"{config.num_mines} mines, cell size {config.cell_size}px"
    )
    print(HELP_TEXT)
    print(renderer.render())

    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if not line:
            continue

        command, *rest = line.split()
        if command == "quit":
            break
        if command == "show":
            print(renderer.render())
            continue
        if command not in ("click", "flag", "reveal", "mark") or len(rest) != 2:
            print(HELP_TEXT)
            continue

        try:
            first, second = (int(value) for value in rest)
        except ValueError:
            print("Coordinates must be integers")
            continue

        # reveal/mark take (row, col); convert to the cell's top-left pixel
        if command in ("reveal", "mark"):
            px, py = second * config.cell_size, first * config.cell_size
        else:
            px, py = first, second

        event: Dict[str, Any] = {
            "button": "primary" if command in ("click", "reveal") else "secondary",
            "pixel": [px, py],
            "cell": adapter.pixel_to_cell(px, py),
            "mine": False,
        }
        events.append(event)

        if event["button"] == "primary":
            opened = adapter.on_primary_click(px, py)
            event["opened"] = [list(position) for position in opened]
            print(f"Opened {len(opened)} cells")
        else:
            adapter.on_secondary_click(px, py)

        if event["cell"] is None:
            print("Outside the board")
        print(renderer.render())

    if args.log:
        save_log(Path(args.log), events)
        print(f"Session log saved to: {args.log}")


def save_log(path: Path, events: List[Dict[str, Any]]) -> None:
    """Save click events to JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump({"clicks": len(events), "events": events}, f, indent=2)


def frame(args: argparse.Namespace) -> None:
    """Play random clicks and save the canvas as a numpy array."""
    config = make_config(args)
    env = ClickEnv(config=config, render_mode="rgb_array", max_steps=args.clicks)
    _, info = env.reset(seed=args.seed)

    rng = np.random.default_rng(args.seed)
    for _ in range(args.clicks):
        candidates = np.argwhere(env.get_action_mask())
        if len(candidates) == 0:
            break
        row, col = candidates[rng.integers(len(candidates))]
        px, py = env.cell_to_pixel(int(row), int(col))
        _, _, _, truncated, info = env.step((PRIMARY_BUTTON, px, py))
        if truncated:
            break

    image = env.render()
    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    np.save(out, image)

    print(f"Clicks: {info['steps']} | Opened: {info['opened']} | "
          f"Mines hit: {info['mines_revealed']}")
    print(f"Frame {image.shape} saved to: {out}")


def add_board_options(parser: argparse.ArgumentParser) -> None:
    """Add the board configuration options to a subcommand."""
    defaults = BoardConfig()
    parser.add_argument(
        "--rows", type=int, default=defaults.height, help="Number of rows"
    )
    parser.add_argument(
        "--cols", type=int, default=defaults.width, help="Number of columns"
    )
    parser.add_argument(
        "--mines", type=int, default=defaults.num_mines, help="Number of mines"
    )
    parser.add_argument(
        "--cell-size", type=int, default=defaults.cell_size,
        help="Cell size in pixels",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play on a pixel canvas"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_options(play_parser)
    play_parser.add_argument(
        "--log", type=str, default="", help="Write a JSON log of clicks"
    )

    # Frame command
    frame_parser = subparsers.add_parser(
        "frame", help="Save the canvas after random clicks"
    )
    add_board_options(frame_parser)
    frame_parser.add_argument(
        "--clicks", type=int, default=5, help="Number of random clicks"
    )
    frame_parser.add_argument(
        "--out", type=str, default="frames/board.npy", help="Output file"
    )

    args = parser.parse_args()

    try:
        if args.command == "play":
            play(args)
        elif args.command == "frame":
            frame(args)
        else:
            parser.print_help()
    except ValueError as error:
        print(f"Error: {error}")


if __name__ == "__main__":
    main()
