#!/usr/bin/env python3
"""Watch random clicks play out on a Minesweeper board."""
import time
import os

import numpy as np

from src.minesweeper.environment import ClickEnv, PRIMARY_BUTTON, SECONDARY_BUTTON
from src.minesweeper.board import BoardConfig


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, clicks: int = 20, rows: int = 20, cols: int = 15,
         mines: int = 10, flag_rate: float = 0.1):
    """Click random unopened cells and show the board after each click."""
    config = BoardConfig(width=cols, height=rows, num_mines=mines)
    env = ClickEnv(config=config, render_mode="ansi", max_steps=clicks)
    rng = np.random.default_rng()

    env.reset()
    print(f"Board: {rows}x{cols} with {mines} mines")
    print("Starting in 2 seconds...")
    time.sleep(2)

    for step in range(clicks):
        candidates = np.argwhere(env.get_action_mask())
        if len(candidates) == 0:
            break
        row, col = (int(v) for v in candidates[rng.integers(len(candidates))])
        button = SECONDARY_BUTTON if rng.random() < flag_rate else PRIMARY_BUTTON
        px, py = env.cell_to_pixel(row, col)

        _, reward, _, truncated, info = env.step((button, px, py))

        clear_screen()
        action = "flag" if button == SECONDARY_BUTTON else "click"
        print(f"=== Step {step + 1}/{clicks} | {action} ({row}, {col}) ===")
        print(f"Opened: {info['opened']} (+{int(reward)}) | "
              f"Flagged: {info['flagged']} | Mines hit: {info['mines_revealed']}\n")
        print(env.render())

        if truncated:
            break
        time.sleep(delay)


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between clicks")
    parser.add_argument("--clicks", type=int, default=20, help="Number of clicks")
    parser.add_argument("--rows", type=int, default=20, help="Board rows")
    parser.add_argument("--cols", type=int, default=15, help="Board columns")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--flag-rate", type=float, default=0.1,
                        help="Share of clicks that are right clicks")
    args = parser.parse_args()

    demo(delay=args.delay, clicks=args.clicks, rows=args.rows, cols=args.cols,
         mines=args.mines, flag_rate=args.flag_rate)
