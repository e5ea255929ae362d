#!/usr/bin/env python3
"""
Terminal Conway's Game of Life
──────────────────────────────
Options
-------
--size N     : Side of the square board (12 by default).
--seed FILE  : Start from a grid file (rows of 0/1, '.'/'#' or '.'/'O').
--random     : Start from a random board of the given --density.
--autoplay   : Step automatically every --interval seconds.
--headless N : Print N generations as text and exit (no terminal UI).

Edit cells with the arrows and Space, step with N, toggle autoplay with A.
Press Q, Esc or Ctrl-C to quit at any time.
"""

import argparse
import logging
import os
import sys
import time
from dataclasses import dataclass
from typing import Optional

from colorama import init as colorama_init

if os.name != "nt":
    import termios
    import tty

from core import Life, create_board
from input_handler import Key, get_key
from rendering import render, render_results
from utils import CellGrid, InvalidGridError, IntGrid, load_grid, to_cells

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """Everything the terminal view needs between key presses."""

    cells: CellGrid
    game: Optional[Life] = None
    started: bool = False
    autoplay: bool = False
    cursor_y: int = 0
    cursor_x: int = 0
    density: float = 0.3

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])

    @property
    def generation(self) -> int:
        return self.game.generation if self.game is not None else 0


def play(state: GameState) -> None:
    """Seed a fresh simulation from the cells currently on screen."""
    state.game = Life(state.cells)
    state.started = True
    logger.info("Seeded %dx%d board with %d live cells", state.cols, state.rows, state.game.alive_count)


def next_frame(state: GameState) -> None:
    """Advance one generation and copy it back to the screen grid."""
    if not state.started or state.game is None:
        play(state)

    state.game.step()
    state.cells = to_cells(state.game.board)


def toggle_cell(state: GameState) -> None:
    state.cells[state.cursor_y][state.cursor_x] = not state.cells[state.cursor_y][state.cursor_x]
    # The next step must start from the edited grid
    state.started = False


def move_cursor(state: GameState, key: Key) -> None:
    if key == Key.UP:
        state.cursor_y = max(0, state.cursor_y - 1)
    elif key == Key.DOWN:
        state.cursor_y = min(state.rows - 1, state.cursor_y + 1)
    elif key == Key.LEFT:
        state.cursor_x = max(0, state.cursor_x - 1)
    elif key == Key.RIGHT:
        state.cursor_x = min(state.cols - 1, state.cursor_x + 1)


def time_left(deadline: Optional[float], now: float) -> Optional[float]:
    """Seconds until `deadline`, never negative. None means wait for a key forever."""
    if deadline is None:
        return None
    return max(0.0, deadline - now)


def handle_key(state: GameState, key: Key) -> bool:
    """Apply one key press to `state`. Returns False when the user wants to quit."""
    if key == Key.QUIT:
        return False

    if key in (Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT):
        move_cursor(state, key)
    elif key == Key.TOGGLE:
        toggle_cell(state)
    elif key == Key.NEXT:
        state.autoplay = False
        next_frame(state)
    elif key == Key.AUTOPLAY:
        state.autoplay = not state.autoplay
        logger.info("Autoplay %s", "on" if state.autoplay else "off")
        if state.autoplay:
            next_frame(state)
    elif key == Key.RANDOM:
        state.cells = to_cells(create_board(state.rows, state.cols, state.density))
        state.started = False
    elif key == Key.CLEAR:
        state.cells = [[False] * state.cols for _ in range(state.rows)]
        state.started = False
    return True


# ──────────────────────────────────────────────────────────────
#  Main loop
# ──────────────────────────────────────────────────────────────
def run(state: GameState, interval: float, live_cell: str, dead_cell: str) -> None:
    """
    Interactive loop.

    While autoplay is on, the next generation is due `interval` seconds after
    the previous one was drawn. Keys that do not step (cursor moves, edits)
    wait out the rest of that interval instead of restarting it, so ticks
    never overlap and holding a key does not stall autoplay.
    """
    # --- Terminal setup for non-blocking input ---
    old_settings = None
    if os.name != "nt":
        old_settings = termios.tcgetattr(sys.stdin)
        tty.setcbreak(sys.stdin.fileno())

    deadline: Optional[float] = None
    try:
        while True:
            render(
                state.cells,
                state.generation,
                state.autoplay,
                interval,
                state.cursor_y,
                state.cursor_x,
                live_cell,
                dead_cell,
            )

            if not state.autoplay:
                deadline = None
            elif deadline is None:
                deadline = time.monotonic() + interval
            action = get_key(time_left(deadline, time.monotonic()))

            if action is None:
                # No input, proceed to next generation if autoplay is on
                if state.autoplay:
                    next_frame(state)
                deadline = None
                continue

            before = (state.game, state.generation)
            if not handle_key(state, action):
                break
            if (state.game, state.generation) != before:
                # Stepped by hand, the next tick is a full interval away
                deadline = None

    except KeyboardInterrupt:
        print("\nInterrupted by user. Goodbye!")
    finally:
        if os.name != "nt" and old_settings is not None:
            # Restore terminal settings
            termios.tcsetattr(sys.stdin, termios.TCSADRAIN, old_settings)

    render_results(state.generation, sum(cell for row in state.cells for cell in row))


def run_headless(life: Life, generations: int) -> None:
    """Print the board for generations 0..N, each under a 'Generation k' line."""
    for i in range(generations + 1):
        if i > 0:
            life.step()
            print()
        print(f"Generation {life.generation}")
        print(life.render())


class ArgmentHelpFormatter_(argparse.ArgumentDefaultsHelpFormatter, argparse.RawTextHelpFormatter): pass

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Console version of Conway's Game of Life.",
        formatter_class=ArgmentHelpFormatter_
    )
    parser.add_argument(
        "-s",
        "--size",
        type=int,
        default=12,
        help="Side of the square board.\n"
    )
    parser.add_argument(
        "-r",
        "--rows",
        type=int,
        default=None,
        help="Number of rows (defaults to --size).\n"
    )
    parser.add_argument(
        "-c",
        "--cols",
        type=int,
        default=None,
        help="Number of columns (defaults to --size).\n"
    )
    parser.add_argument(
        "-i", "--interval",
        type=float,
        default=1.0,
        help="Delay between generations (seconds) in autoplay.\n"
    )
    parser.add_argument(
        "--autoplay",
        action="store_true",
        help="Start stepping automatically.\n",
    )
    parser.add_argument(
        "--random",
        action="store_true",
        help="Start from a random board.\n",
    )
    parser.add_argument(
        "-d",
        "--density",
        type=float,
        default=0.3,
        help="Live-cell density (0–1) for --random and the R key.\n"
    )
    parser.add_argument(
        "--seed",
        type=str,
        default=None,
        metavar="FILE",
        help="Load the starting grid from FILE (overrides size and --random).\n",
    )
    parser.add_argument(
        "--headless",
        type=int,
        default=None,
        metavar="N",
        help="Print N generations as text and exit.\n",
    )
    parser.add_argument(
        "--live-cell",
        type=str,
        default="■",
        help="Character for a live cell. Must be a single character.\n"
    )
    parser.add_argument(
        "--dead-cell",
        type=str,
        default=" ",
        help="Character for a dead cell. Must be a single character.\n"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log to stderr (-v for info, -vv for every generation).\n"
    )
    return parser


def initial_grid(args: argparse.Namespace) -> IntGrid:
    """Build the generation-0 grid from the command line options."""
    if args.seed:
        return load_grid(args.seed)

    rows = args.rows if args.rows is not None else args.size
    cols = args.cols if args.cols is not None else args.size
    if args.random:
        return create_board(rows, cols, args.density)
    if rows <= 0 or cols <= 0:
        raise InvalidGridError(f"board size must be positive, got {cols}x{rows}")
    return [[0] * cols for _ in range(rows)]


def main(argv: Optional[list] = None) -> None:
    parser = build_parser()

    try:
        colorama_init()
        args = parser.parse_args(argv)

        levels = {0: logging.WARNING, 1: logging.INFO}
        logging.basicConfig(level=levels.get(args.verbose, logging.DEBUG), format="%(levelname)s: %(message)s")

        if len(args.live_cell) != 1:
            sys.exit("Error: --live-cell must be a single character.")
        if len(args.dead_cell) != 1:
            sys.exit("Error: --dead-cell must be a single character.")
        if args.interval <= 0:
            sys.exit("Error: --interval must be positive.")
        if not 0.0 <= args.density <= 1.0:
            sys.exit("Error: --density must be between 0 and 1.")
        if args.headless is not None and args.headless < 0:
            sys.exit("Error: --headless must be zero or more.")

        try:
            grid = initial_grid(args)
        except InvalidGridError as exc:
            sys.exit(f"Error: invalid grid: {exc}")
        except OSError as exc:
            sys.exit(f"Error: cannot read seed file: {exc}")

        if args.headless is not None:
            run_headless(Life(grid), args.headless)
            return

        state = GameState(cells=to_cells(grid), autoplay=args.autoplay, density=args.density)
        run(state, args.interval, args.live_cell, args.dead_cell)
    except KeyboardInterrupt:
        print("\nInterrupted. Exiting.", file=sys.stderr)
        sys.exit(0)


if __name__ == "__main__":
    main()
