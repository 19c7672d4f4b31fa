#!/usr/bin/env python3
"""Number Puzzle.

Usage::

    python main.py                   # interactive menu
    python main.py -f rich -s 3      # Rich terminal, 3×3
    python main.py -f pygame         # Pygame window, 4×4
    python main.py -f rich --seed 7  # reproducible shuffle
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.rich: "numberpuzzle_ui.cli.rich.app",
    Frontend.pygame: "numberpuzzle_ui.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def _ask_size(default: int) -> int:
    raw = input(f"  Grid size (2-8, default {default}): ").strip() or str(default)
    try:
        size = int(raw)
        if not 2 <= size <= 8:
            raise ValueError
    except ValueError:
        print(f"  Invalid size, using {default}.")
        size = default
    return size


def _launch(frontend: Frontend, size: int, rng: random.Random) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(size=size, rng=rng)


def _menu_loop(size: int, rng: random.Random) -> None:
    while True:
        print()
        print("  ====================================")
        print("       N U M B E R   P U Z Z L E      ")
        print("  ====================================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (Pygame GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            size = _ask_size(size)
            _launch({"1": Frontend.rich, "2": Frontend.pygame}[choice], size, rng)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    size: int = typer.Option(
        4, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for a reproducible game.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine activity.",
    ),
) -> None:
    """Number Puzzle."""
    _configure_logging(verbose)
    rng = random.Random(seed)

    if frontend is None:
        _menu_loop(size, rng)
        return

    _launch(frontend, size, rng)


if __name__ == "__main__":
    app()
