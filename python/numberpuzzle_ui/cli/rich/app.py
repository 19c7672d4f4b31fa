"""Rich terminal frontend.

Tiles move with the arrow keys / WASD, or by typing a tile number and
pressing Enter: every tile between it and the blank slides at once.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from numberpuzzle.engine.gameplay import GamePlay
from numberpuzzle.models.board import Board, Direction
from numberpuzzle_ui.cli.input_handler import get_key

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, game_over: bool = False) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.num_cells - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="red3",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[bold red3]✓[/bold red3]" if game_over else "")
            elif board.is_tile_correct(board.index_of(r, c)):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def slide_to_tile(game: GamePlay, typed: str) -> str:
    """Slide the tile labelled *typed*. Returns a status message."""
    board = game.board
    value = int(typed)
    if not 1 <= value < board.num_cells:
        return f"[yellow]There is no tile {value}.[/yellow]"
    result = game.attempt_move(board.cells.index(value))
    if not result.moved:
        return f"[yellow]Tile {value} is not in the blank's row or column.[/yellow]"
    return ""


# -- screens ------------------------------------------------------------------


def _draw(game: GamePlay, typed: str, status: str) -> None:
    console.clear()
    size = game.size
    state = game.state

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(state.elapsed_time), style="bold yellow")

    if game.is_game_over:
        footer = Text("Press N or Enter to start a new game", style="bold red3")
    else:
        footer = Text()
        footer.append("Tile: ", style="dim")
        footer.append(typed or "_", style="bold cyan")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("0-9 ⏎", style="bold cyan")
    controls.append("  slide to tile   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  new   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    parts = [Align.center(render_board(game.board, game.is_game_over)), Text("")]
    parts.append(Align.center(stats))
    if status:
        parts.append(Align.center(Text.from_markup(status)))
    parts.append(Align.center(footer))

    border = "bold green" if game.is_game_over else "red3"
    panel = Panel(
        Group(*parts),
        title=f"[bold]Number Puzzle  {size}×{size}[/bold]",
        border_style=border,
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _game_loop(game: GamePlay) -> None:
    typed = ""
    status = ""

    while True:
        _draw(game, typed, status)
        status = ""
        key = get_key()

        if key == "quit":
            return

        if game.is_game_over:
            if key in ("new", "enter"):
                game.restart()
            continue

        if key in _DIRECTIONS:
            game.move(_DIRECTIONS[key])
            typed = ""
        elif key.isdigit():
            typed = (typed + key)[-len(str(game.board.num_cells)):]
        elif key == "backspace":
            typed = typed[:-1]
        elif key == "enter" and typed:
            status = slide_to_tile(game, typed)
            typed = ""
        elif key == "new":
            game.restart()
            typed = ""

        if game.is_game_over:
            status = "[bold green]★ Solved! ★[/bold green]"


# -- public entry point -------------------------------------------------------


def run(size: int, rng: random.Random | None = None) -> None:
    """Launch the Rich CLI."""
    _game_loop(GamePlay(size, rng))
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
