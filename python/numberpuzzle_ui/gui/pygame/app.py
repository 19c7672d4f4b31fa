"""Pygame GUI frontend.

Click a tile in the blank's row or column to slide it (and every tile in
between) toward the blank. Once the puzzle is solved, a click anywhere
starts a new game.
"""

from __future__ import annotations

import random

import pygame

from numberpuzzle.engine.gameplay import GamePlay
from numberpuzzle.models.board import Direction

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
COL_BG = (0, 0, 0)
COL_TILE = (150, 53, 50)
COL_EDGE = (0, 0, 0)
COL_TEXT = (255, 255, 255)
COL_DIM = (166, 173, 200)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
DIMENSION = 550
MARGIN = 30
GRID_PX = DIMENSION - 2 * MARGIN
WIN_W, WIN_H = DIMENSION, DIMENSION + MARGIN
TILE_RADIUS = 12

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def cell_at(pos: tuple[int, int], size: int) -> int | None:
    """Map a window pixel to a flat cell index, or ``None`` off the grid."""
    tile_px = GRID_PX // size
    x, y = pos[0] - MARGIN, pos[1] - MARGIN
    if not (0 <= x < tile_px * size and 0 <= y < tile_px * size):
        return None
    return (y // tile_px) * size + x // tile_px


class PygameApp:
    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        self._game = GamePlay(size, rng)

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Number Puzzle")
        self._clock = pygame.time.Clock()

        tile_px = GRID_PX // size
        self._f_tile = pygame.font.SysFont("Helvetica", max(14, tile_px // 2), bold=True)
        self._f_msg = pygame.font.SysFont("Helvetica", 18, bold=True)
        self._f_stats = pygame.font.SysFont("Helvetica", 14)

    # -- drawing --------------------------------------------------------------

    def _blit_in_cell(self, label: pygame.Surface, rect: pygame.Rect) -> None:
        self._surf.blit(
            label,
            (
                rect.centerx - label.get_width() // 2,
                rect.centery - label.get_height() // 2,
            ),
        )

    def _draw(self) -> None:
        self._surf.fill(COL_BG)
        game = self._game
        board = game.board
        tile_px = GRID_PX // game.size

        for i, val in enumerate(board.cells):
            r, c = divmod(i, game.size)
            rect = pygame.Rect(
                MARGIN + c * tile_px, MARGIN + r * tile_px, tile_px, tile_px
            )
            if val == 0:
                if game.is_game_over:
                    self._blit_in_cell(
                        self._f_tile.render("✓", True, COL_TILE), rect
                    )
                continue
            pygame.draw.rect(self._surf, COL_TILE, rect, border_radius=TILE_RADIUS)
            pygame.draw.rect(
                self._surf, COL_EDGE, rect, width=1, border_radius=TILE_RADIUS
            )
            self._blit_in_cell(self._f_tile.render(str(val), True, COL_TEXT), rect)

        if game.is_game_over:
            msg = self._f_msg.render("Click to start new game", True, COL_TILE)
        else:
            m, s = divmod(int(game.state.elapsed_time), 60)
            msg = self._f_stats.render(
                f"Moves: {game.state.moves}    Time: {m:02d}:{s:02d}",
                True,
                COL_DIM,
            )
        self._surf.blit(msg, ((WIN_W - msg.get_width()) // 2, WIN_H - MARGIN - 4))

    # -- events ---------------------------------------------------------------

    def _on_event(self, ev: pygame.event.Event) -> bool:
        game = self._game
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if game.is_game_over:
                game.restart()
                return True
            index = cell_at(ev.pos, game.size)
            if index is not None:
                game.attempt_move(index)
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_ESCAPE:
                return False
            if ev.key == pygame.K_n or (game.is_game_over and ev.key == pygame.K_RETURN):
                game.restart()
            elif ev.key in _KEY_DIRECTIONS:
                game.move(_KEY_DIRECTIONS[ev.key])
        return True

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._on_event(ev):
                    running = False
                    break

            self._draw()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(size: int = 4, rng: random.Random | None = None) -> None:
    """Launch the Pygame window with a game already in progress."""
    app = PygameApp(size, rng)
    app.run_loop()
