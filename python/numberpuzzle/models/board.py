"""Board model for the number puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class InvalidIndexError(IndexError):
    """Raised when a cell index falls outside ``[0, size * size - 1]``."""


class Direction(StrEnum):
    """Where the *tile* moves, not the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Board:
    """Represents the puzzle board.

    Tiles are stored as a flat, row-major list of ints. 0 represents the
    blank; ``blank_index`` always points at it.
    """

    size: int
    cells: list[int]
    blank_index: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}.")
        board = cls(size=size, cells=[0] * (size * size), blank_index=0)
        board.reset()
        return board

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}.")
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        cells = list(flat)
        return cls(size=size, cells=cells, blank_index=cells.index(0))

    def reset(self) -> None:
        """Put every tile back in its goal position."""
        last = len(self.cells) - 1
        for i in range(last):
            self.cells[i] = i + 1
        self.cells[last] = 0
        self.blank_index = last

    # -- queries --------------------------------------------------------------

    @property
    def num_cells(self) -> int:
        return self.size * self.size

    def check_index(self, index: int) -> None:
        if not 0 <= index < self.num_cells:
            raise InvalidIndexError(
                f"Cell index {index} is outside 0..{self.num_cells - 1}."
            )

    def tile_at(self, index: int) -> int:
        self.check_index(index)
        return self.cells[index]

    def index_of(self, row: int, col: int) -> int:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise InvalidIndexError(
                f"Cell ({row}, {col}) is outside a {self.size}×{self.size} grid."
            )
        return row * self.size + col

    def position_of(self, index: int) -> tuple[int, int]:
        """Return ``(row, col)`` of a flat index."""
        self.check_index(index)
        return divmod(index, self.size)

    def rows(self) -> list[list[int]]:
        n = self.size
        return [self.cells[r * n : (r + 1) * n] for r in range(n)]

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* is in its goal position."""
        val = self.tile_at(index)
        if val == 0:
            return index == self.num_cells - 1
        return index == val - 1

    def copy(self) -> Board:
        return Board(
            size=self.size,
            cells=self.cells[:],
            blank_index=self.blank_index,
        )
