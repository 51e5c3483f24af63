"""Tetromino shapes and the falling piece with its preview of the next one."""

from __future__ import annotations

import random
from enum import IntEnum

Cells = tuple[tuple[int, ...], ...]

SIZE = 4
SPAWN_X = 4
SPAWN_Y = 0


class TetrominoType(IntEnum):
    """The seven tetromino kinds."""

    O = 0
    T = 1
    L = 2
    J = 3
    I = 4  # noqa: E741
    S = 5
    Z = 6


_SHAPES: dict[TetrominoType, Cells] = {
    TetrominoType.O: (
        (0, 0, 0, 0),
        (0, 2, 2, 0),
        (0, 2, 2, 0),
        (0, 0, 0, 0),
    ),
    TetrominoType.T: (
        (0, 0, 3, 0),
        (0, 3, 3, 0),
        (0, 0, 3, 0),
        (0, 0, 0, 0),
    ),
    TetrominoType.L: (
        (0, 4, 0, 0),
        (0, 4, 0, 0),
        (0, 4, 4, 0),
        (0, 0, 0, 0),
    ),
    TetrominoType.J: (
        (0, 0, 5, 0),
        (0, 0, 5, 0),
        (0, 5, 5, 0),
        (0, 0, 0, 0),
    ),
    TetrominoType.I: (
        (0, 0, 6, 0),
        (0, 0, 6, 0),
        (0, 0, 6, 0),
        (0, 0, 6, 0),
    ),
    TetrominoType.S: (
        (0, 0, 0, 0),
        (0, 0, 7, 7),
        (0, 7, 7, 0),
        (0, 0, 0, 0),
    ),
    TetrominoType.Z: (
        (0, 0, 0, 0),
        (8, 8, 0, 0),
        (0, 8, 8, 0),
        (0, 0, 0, 0),
    ),
}


def shape(kind: int) -> Cells:
    """Return the 4x4 cell map of a tetromino kind.

    Raises ValueError for an unknown kind.
    """
    return _SHAPES[TetrominoType(kind)]


def rotate_map(cells: Cells) -> Cells:
    """Rotate a square cell map a quarter turn: result[i][j] == cells[j][3 - i]."""
    return tuple(tuple(column) for column in zip(*cells))[::-1]


class Tetromino:
    """The piece in play, its position, and the kind that comes next."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.x = SPAWN_X
        self.y = SPAWN_Y
        self.kind = self._draw()
        self.cells: Cells = shape(self.kind)
        self.next_kind = self._draw()
        self.next_cells: Cells = shape(self.next_kind)

    def _draw(self) -> TetrominoType:
        return TetrominoType(self._rng.randrange(len(TetrominoType)))

    def fall(self) -> None:
        """Move the piece one row down."""
        self.y += 1

    def reset(self) -> None:
        """Bring in the previewed piece at the spawn point and draw a new preview."""
        self.x = SPAWN_X
        self.y = SPAWN_Y
        self.kind = self.next_kind
        self.cells = self.next_cells
        self.next_kind = self._draw()
        self.next_cells = shape(self.next_kind)

    def rotate(self) -> None:
        """Rotate the piece in place."""
        self.cells = rotate_map(self.cells)

    def rotated(self) -> Cells:
        """Return the piece's cells as they would be after a rotation."""
        return rotate_map(self.cells)