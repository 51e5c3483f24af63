"""Playing field, scoring and screen state of the game, free of any drawing."""

from __future__ import annotations

import random
from enum import Enum, IntEnum, auto
from typing import Iterator

from .tetrominoes import Cells, Tetromino

ROWS = 21
COLUMNS = 12
WALL = 9
START_SPEED = 20
SPEED_STEP = 2
LINES_PER_LEVEL = 10
LINE_SCORES = {1: 100, 2: 300, 3: 500, 4: 800}


class Screen(Enum):
    """What the game is currently showing."""

    MENU = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class MenuChoice(IntEnum):
    """Entries of the main menu, top to bottom."""

    PLAY = 1
    MUSIC = 2
    QUIT = 3


class Key(Enum):
    """Keys the game responds to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SPACE = auto()


RESTART = 1
BACK_TO_MENU = 2


def new_grid() -> list[list[int]]:
    """Return an empty field: walls on both sides and a floor at the bottom."""
    inner = [WALL] + [0] * (COLUMNS - 2) + [WALL]
    return [list(inner) for _ in range(ROWS - 1)] + [[WALL] * COLUMNS]


def _occupied(cells: Cells) -> Iterator[tuple[int, int, int]]:
    for row, line in enumerate(cells):
        for col, value in enumerate(line):
            if value:
                yield row, col, value


class Game:
    """State of one game session, advanced a frame at a time."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.piece = Tetromino(rng)
        self.grid = new_grid()
        self.screen = Screen.MENU
        self.running = True
        self.music = True
        self.menu_selection = MenuChoice.PLAY
        self.game_over_selection = RESTART
        self.piece_hit_floor = False
        self.score = 0
        self.level = 1
        self.level_lines = 0
        self.total_lines = 0
        self.speed = START_SPEED
        self.speed_counter = 0

    def piece_fits(self, x: int, y: int, rotate: bool = False) -> bool:
        """Tell whether the piece, possibly rotated, fits at (x, y)."""
        cells = self.piece.rotated() if rotate else self.piece.cells
        for row, col, _ in _occupied(cells):
            gy, gx = y + row, x + col
            if not (0 <= gy < ROWS and 0 <= gx < COLUMNS):
                return False
            if self.grid[gy][gx] != 0:
                return False
        return True

    def rotate(self) -> None:
        """Rotate the current piece."""
        self.piece.rotate()

    def lift_piece(self) -> None:
        """Clear the current piece's cells from the grid."""
        for row, col, _ in _occupied(self.piece.cells):
            self.grid[self.piece.y + row][self.piece.x + col] = 0

    def stamp_piece(self) -> None:
        """Write the current piece's cells into the grid."""
        for row, col, value in _occupied(self.piece.cells):
            self.grid[self.piece.y + row][self.piece.x + col] = value

    def shift_down(self, line: int) -> None:
        """Move every row above `line` one row down; the top row is kept."""
        above = [list(row) for row in self.grid[:line]]
        self.grid[1 : line + 1] = above

    def clear_lines(self) -> int:
        """Remove full rows, add to lines and score, and return how many were removed."""
        completed = 0
        for index in range(ROWS - 1):
            if all(cell != 0 for cell in self.grid[index][1:-1]):
                self.total_lines += 1
                self.level_lines += 1
                completed += 1
                self.grid[index][1:-1] = [0] * (COLUMNS - 2)
                self.shift_down(index)
        self.score += LINE_SCORES.get(completed, 0) * self.level
        return completed

    def reset(self) -> None:
        """Start over with an empty field and the initial score, level and speed."""
        self.score = 0
        self.total_lines = 0
        self.level = 1
        self.level_lines = 0
        self.speed = START_SPEED
        self.speed_counter = 0
        self.grid = new_grid()

    def begin_frame(self) -> None:
        """Advance timers, lock a landed piece and lift the piece before input."""
        if self.screen is not Screen.PLAYING:
            return
        self.speed_counter += 1
        if self.piece_hit_floor:
            self.piece.reset()
            if not self.piece_fits(self.piece.x, self.piece.y):
                self.screen = Screen.GAME_OVER
            self.piece_hit_floor = False
            self.clear_lines()
        if self.level_lines >= LINES_PER_LEVEL:
            self.level += 1
            self.speed -= SPEED_STEP
            self.level_lines -= LINES_PER_LEVEL
        self.lift_piece()

    def handle_key(self, key: Key) -> None:
        """React to one key press on the current screen."""
        if self.screen is Screen.PLAYING:
            self._play_key(key)
        elif self.screen is Screen.MENU:
            self._menu_key(key)
        else:
            self._game_over_key(key)

    def _play_key(self, key: Key) -> None:
        piece = self.piece
        if key is Key.UP:
            if self.piece_fits(piece.x, piece.y, rotate=True):
                self.rotate()
        elif key is Key.LEFT:
            if self.piece_fits(piece.x - 1, piece.y):
                piece.x -= 1
        elif key is Key.RIGHT:
            if self.piece_fits(piece.x + 1, piece.y):
                piece.x += 1
        elif key in (Key.DOWN, Key.SPACE):
            if self.piece_fits(piece.x, piece.y + 1):
                piece.fall()
                while key is Key.SPACE and self.piece_fits(piece.x, piece.y + 1):
                    piece.fall()

    def _menu_key(self, key: Key) -> None:
        if key is Key.DOWN and self.menu_selection < MenuChoice.QUIT:
            self.menu_selection = MenuChoice(self.menu_selection + 1)
        elif key is Key.UP and self.menu_selection > MenuChoice.PLAY:
            self.menu_selection = MenuChoice(self.menu_selection - 1)
        elif key is Key.SPACE:
            if self.menu_selection is MenuChoice.PLAY:
                self.screen = Screen.PLAYING
                self.reset()
            elif self.menu_selection is MenuChoice.MUSIC:
                self.music = not self.music
            else:
                self.running = False

    def _game_over_key(self, key: Key) -> None:
        if key is Key.DOWN and self.game_over_selection < BACK_TO_MENU:
            self.game_over_selection += 1
        elif key is Key.UP and self.game_over_selection > RESTART:
            self.game_over_selection -= 1
        elif key is Key.SPACE:
            if self.game_over_selection == RESTART:
                self.reset()
                self.screen = Screen.PLAYING
            else:
                self.screen = Screen.MENU

    def end_frame(self) -> None:
        """Apply gravity when due and put the piece back into the grid."""
        if self.screen is not Screen.PLAYING:
            return
        if self.speed_counter == self.speed:
            if self.piece_fits(self.piece.x, self.piece.y + 1):
                self.piece.fall()
            else:
                self.piece_hit_floor = True
            self.speed_counter = 0
        self.stamp_piece()