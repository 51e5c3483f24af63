"""Drawing of the game with pygame, asset loading and the program's main loop."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from .game import BACK_TO_MENU, RESTART, Game, Key, MenuChoice, Screen

WINDOW_TITLE = "TETRIS"
WINDOW_WIDTH = 680
WINDOW_HEIGHT = 700
FRAME_DELAY_MS = 50
CELL = 30
FONT_SIZE = 30
BIG_FONT_SIZE = 100
PANEL_ALPHA = 200
WHITE = (255, 255, 255)

GRID_ORIGIN = (120, 30)
NEXT_BOX_ORIGIN = (490, 60)
NEXT_PIECE_ORIGIN = (520, 90)
NEXT_BOX_SIZE = 6

_COLORS = {
    2: "yellow",
    3: "purple",
    4: "orange",
    5: "blue",
    6: "cyan",
    7: "green",
    8: "red",
    9: "white",
}

_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
}


def block_color(value: int) -> str | None:
    """Return the colour name of the square drawn for a cell value, or None."""
    return _COLORS.get(value)


@dataclass
class Assets:
    """Images, fonts and music used to draw and play the game."""

    squares: dict[int, pygame.Surface]
    logo: pygame.Surface
    background: pygame.Surface
    panel: pygame.Surface
    font: pygame.font.Font
    big_font: pygame.font.Font
    music: Path | None = None
    _texts: dict[tuple[str, bool], pygame.Surface] = field(
        default_factory=dict, repr=False
    )

    @classmethod
    def load(cls, base: str | Path = ".") -> Assets:
        """Load the assets kept under `base`/res.

        Raises FileNotFoundError when an image is missing. A missing font
        falls back to pygame's default font; missing music leaves `music` None.
        """
        res = Path(base) / "res"
        gfx = res / "gfx"

        def image(name: str) -> pygame.Surface:
            path = gfx / name
            if not path.is_file():
                raise FileNotFoundError(f"missing image: {path}")
            return pygame.image.load(str(path))

        squares = {value: image(f"square_{name}.png") for value, name in _COLORS.items()}
        logo = image("tetrisLogo.png")
        background = image("blackScreen.png")
        panel = image("blackScreen.png")
        panel.set_alpha(PANEL_ALPHA)

        pygame.font.init()
        font_path = res / "ttf" / "slkscr.ttf"
        font_file = str(font_path) if font_path.is_file() else None
        music_path = res / "sfx" / "tetrisSong.wav"
        return cls(
            squares=squares,
            logo=logo,
            background=background,
            panel=panel,
            font=pygame.font.Font(font_file, FONT_SIZE),
            big_font=pygame.font.Font(font_file, BIG_FONT_SIZE),
            music=music_path if music_path.is_file() else None,
        )

    def text(self, label: str, big: bool = False) -> pygame.Surface:
        """Return `label` rendered in white, in the large font when `big`."""
        key = (label, big)
        surface = self._texts.get(key)
        if surface is None:
            font = self.big_font if big else self.font
            surface = font.render(label, False, WHITE)
            self._texts[key] = surface
        return surface


def _centered(width: int, divisor: int = 2) -> int:
    return (WINDOW_WIDTH - width) // divisor


def _draw_cells(surface, assets, cells, origin) -> None:
    ox, oy = origin
    for row, line in enumerate(cells):
        for col, value in enumerate(line):
            if block_color(value) is not None:
                surface.blit(assets.squares[value], (ox + CELL * col, oy + CELL * row))


def _draw_menu(surface: pygame.Surface, game: Game, assets: Assets) -> None:
    surface.blit(assets.logo, (205, 50))
    choice = game.menu_selection
    entries = (
        (MenuChoice.PLAY, "PLAY", 300),
        (MenuChoice.MUSIC, "MUSIC: ", 400),
        (MenuChoice.QUIT, "QUIT", 500),
    )
    for entry, label, y in entries:
        shown = assets.text((">" if choice == entry else "") + label)
        surface.blit(shown, (_centered(shown.get_width()), y))
    surface.blit(assets.text("ON" if game.music else "OFF"), (400, 400))


def _draw_field(surface: pygame.Surface, game: Game, assets: Assets) -> None:
    _draw_cells(surface, assets, game.grid, GRID_ORIGIN)

    bx, by = NEXT_BOX_ORIGIN
    last = NEXT_BOX_SIZE - 1
    for row in range(NEXT_BOX_SIZE):
        for col in range(NEXT_BOX_SIZE):
            if row in (0, last) or col in (0, last):
                surface.blit(assets.squares[9], (bx + CELL * col, by + CELL * row))

    surface.blit(assets.text("SCORE:"), (7, 30))
    surface.blit(assets.text(str(game.score)), (7, 60))
    surface.blit(assets.text("LEVEL:"), (7, 130))
    surface.blit(assets.text(str(game.level)), (7, 160))

    _draw_cells(surface, assets, game.piece.next_cells, NEXT_PIECE_ORIGIN)


def _draw_game_over(surface: pygame.Surface, game: Game, assets: Assets) -> None:
    panel = assets.panel
    surface.blit(
        panel,
        (_centered(panel.get_width()), (WINDOW_HEIGHT - panel.get_height()) // 2),
    )
    title = assets.text("GAME OVER", big=True)
    surface.blit(title, (_centered(title.get_width()), 30))

    score_label = assets.text("SCORE:")
    level_label = assets.text("LEVEL:")
    score_value = assets.text(str(game.score))
    level_value = assets.text(str(game.level))
    surface.blit(score_label, (_centered(score_label.get_width(), 10), 170))
    surface.blit(level_label, (_centered(level_label.get_width()), 170))
    surface.blit(assets.text("TOTAL LINES:"), (425, 170))
    surface.blit(score_value, (_centered(score_value.get_width(), 10), 230))
    surface.blit(level_value, (_centered(level_value.get_width()), 230))
    surface.blit(assets.text(str(game.total_lines)), (475, 230))

    selected = game.game_over_selection
    restart = assets.text((">" if selected == RESTART else "") + "RESTART")
    back = assets.text((">" if selected == BACK_TO_MENU else "") + "BACK TO MENU")
    # The restart entry is centred on the width of the selected play entry.
    surface.blit(restart, (_centered(assets.text(">PLAY").get_width()), 400))
    surface.blit(back, (_centered(back.get_width()), 500))


def draw_frame(surface: pygame.Surface, game: Game, assets: Assets) -> None:
    """Draw the current state of `game` onto `surface`."""
    surface.blit(assets.background, (0, 0))
    if game.screen is Screen.MENU:
        _draw_menu(surface, game, assets)
        return
    _draw_field(surface, game, assets)
    if game.screen is Screen.GAME_OVER:
        _draw_game_over(surface, game, assets)


def _open_audio(music: Path | None) -> bool:
    if music is None:
        print("music file not found", file=sys.stderr)
        return False
    try:
        pygame.mixer.init(44100, -16, 2, 2048)
        pygame.mixer.music.load(str(music))
    except pygame.error as error:
        print(f"audio unavailable: {error}", file=sys.stderr)
        return False
    return True


def _sync_music(game: Game) -> None:
    if game.music:
        if not pygame.mixer.music.get_busy():
            pygame.mixer.music.play(-1)
    else:
        pygame.mixer.music.stop()


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until the player quits."""
    parser = argparse.ArgumentParser(prog="tetris", description="Play Tetris.")
    parser.add_argument(
        "--assets",
        default=".",
        help="directory holding the res/ folder (default: current directory)",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            assets = Assets.load(args.assets)
        except (FileNotFoundError, pygame.error) as error:
            print(f"cannot load assets: {error}", file=sys.stderr)
            return 1
        audio = _open_audio(assets.music)

        game = Game()
        while game.running:
            pygame.time.wait(FRAME_DELAY_MS)
            if audio:
                _sync_music(game)
            game.begin_frame()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    key = _KEYS.get(event.key)
                    if key is not None:
                        game.handle_key(key)
            game.end_frame()
            draw_frame(surface, game, assets)
            pygame.display.flip()
        return 0
    finally:
        pygame.quit()