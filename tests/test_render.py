import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random  # noqa: E402
from unittest import mock  # noqa: E402

import pygame  # noqa: E402
import pytest  # noqa: E402

from tetris.game import Game, Screen  # noqa: E402
from tetris.render import Assets, block_color, draw_frame, main  # noqa: E402

SQUARE_COLORS = {
    "yellow": (250, 250, 0),
    "purple": (160, 0, 160),
    "orange": (250, 140, 0),
    "blue": (0, 0, 250),
    "cyan": (0, 250, 250),
    "green": (0, 250, 0),
    "red": (250, 0, 0),
    "white": (255, 255, 255),
}
LOGO_COLOR = (10, 200, 30)
BACKGROUND = (0, 0, 0)


def _save(path, size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))


def _make_res(base):
    gfx = base / "res" / "gfx"
    gfx.mkdir(parents=True)
    for name, color in SQUARE_COLORS.items():
        _save(gfx / f"square_{name}.png", (30, 30), color)
    _save(gfx / "tetrisLogo.png", (270, 100), LOGO_COLOR)
    _save(gfx / "blackScreen.png", (680, 700), BACKGROUND)
    return base


@pytest.fixture
def assets(tmp_path):
    return Assets.load(_make_res(tmp_path))


@pytest.fixture
def canvas():
    return pygame.Surface((680, 700))


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


@pytest.mark.parametrize(
    "value, name",
    [(2, "yellow"), (3, "purple"), (4, "orange"), (5, "blue"),
     (6, "cyan"), (7, "green"), (8, "red"), (9, "white")],
)
def test_block_color_of_cell_values(value, name):
    assert block_color(value) == name


@pytest.mark.parametrize("value", [0, 1, 10])
def test_block_color_of_empty_or_unknown_value(value):
    assert block_color(value) is None


def test_load_reads_every_square(assets):
    assert sorted(assets.squares) == [2, 3, 4, 5, 6, 7, 8, 9]
    assert _rgb(assets.squares[8], (0, 0)) == SQUARE_COLORS["red"]


def test_load_makes_translucent_panel(assets):
    assert assets.panel.get_alpha() == 200
    assert assets.panel.get_size() == assets.background.get_size()


def test_load_without_music_leaves_it_unset(assets):
    assert assets.music is None


def test_load_finds_music(tmp_path):
    base = _make_res(tmp_path)
    sfx = base / "res" / "sfx"
    sfx.mkdir()
    (sfx / "tetrisSong.wav").write_bytes(b"")
    loaded = Assets.load(base)
    assert loaded.music == sfx / "tetrisSong.wav"


def test_load_missing_image_raises(tmp_path):
    base = _make_res(tmp_path)
    (base / "res" / "gfx" / "tetrisLogo.png").unlink()
    with pytest.raises(FileNotFoundError):
        Assets.load(base)


def test_text_is_cached(assets):
    first = assets.text("SCORE:")
    assert assets.text("SCORE:") is first


def test_big_text_is_taller(assets):
    small = assets.text("GAME OVER")
    big = assets.text("GAME OVER", big=True)
    assert big.get_height() > small.get_height()
    assert big.get_width() > small.get_width()


def test_text_is_drawn_in_white(assets):
    surface = assets.text("PLAY")
    colors = {
        _rgb(surface, (x, y))
        for x in range(surface.get_width())
        for y in range(surface.get_height())
    }
    assert (255, 255, 255) in colors


def test_menu_shows_logo_and_no_field(canvas, assets):
    game = Game(random.Random(1))
    draw_frame(canvas, game, assets)
    assert _rgb(canvas, (206, 51)) == LOGO_COLOR
    assert _rgb(canvas, (121, 631)) == BACKGROUND


def test_playing_draws_walls_and_next_box(canvas, assets):
    game = Game(random.Random(1))
    game.screen = Screen.PLAYING
    draw_frame(canvas, game, assets)
    white = SQUARE_COLORS["white"]
    assert _rgb(canvas, (121, 31)) == white
    assert _rgb(canvas, (121, 631)) == white
    assert _rgb(canvas, (491, 61)) == white
    assert _rgb(canvas, (161, 61)) == BACKGROUND


def test_playing_draws_stamped_piece(canvas, assets):
    game = Game(random.Random(1))
    game.screen = Screen.PLAYING
    game.stamp_piece()
    draw_frame(canvas, game, assets)
    for row, line in enumerate(game.piece.cells):
        for col, value in enumerate(line):
            point = (120 + 30 * (game.piece.x + col) + 1, 30 + 30 * (game.piece.y + row) + 1)
            if value:
                assert _rgb(canvas, point) == SQUARE_COLORS[block_color(value)]


def test_game_over_dims_the_field(canvas, assets):
    game = Game(random.Random(1))
    game.screen = Screen.GAME_OVER
    draw_frame(canvas, game, assets)
    red, green, blue = _rgb(canvas, (121, 631))
    assert 0 < red < 255
    assert red == green == blue


def test_main_quits_on_window_close(tmp_path):
    base = _make_res(tmp_path)
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert main(["--assets", str(base)]) == 0


def test_main_reports_missing_assets(tmp_path):
    assert main(["--assets", str(tmp_path)]) == 1