# tetris

A small falling-block puzzle game drawn with pygame. Pieces drop into a
well that is 10 cells wide and 20 tall. Fill a row to clear it and score
points. Every ten cleared lines raise the level, and pieces then fall faster.

## Installing

```
pip install .
```

## Playing

```
tetris
```

The window is 680 by 700 pixels. The game reads its images, font and music
from a `res/` directory, which by default is looked for in the current
directory. `--assets DIR` names the directory that holds `res/`:

```
tetris --assets path/to/game
```

The files it expects are:

- `res/gfx/square_yellow.png`, `square_purple.png`, `square_orange.png`,
  `square_blue.png`, `square_cyan.png`, `square_green.png`, `square_red.png`,
  `square_white.png`: the blocks, 30 by 30 pixels
- `res/gfx/tetrisLogo.png`: the logo shown in the menu
- `res/gfx/blackScreen.png`: the background, also used half-transparent
  behind the game-over panel
- `res/ttf/slkscr.ttf`: the font
- `res/sfx/tetrisSong.wav`: the background music

If an image is missing, `tetris` prints an error and exits with status 1.
If the font is missing, pygame's default font is used. If the music file is
missing or audio cannot be opened, a message is printed and the game runs
without music.

### Controls

| Key   | In the menu                 | In play                 | After game over          |
|-------|-----------------------------|-------------------------|--------------------------|
| Up    | move selection up           | rotate the piece        | move selection up        |
| Down  | move selection down         | drop one row            | move selection down      |
| Left  |                             | move left               |                          |
| Right |                             | move right              |                          |
| Space | choose Play / Music / Quit  | hard drop               | Restart / Back to menu   |

The **Music** entry in the menu turns the background music on and off.
Closing the window or choosing **Quit** ends the program.

### Scoring

Lines cleared at once score 100, 300, 500 or 800 points for one, two, three
or four lines, multiplied by the current level. The game starts at level 1
with a piece falling one row every 20 frames of 50 ms; each new level makes
that two frames fewer.

## Using the game logic

The rules live apart from the drawing code in `tetris.game`, so they can be
driven directly:

```python
import random
from tetris.game import Game, Key, Screen

game = Game(random.Random(1))
game.handle_key(Key.SPACE)   # "Play" is selected in the menu
assert game.screen is Screen.PLAYING

game.begin_frame()           # advance timers, lift the piece out of the grid
game.handle_key(Key.LEFT)
game.end_frame()             # apply gravity when due, stamp the piece back
print(game.score, game.level, game.total_lines)
```

`Game` holds the grid (`new_grid()` gives an empty one, with walls and a
floor of value 9), the current `piece`, `score`, `level`, `total_lines`,
`speed`, the current `screen` (`Screen.MENU`, `Screen.PLAYING`,
`Screen.GAME_OVER`), `menu_selection` (`MenuChoice`) and the `music` and
`running` flags. Its methods `piece_fits`, `rotate`, `lift_piece`,
`stamp_piece`, `shift_down`, `clear_lines` and `reset` can also be called on
their own.

`tetris.tetrominoes` holds the pieces: `TetrominoType`, `shape(kind)` giving
a 4x4 cell map, `rotate_map(cells)` turning a map a quarter turn, and
`Tetromino`, the falling piece with `fall()`, `rotate()`, `rotated()` and
`reset()`, which brings in the previewed `next_kind`.

`tetris.render` draws a game onto a pygame surface with
`draw_frame(surface, game, assets)`, where `Assets.load(base)` loads the
files listed above; `block_color(value)` names the colour used for a cell
value. `main()` is what the `tetris` command runs.

## What it does not do

The package ships no images, font or music; they must be supplied under
`res/`. Scores are not saved between sessions, and there is no high-score
table.

## Running the tests

```
pip install .[test]
pytest
```