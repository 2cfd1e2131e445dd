# blockfall

The rules, state and drawing code for a falling-block puzzle game. Pieces drop
into a 20 × 10 well; fill a row to clear it and score points. Drawing is done
onto pygame surfaces.

## Levels

- **Level 1** uses seven pieces. Each press of Down moves the piece one row,
  as does each call to `fall_block()`. Clearing 1, 2 or 3 rows at once scores
  50, 150 or 250 points.
- **Level 2** adds an eighth, U-shaped piece. Down and `fall_block()` move the
  piece two rows, and Space pushes it six rows. Clearing 1, 2 or 3 rows at
  once scores 30, 80 or 170 points.

Other levels are rejected with `ValueError`.

Pieces are dealt from a bag: within a level, each piece appears once before
any piece repeats. When a push with Down (or Space on level 2) cannot move the
piece, it locks in place and the push is worth two points. If a new piece does
not fit when it comes in, the game is over; the next key press starts a fresh
game.

## Modules

- `blockfall.shape` – `Position` (a row and column), `Shape` and
  `make_shape(shape_id)`, which builds a piece by its id (1 to 8) at its spawn
  position and raises `ValueError` for any other id. A shape moves with
  `move(rows, columns)`, turns with `rotate()` and `reverse_rotation()`,
  reports the cells it covers with `cell_positions()` and paints itself with
  `draw(surface, offset_x, offset_y)`.
- `blockfall.grid` – `Grid`, the playing field. Each cell holds 0 when empty or
  the id of the piece that settled there; `grid[row, column]` reads and writes
  a cell and raises `IndexError` off the board. It checks bounds and free cells
  (`is_outside`, `is_vacant`, `is_row_full`), removes complete rows and drops
  the rows above (`clear_full_rows`, which returns how many were removed),
  empties itself with `reset()` and paints itself with `draw(surface)`.
- `blockfall.game` – `Game(level=1, rng=None, sound_dir=None)` ties the grid
  and the pieces together. `handle_key(key)` takes a `Key` (`LEFT`, `RIGHT`,
  `UP` to rotate, `DOWN`, `SPACE`) or `None` for no key, `fall_block()`
  advances the piece by one tick, and `draw(surface)` renders the grid, the
  current piece and a preview of the next one. Pass a `random.Random` as `rng`
  for a repeatable deal. Given `sound_dir`, the game loads `music.mp3` (played
  on a loop), `rotate.mp3` and `clear.mp3` from that directory with
  `pygame.mixer`; `close()` stops and releases them.
- `blockfall.player` – `Player(name, password, path="player.txt")` keeps each
  player's best score in a plain text file.
- `blockfall.button` – `Button`, a rectangle for menus that turns light grey
  while the mouse is over it (`update_hover`, `contains`, `draw`,
  `draw_text`).

## Playing a move

```python
import random

from blockfall.game import Game, Key

game = Game(level=2, rng=random.Random(1))
game.handle_key(Key.LEFT)
game.handle_key(Key.UP)
game.fall_block()
print(game.score, game.game_over)
```

## Keeping scores

```python
from blockfall.player import Player

password = "password"
player = Player("alice", password)
player.update_score(420)
player.save()          # adds or updates the record in player.txt
print(player.max_score())
```

A record is only raised, never lowered: saving a score below the stored best
leaves the best score in place. `max_score()` returns 0 when the file cannot
be read.

## What this package does not do

It has no command and no main loop: it does not open a window, read the
keyboard, run a timer for falling pieces, or show menu or game-over screens.
A program using it turns key presses into `Key` values, calls `fall_block()`
on its own schedule and calls the `draw` methods on its own surface.