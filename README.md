# tunnelrun

This is a small arcade game that runs in the terminal. The tunnel scrolls upwards, and its
walls drift left and right. Keep your ship (`v`) on the floor for as long as
you can. Each row you survive scores one point.

## Installing

```
pip install .
```

## Playing

```
tunnelrun
```

The tunnel fills the whole terminal window. The score is shown on the bottom
line. The controls are:

| Key                   | Action     |
|-----------------------|------------|
| Left arrow            | move left  |
| Right arrow           | move right |
| `q`, `c` or Ctrl-C    | quit       |

If you press no key, the tunnel moves one row every second. The game ends when you
hit a wall. When the game exits, it prints a final line with the reason it ended
and your score, for example `Game over! Final score: 42`.

### Demo mode

```
tunnelrun --demo
```

In demo mode the game plays itself. It steers towards the middle of the open
space in the next row, moves ten rows a second and stops at a score of 200.

## Using the tunnel in code

`tunnelrun.tunnel` holds the game model. It contains no terminal code.

- `Tunnel(builder, rows, cols, max_index=0xFFFF)` builds a tunnel. All
  coordinates lie within `0..max_index`, and all arithmetic on them saturates
  at those bounds. It raises `ValueError` if `rows`, `cols` or the player's
  starting column fall outside that range.
- A `TunnelBuilder` chooses where the player starts (`choose_player_start`).
  It also chooses which wall moves on each new row (`choose_step`, which
  returns a `TunnelBuilderChoice`).
- Iterating a tunnel yields `Cell` named tuples `(row, col, cell_type)`, one
  per cell, row by row. `cell_type` is a `TunnelCellType`: `PLAYER`, `FLOOR`
  or `WALL`. The player is always on row 0.
- `move_player_left()` and `move_player_right()` shift the player by one
  column.
- `step(builder)` scrolls the tunnel by one row.
- `is_collision()` tells whether the player is inside a wall of the front row.

`tunnelrun.game` provides `SimpleBuilder`, which starts the player in the
middle and picks a random wall to move. It also provides `render_rows()`,
which turns a tunnel into one line of text per row.

```python
import random

from tunnelrun.game import SimpleBuilder, render_rows
from tunnelrun.tunnel import Tunnel

builder = SimpleBuilder(random.Random(1))
tunnel = Tunnel(builder, 10, 20)
tunnel.move_player_left()
tunnel.step(builder)
print("\n".join(render_rows(tunnel)))
print(tunnel.is_collision())
```

## Running the tests

```
pip install .[test]
pytest
```