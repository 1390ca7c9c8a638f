"""Terminal front end: play the tunnel by keyboard or watch a self-playing demo."""

from __future__ import annotations

import enum
import itertools
import random
import sys
import time
from operator import attrgetter

from tunnelrun.tunnel import Tunnel, TunnelBuilder, TunnelBuilderChoice, TunnelCellType

_MAX_INDEX = 0xFFFF
_DEMO_TARGET_SCORE = 200
_QUIT_KEYS = frozenset({"c", "q", "\x03"})
_CELL_CHARS = {
    TunnelCellType.PLAYER: "v",
    TunnelCellType.FLOOR: " ",
    TunnelCellType.WALL: "O",
}


class SimpleBuilder(TunnelBuilder):
    """Starts the player in the middle and moves a random wall each row."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def choose_player_start(self, max_value: int) -> int:
        return max_value // 2

    def choose_step(self) -> TunnelBuilderChoice:
        if self.rng.random() < 0.5:
            return TunnelBuilderChoice.MOVE_LEFT_WALL
        return TunnelBuilderChoice.MOVE_RIGHT_WALL


class PlayerType(enum.Enum):
    SELF_DEMO = enum.auto()
    KEYBOARD = enum.auto()


class PlayerInput(enum.Enum):
    EMPTY = enum.auto()
    MOVE_LEFT = enum.auto()
    MOVE_RIGHT = enum.auto()
    QUIT = enum.auto()


def render_rows(tunnel: Tunnel) -> list[str]:
    """Return the tunnel as one text line per row."""
    return [
        "".join(_CELL_CHARS[cell.cell_type] for cell in cells)
        for _, cells in itertools.groupby(tunnel, key=attrgetter("row"))
    ]


def display(term, tunnel: Tunnel, score_row: int, game_score: int) -> None:
    """Draw the tunnel and the score on the terminal."""
    parts = [term.clear]
    player_mark = _CELL_CHARS[TunnelCellType.PLAYER]
    for row, line in enumerate(render_rows(tunnel)):
        parts.append(term.move_xy(0, row))
        parts.append(line.replace(player_mark, term.green(player_mark)))
    parts.append(term.move_xy(0, score_row))
    parts.append(term.green(str(game_score)))
    sys.stdout.write("".join(parts))
    sys.stdout.flush()


def demo_step(tunnel: Tunnel, timeout: float) -> PlayerInput:
    """Wait, then steer towards the middle of the next row's open space."""
    time.sleep(timeout)
    player = 0
    safe_min = tunnel.max_index
    safe_max = 0
    for cell in tunnel:
        if cell.cell_type is TunnelCellType.PLAYER:
            player = cell.col
        if cell.row == 1 and cell.cell_type in (
            TunnelCellType.PLAYER,
            TunnelCellType.FLOOR,
        ):
            safe_min = min(safe_min, cell.col)
            safe_max = max(safe_max, cell.col)
    safe_goal = safe_min + max(safe_max - safe_min, 0) // 2
    if player > safe_goal:
        return PlayerInput.MOVE_LEFT
    if player < safe_goal:
        return PlayerInput.MOVE_RIGHT
    return PlayerInput.EMPTY


def keyboard_step(term, timeout: float) -> PlayerInput:
    """Wait up to ``timeout`` seconds for a key and map it to an input."""
    key = term.inkey(timeout=timeout)
    if not key:
        return PlayerInput.EMPTY
    if key.is_sequence:
        if key.code == term.KEY_LEFT:
            return PlayerInput.MOVE_LEFT
        if key.code == term.KEY_RIGHT:
            return PlayerInput.MOVE_RIGHT
        return PlayerInput.EMPTY
    if str(key) in _QUIT_KEYS:
        return PlayerInput.QUIT
    return PlayerInput.EMPTY


def _play(
    term,
    tunnel: Tunnel,
    builder: TunnelBuilder,
    player_type: PlayerType,
    timeout: float,
    score_row: int,
) -> tuple[str, int]:
    game_score = 0
    while True:
        display(term, tunnel, score_row, game_score)
        if player_type is PlayerType.SELF_DEMO and game_score == _DEMO_TARGET_SCORE:
            return "Demo complete!", game_score

        if player_type is PlayerType.SELF_DEMO:
            player_input = demo_step(tunnel, timeout)
        else:
            player_input = keyboard_step(term, timeout)

        if player_input is PlayerInput.MOVE_LEFT:
            tunnel.move_player_left()
        elif player_input is PlayerInput.MOVE_RIGHT:
            tunnel.move_player_right()
        elif player_input is PlayerInput.QUIT:
            return "Quitting ...", game_score

        tunnel.step(builder)
        if tunnel.is_collision():
            return "Game over!", game_score
        game_score += 1


def main(argv: list[str] | None = None) -> int:
    """Run the game; pass ``--demo`` to let the computer play."""
    from blessed import Terminal

    args = sys.argv[1:] if argv is None else argv
    if "--demo" in args:
        player_type, timeout = PlayerType.SELF_DEMO, 0.1
    else:
        player_type, timeout = PlayerType.KEYBOARD, 1.0

    term = Terminal()
    columns = min(term.width, _MAX_INDEX)
    rows = min(term.height, _MAX_INDEX)
    builder = SimpleBuilder()

    with term.fullscreen(), term.raw():
        tunnel = Tunnel(builder, rows, columns, max_index=_MAX_INDEX)
        message, score = _play(
            term, tunnel, builder, player_type, timeout, max(rows - 1, 0)
        )

    print(f"{message} Final score: {score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())