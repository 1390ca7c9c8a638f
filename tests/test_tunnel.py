import pytest

from tunnelrun.tunnel import (
    Tunnel,
    TunnelBuilder,
    TunnelBuilderChoice,
    TunnelCellType,
)

U8_MAX = 255
SIZE = 5
REPEAT_STEPS = 8
LOOPS = SIZE - 3

P = TunnelCellType.PLAYER
F = TunnelCellType.FLOOR
W = TunnelCellType.WALL


class MoveWallsPeriodically(TunnelBuilder):
    def __init__(self, b, count, period):
        self.b = b
        self.count = count
        self.period = period

    def choose_player_start(self, max_value):
        return max(max_value - 2, 0) if self.b else 1

    def choose_step(self):
        while True:
            if self.b and self.count < self.period:
                self.count += 1
                return TunnelBuilderChoice.MOVE_LEFT_WALL
            if not self.b and self.count > 0:
                self.count -= 1
                return TunnelBuilderChoice.MOVE_RIGHT_WALL
            self.b = not self.b


class MoveWallsEvenly(TunnelBuilder):
    def __init__(self, b):
        self.b = b

    def choose_player_start(self, max_value):
        return max_value // 2

    def choose_step(self):
        self.b = not self.b
        if self.b:
            return TunnelBuilderChoice.MOVE_LEFT_WALL
        return TunnelBuilderChoice.MOVE_RIGHT_WALL


def make(builder, rows, cols):
    return Tunnel(builder, rows, cols, max_index=U8_MAX)


def first_row(t):
    return [cell.cell_type for cell in t if cell.row == 0]


def test_implicit_loop_vs_explicit_iter():
    t = make(MoveWallsEvenly(True), SIZE, SIZE)
    count = 0
    for _ in t:
        count += 1
    assert count == len(list(iter(t)))
    assert count == (SIZE - 2) * SIZE


def test_always_move_left_wall():
    builder = MoveWallsPeriodically(True, 0, LOOPS)
    t = make(builder, SIZE, SIZE)
    assert not t.is_collision()
    assert first_row(t) == [W, F, F, P, W]
    for _ in range(LOOPS):
        t.step(builder)
    assert not t.is_collision()
    assert first_row(t) == [W, W, W, P, W]


def test_always_move_right_wall():
    builder = MoveWallsPeriodically(False, LOOPS, LOOPS)
    t = make(builder, SIZE, SIZE)
    assert not t.is_collision()
    assert first_row(t) == [W, P, F, F, W]
    for _ in range(LOOPS):
        t.step(builder)
    assert not t.is_collision()
    assert first_row(t) == [W, P, W, W, W]


def test_continue_steps_down_narrow_tunnel():
    builder = MoveWallsPeriodically(True, 0, LOOPS)
    t = make(builder, SIZE, SIZE)
    for _ in range(REPEAT_STEPS):
        for _ in range(LOOPS):
            t.step(builder)
        assert not t.is_collision()
        assert first_row(t) == [W, W, W, P, W]

        for _ in range(LOOPS):
            t.step(builder)
        assert t.is_collision()

        for _ in range(LOOPS):
            t.move_player_left()
        assert not t.is_collision()
        assert first_row(t) == [W, P, W, W, W]

        for _ in range(LOOPS):
            t.move_player_right()
        assert t.is_collision()


def test_zero_rows():
    builder = MoveWallsEvenly(False)
    t = make(builder, 0, 0)
    assert not t.is_collision()
    assert first_row(t) == []
    assert len(list(t)) == 0
    t.step(builder)
    assert t.is_collision()
    assert first_row(t) == []
    assert len(list(t)) == 0


def test_zero_columns():
    builder = MoveWallsEvenly(False)
    t = make(builder, SIZE, 0)
    assert t.is_collision()
    assert first_row(t) == []
    assert len(list(t)) == 0
    t.step(builder)
    assert t.is_collision()
    assert first_row(t) == []
    assert len(list(t)) == 0


def test_size_one():
    builder = MoveWallsEvenly(True)
    t = make(builder, 1, 1)
    assert not t.is_collision()
    assert first_row(t) == []
    t.step(builder)
    assert t.is_collision()
    assert first_row(t) == [P]


def test_size_two():
    builder = MoveWallsEvenly(True)
    t = make(builder, 2, 2)
    assert not t.is_collision()
    assert first_row(t) == []
    t.step(builder)
    assert t.is_collision()
    assert first_row(t) == [W, P]


def test_size_three():
    builder = MoveWallsEvenly(True)
    t = make(builder, 3, 3)
    assert not t.is_collision()
    assert first_row(t) == []
    for _ in range(REPEAT_STEPS):
        t.step(builder)
        assert not t.is_collision()
        assert first_row(t) == [W, P, W]


def test_no_overflow_past_max_index():
    builder = MoveWallsEvenly(True)
    t = make(builder, U8_MAX, U8_MAX)
    assert next(iter(t), None) is not None
    assert len(list(t)) // U8_MAX == U8_MAX - 2
    for _ in range(3):
        t._add_one_row(builder)
    assert next(iter(t), None) is None


def test_move_player_saturates():
    t = make(MoveWallsEvenly(True), SIZE, SIZE)
    for _ in range(U8_MAX + 10):
        t.move_player_right()
    assert t.player == U8_MAX
    for _ in range(U8_MAX + 10):
        t.move_player_left()
    assert t.player == 0


def test_cells_are_ordered_row_major():
    t = make(MoveWallsEvenly(True), SIZE, SIZE)
    coords = [(cell.row, cell.col) for cell in t]
    assert coords == sorted(coords)
    assert {col for _, col in coords} == set(range(SIZE))


def test_single_player_cell_on_first_row():
    t = make(MoveWallsEvenly(True), SIZE, SIZE)
    players = [cell for cell in t if cell.cell_type is P]
    assert len(players) == 1
    assert players[0].row == 0
    assert players[0].col == t.player


@pytest.mark.parametrize("rows, cols", [(-1, 5), (5, -1), (U8_MAX + 1, 5), (5, U8_MAX + 1)])
def test_out_of_range_dimensions_rejected(rows, cols):
    with pytest.raises(ValueError):
        make(MoveWallsEvenly(True), rows, cols)