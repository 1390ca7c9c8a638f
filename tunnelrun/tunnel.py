"""Scrolling tunnel model: walls, player position and collision checks."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Iterator, NamedTuple

DEFAULT_MAX_INDEX = 0xFFFF


class TunnelBuilderChoice(enum.Enum):
    """Which wall the builder wants to shift on the next row."""

    MOVE_LEFT_WALL = enum.auto()
    MOVE_RIGHT_WALL = enum.auto()


class TunnelCellType(enum.Enum):
    """What occupies a single cell of the tunnel."""

    PLAYER = enum.auto()
    FLOOR = enum.auto()
    WALL = enum.auto()


class TunnelBuilder(ABC):
    """Decides where the player starts and how each new row is shaped."""

    @abstractmethod
    def choose_player_start(self, max_value: int) -> int:
        """Return the starting column for a tunnel ``max_value`` columns wide."""

    @abstractmethod
    def choose_step(self) -> TunnelBuilderChoice:
        """Return the wall to move for the next row."""


class Cell(NamedTuple):
    """One cell of the tunnel as produced by iteration."""

    row: int
    col: int
    cell_type: TunnelCellType


@dataclass
class _Walls:
    left_wall: int
    gap_to_right_wall: int

    def in_wall(self, column: int, max_index: int) -> bool:
        right = min(self.left_wall + self.gap_to_right_wall, max_index)
        return column <= self.left_wall or column > right

    def cell_type(
        self, player: int, row: int, column: int, max_index: int
    ) -> TunnelCellType:
        if row == 0 and column == player:
            return TunnelCellType.PLAYER
        if self.in_wall(column, max_index):
            return TunnelCellType.WALL
        return TunnelCellType.FLOOR


class Tunnel:
    """A tunnel of rows scrolling towards the player, who sits on row 0.

    Coordinates are bounded to ``0..max_index`` and all arithmetic on them
    saturates at those bounds.
    """

    def __init__(
        self,
        builder: TunnelBuilder,
        rows: int,
        cols: int,
        max_index: int = DEFAULT_MAX_INDEX,
    ) -> None:
        if max_index < 0:
            raise ValueError(f"max_index must not be negative, got {max_index}")
        for name, value in (("rows", rows), ("cols", cols)):
            if not 0 <= value <= max_index:
                raise ValueError(f"{name} must be within 0..{max_index}, got {value}")
        self.max_index = max_index
        self.width = cols
        self._walls: deque[_Walls] = deque()
        self.player = self._checked(builder.choose_player_start(cols), "player start")
        for _ in range(max(rows - 3, 0)):
            self._add_one_row(builder)

    def _checked(self, value: int, what: str) -> int:
        if not 0 <= value <= self.max_index:
            raise ValueError(f"{what} must be within 0..{self.max_index}, got {value}")
        return value

    def _saturating_add(self, a: int, b: int) -> int:
        return min(a + b, self.max_index)

    def _clone_last_row(self) -> _Walls:
        if self._walls:
            last = self._walls[-1]
        else:
            last = _Walls(left_wall=0, gap_to_right_wall=max(self.width - 2, 0))
            self._walls.append(last)
        return _Walls(last.left_wall, last.gap_to_right_wall)

    def _add_one_row(self, builder: TunnelBuilder) -> None:
        new_row = self._clone_last_row()
        if new_row.gap_to_right_wall > 1:
            new_row.gap_to_right_wall -= 1
        choice = builder.choose_step()
        if choice is TunnelBuilderChoice.MOVE_LEFT_WALL:
            if self._saturating_add(new_row.left_wall, 3) < self.width:
                new_row.left_wall += 1
        elif choice is TunnelBuilderChoice.MOVE_RIGHT_WALL:
            if new_row.gap_to_right_wall == 1:
                new_row.left_wall = max(new_row.left_wall - 1, 0)
        self._walls.append(new_row)

    def move_player_left(self) -> None:
        """Move the player one column left, stopping at column 0."""
        self.player = max(self.player - 1, 0)

    def move_player_right(self) -> None:
        """Move the player one column right, stopping at ``max_index``."""
        self.player = self._saturating_add(self.player, 1)

    def is_collision(self) -> bool:
        """True when the player is inside a wall of the front row."""
        if not self._walls:
            return False
        return self._walls[0].in_wall(self.player, self.max_index)

    def step(self, builder: TunnelBuilder) -> None:
        """Scroll the tunnel by one row."""
        self._add_one_row(builder)
        self._walls.popleft()

    def __iter__(self) -> Iterator[Cell]:
        row_count = len(self._walls)
        if row_count > self.max_index:
            row_count = 0
        return self._cells(self.player, row_count)

    def _cells(self, player: int, row_count: int) -> Iterator[Cell]:
        for row, walls in zip(range(row_count), self._walls):
            for col in range(self.width):
                yield Cell(row, col, walls.cell_type(player, row, col, self.max_index))