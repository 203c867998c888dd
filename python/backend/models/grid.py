"""Occupancy grid and addressing helpers for the 8×8 board."""

from __future__ import annotations

BOARD_WIDTH = 8
BOARD_HEIGHT = 8
CELL_COUNT = BOARD_WIDTH * BOARD_HEIGHT

# Cell values.  Movable pieces use their ID (1..N).
FLOOR = 0
WALL = -1
EXIT = -2


def pos_to_xy(pos: int) -> tuple[int, int]:
    return pos % BOARD_WIDTH, pos // BOARD_WIDTH


def xy_to_pos(x: int, y: int) -> int:
    return x + y * BOARD_WIDTH


def on_board(x: int, y: int) -> bool:
    return 0 <= x < BOARD_WIDTH and 0 <= y < BOARD_HEIGHT


class Grid:
    """Row-major occupancy array, addressed by ``(x, y)``."""

    def __init__(self, cells: list[int] | None = None) -> None:
        if cells is None:
            cells = [FLOOR] * CELL_COUNT
        if len(cells) != CELL_COUNT:
            raise ValueError(
                f"Expected {CELL_COUNT} cells, got {len(cells)}."
            )
        self.cells = cells

    def get(self, x: int, y: int) -> int:
        return self.cells[xy_to_pos(x, y)]

    def set(self, x: int, y: int, value: int) -> None:
        self.cells[xy_to_pos(x, y)] = value

    def copy(self) -> Grid:
        return Grid(self.cells[:])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Grid({self.cells!r})"
