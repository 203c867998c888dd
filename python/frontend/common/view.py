"""Drawing shared by every front end.

Each toolkit supplies a ``Canvas`` that can fill a rectangle given in board
units; ``draw_level`` decides what goes where.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from backend.engine.gameplay import GamePlay
from backend.models.block import Axis, Block, Exit, Piece, Player, Wall
from backend.models.grid import BOARD_HEIGHT, BOARD_WIDTH

Colour = tuple[int, int, int]

RED: Colour = (255, 0, 0)
WHITE: Colour = (255, 255, 255)
YELLOW: Colour = (255, 255, 0)
BLUE: Colour = (0, 0, 255)
GREEN: Colour = (0, 255, 0)


class Canvas(Protocol):
    def fill(self, x: float, y: float, w: float, h: float, colour: Colour) -> None:
        """Fill a rectangle whose corner and size are in board cells."""
        ...


@dataclass(frozen=True)
class BoardLayout:
    """Maps between window pixels and board units.

    The board is centred in a square window of ``window`` pixels.
    """

    tile: int = 50
    window: int = 512

    @property
    def margin(self) -> int:
        return (self.window - self.tile * BOARD_WIDTH) // 2

    @property
    def board_px(self) -> int:
        return self.tile * BOARD_HEIGHT

    def to_board(self, sx: float, sy: float) -> tuple[float, float]:
        return (sx - self.margin) / self.tile, (sy - self.margin) / self.tile

    def to_screen(self, x: float, y: float) -> tuple[int, int]:
        return (
            self.margin + round(x * self.tile),
            self.margin + round(y * self.tile),
        )


def block_colour(block: Block) -> Colour:
    match block.type:
        case Player():
            return RED
        case Wall():
            return WHITE
        case Exit():
            return YELLOW
        case Piece():
            if block.axis is Axis.VERTICAL:
                return GREEN
            return BLUE
    raise ValueError(f"Unhandled block type {block.type!r}")


def draw_level(game: GamePlay, canvas: Canvas) -> None:
    """Paint every block; the dragged block is drawn at its proposed spot."""
    # Fixed blocks first so pieces on the exit and the dragged piece stay visible.
    ordered = sorted(game.blocks, key=lambda b: (b.movable, b.drag))
    for block in ordered:
        x1, y1, x2, y2 = block.target_footprint()
        canvas.fill(x1, y1, x2 - x1 + 1, y2 - y1 + 1, block_colour(block))


def status_line(index: int, total: int, game: GamePlay) -> str:
    return f"Level {index + 1}/{total}    Moves: {game.moves}"
