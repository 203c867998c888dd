"""Block model for the sliding-block puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterator


class Glyph(StrEnum):
    FLOOR = "*"
    WALL = "&"
    HORIZONTAL = "-"
    HORIZONTAL_ALT = "_"
    VERTICAL = "|"
    VERTICAL_ALT = "("
    PLAYER = "="
    EXIT = "^"


HORIZONTAL_GLYPHS = frozenset({Glyph.HORIZONTAL, Glyph.HORIZONTAL_ALT})
VERTICAL_GLYPHS = frozenset({Glyph.VERTICAL, Glyph.VERTICAL_ALT})


class Axis(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    FIXED = "fixed"


# -- block types ----------------------------------------------------------------


@dataclass(frozen=True)
class Player:
    pass


@dataclass(frozen=True)
class Piece:
    glyph: Glyph


@dataclass(frozen=True)
class Wall:
    pass


@dataclass(frozen=True)
class Exit:
    pass


BlockType = Player | Piece | Wall | Exit


@dataclass
class Block:
    """A rectangular occupant of the board.

    The footprint ``(x1, y1)-(x2, y2)`` is inclusive.  ``target_x`` and
    ``target_y`` hold the proposed top-left corner while the block is being
    dragged; the committed footprint only changes on commit.
    """

    type: BlockType
    axis: Axis
    x1: int
    y1: int
    x2: int
    y2: int
    id: int = 0
    drag: bool = False
    target_x: int = 0
    target_y: int = 0

    # -- queries --------------------------------------------------------------

    @property
    def width(self) -> int:
        return self.x2 - self.x1 + 1

    @property
    def height(self) -> int:
        return self.y2 - self.y1 + 1

    @property
    def movable(self) -> bool:
        return self.axis is not Axis.FIXED

    @property
    def glyph(self) -> Glyph:
        """The glyph this block is written with in the level format."""
        match self.type:
            case Player():
                return Glyph.PLAYER
            case Piece(glyph=glyph):
                return glyph
            case Wall():
                return Glyph.WALL
            case Exit():
                return Glyph.EXIT
        raise AssertionError(f"Unhandled block type {self.type!r}")

    def contains(self, x: int, y: int) -> bool:
        return self.x1 <= x <= self.x2 and self.y1 <= y <= self.y2

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield every ``(x, y)`` cell of the committed footprint."""
        for y in range(self.y1, self.y2 + 1):
            for x in range(self.x1, self.x2 + 1):
                yield x, y

    def target_footprint(self) -> tuple[int, int, int, int]:
        """Footprint to draw: the proposed one while dragging."""
        if not self.drag:
            return self.x1, self.y1, self.x2, self.y2
        return (
            self.target_x,
            self.target_y,
            self.target_x + self.width - 1,
            self.target_y + self.height - 1,
        )

    # -- mutation -------------------------------------------------------------

    def move_to(self, x: int, y: int) -> None:
        """Translate the footprint so its top-left corner is ``(x, y)``."""
        width, height = self.x2 - self.x1, self.y2 - self.y1
        self.x1, self.y1 = x, y
        self.x2, self.y2 = x + width, y + height
