"""Reads and writes the 64-glyph level format.

A level set is a sequence of records separated by whitespace::

    # Level 1
    &&&&&&&&
    &---**|&
    &**|**|&
    &==|**|^
    &|*|*--&
    &|***|*&
    &---*|*&
    &&&&&&&&

Lines starting with ``#`` between records are comments.  Each record is
exactly 64 non-whitespace glyphs in row-major order.
"""

from __future__ import annotations

import logging
import string
from typing import Iterator

from backend.models.block import (
    HORIZONTAL_GLYPHS,
    VERTICAL_GLYPHS,
    Axis,
    Block,
    Exit,
    Glyph,
    Piece,
    Player,
    Wall,
)
from backend.models.grid import (
    CELL_COUNT,
    EXIT,
    FLOOR,
    WALL,
    Grid,
    on_board,
    pos_to_xy,
    xy_to_pos,
)
from backend.models.level import Level

logger = logging.getLogger(__name__)

_WHITESPACE = frozenset(" \r\n")
_ID_DIGITS = string.digits[1:] + string.ascii_uppercase


class LevelFormatError(ValueError):
    """Level data that cannot be turned into a playable level."""


class UnknownGlyphError(LevelFormatError):
    """A record contains a byte that is not part of the level alphabet."""


# -- stream scanning ----------------------------------------------------------


def iter_records(data: str | bytes) -> Iterator[str]:
    """Yield each 64-glyph record of a level-set stream.

    Whitespace and ``#`` comment lines between records are skipped.  A
    stream that ends with fewer than 64 bytes left at a record boundary
    simply ends; a record that runs out of glyphs once started raises
    ``LevelFormatError``.
    """
    if isinstance(data, bytes):
        # latin-1 maps every byte to exactly one character.
        data = data.decode("latin-1")

    pos, end = 0, len(data)
    count = 0
    while pos < end:
        ch = data[pos]
        if ch == "#":
            newline = data.find("\n", pos)
            if newline == -1:
                return
            pos = newline + 1
            continue
        if ch in _WHITESPACE:
            pos += 1
            continue

        if end - pos < CELL_COUNT:
            logger.debug(
                "Ignoring %d trailing bytes after level %d", end - pos, count
            )
            return

        count += 1
        glyphs: list[str] = []
        while len(glyphs) < CELL_COUNT:
            if pos == end:
                raise LevelFormatError(
                    f"Level {count}: expected {CELL_COUNT} glyphs, "
                    f"found only {len(glyphs)}."
                )
            ch = data[pos]
            pos += 1
            if ch not in _WHITESPACE:
                glyphs.append(ch)
        yield "".join(glyphs)


def load_levels(data: str | bytes, *, strict: bool = False) -> list[Level]:
    """Parse every record of a level-set stream."""
    levels: list[Level] = []
    for number, record in enumerate(iter_records(data), 1):
        try:
            levels.append(parse(record, strict=strict))
        except LevelFormatError as exc:
            raise type(exc)(f"Level {number}: {exc}") from exc
    return levels


# -- decoding -----------------------------------------------------------------


def parse(record: str, *, strict: bool = False) -> Level:
    """Decode one 64-glyph record into a ``Level``.

    Multi-cell glyphs are grouped into pieces by flooding from their first
    cell: rightward for horizontal pieces and the player, downward for
    vertical pieces.  Pieces get IDs 1..N in scan order.
    """
    if len(record) != CELL_COUNT:
        raise LevelFormatError(
            f"Expected {CELL_COUNT} glyphs, got {len(record)}."
        )

    glyphs = list(record)
    claimed = [False] * CELL_COUNT
    grid = Grid()
    blocks: list[Block] = []
    exits: list[tuple[int, int]] = []
    players = 0
    next_id = 1

    for pos, ch in enumerate(glyphs):
        if claimed[pos]:
            continue
        x, y = pos_to_xy(pos)

        if ch == Glyph.WALL:
            grid.set(x, y, WALL)
            blocks.append(Block(Wall(), Axis.FIXED, x, y, x, y))
        elif ch == Glyph.EXIT:
            grid.set(x, y, EXIT)
            blocks.append(Block(Exit(), Axis.FIXED, x, y, x, y))
            exits.append((x, y))
        elif ch == Glyph.PLAYER or ch in HORIZONTAL_GLYPHS:
            x2, y2 = _flood(glyphs, claimed, x, y, 1, 0)
            if ch == Glyph.PLAYER:
                block_type: Player | Piece = Player()
                players += 1
            else:
                block_type = Piece(Glyph(ch))
            blocks.append(
                Block(block_type, Axis.HORIZONTAL, x, y, x2, y2, id=next_id)
            )
            next_id += 1
        elif ch in VERTICAL_GLYPHS:
            x2, y2 = _flood(glyphs, claimed, x, y, 0, 1)
            blocks.append(
                Block(Piece(Glyph(ch)), Axis.VERTICAL, x, y, x2, y2, id=next_id)
            )
            next_id += 1
        elif ch != Glyph.FLOOR:
            if strict:
                raise UnknownGlyphError(
                    f"Unknown glyph {ch!r} at ({x}, {y})."
                )
            logger.warning(
                "Unknown glyph %r at (%d, %d); treating it as floor", ch, x, y
            )
            glyphs[pos] = Glyph.FLOOR

    for block in blocks:
        if block.movable:
            for cx, cy in block.cells():
                grid.set(cx, cy, block.id)

    if players != 1:
        raise LevelFormatError(f"Expected exactly one player, found {players}.")
    if len(exits) != 1:
        raise LevelFormatError(f"Expected exactly one exit, found {len(exits)}.")

    template = "".join(glyphs)
    logger.debug("Parsed level with %d pieces:\n%s", next_id - 1, format_grid(template))
    return Level(template=template, grid=grid, blocks=blocks, exit_pos=exits[0])


def _flood(
    glyphs: list[str], claimed: list[bool], x: int, y: int, dx: int, dy: int
) -> tuple[int, int]:
    """Claim the run of identical glyphs starting at ``(x, y)``.

    Returns the last cell of the run.
    """
    ch = glyphs[xy_to_pos(x, y)]
    while True:
        claimed[xy_to_pos(x, y)] = True
        nx, ny = x + dx, y + dy
        if not on_board(nx, ny):
            return x, y
        npos = xy_to_pos(nx, ny)
        if claimed[npos] or glyphs[npos] != ch:
            return x, y
        x, y = nx, ny


# -- encoding -----------------------------------------------------------------


def encode(level: Level) -> str:
    """Return the 64-glyph record for the level's current layout.

    Movable blocks are stamped after fixed ones, so a piece standing on the
    exit hides it.
    """
    glyphs = [Glyph.FLOOR.value] * CELL_COUNT
    ordered = sorted(level.blocks, key=lambda b: b.movable)
    for block in ordered:
        for x, y in block.cells():
            glyphs[xy_to_pos(x, y)] = block.glyph.value
    return "".join(glyphs)


def format_grid(glyphs: str) -> str:
    """Lay 64 glyphs out as eight newline-terminated rows."""
    return "".join(f"{glyphs[r * 8 : (r + 1) * 8]}\n" for r in range(8))


def format_occupancy(level: Level) -> str:
    """Debug view of the live grid: piece IDs as 1-9 then A-Z."""
    out: list[str] = []
    for value in level.grid.cells:
        if value == FLOOR:
            out.append(Glyph.FLOOR.value)
        elif value == WALL:
            out.append(Glyph.WALL.value)
        elif value == EXIT:
            out.append(Glyph.EXIT.value)
        elif value <= len(_ID_DIGITS):
            out.append(_ID_DIGITS[value - 1])
        else:
            out.append("?")
    return format_grid("".join(out))
