"""A single puzzle level: template, live grid, blocks and move history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from backend.models.block import Block, Player
from backend.models.grid import Grid


class MoveRecord(NamedTuple):
    """One undo-stack entry: which block moved and where it started."""

    block_index: int
    origin_x: int
    origin_y: int


@dataclass
class Level:
    """Holds the parsed layout of a level and its current occupancy.

    ``template`` is the normalised 64-glyph record the level was parsed
    from and is never modified; ``grid`` is the live occupancy that
    commits write to.
    """

    template: str
    grid: Grid
    blocks: list[Block]
    exit_pos: tuple[int, int]
    history: list[MoveRecord] = field(default_factory=list)
    solved: bool = False

    @property
    def player(self) -> Block:
        for block in self.blocks:
            if isinstance(block.type, Player):
                return block
        raise LookupError("Level has no player block")
