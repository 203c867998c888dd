"""Core gameplay logic: drags, commits and undo."""

from __future__ import annotations

import logging

from backend.engine.gamestate import InteractionState
from backend.engine.levelcodec import parse
from backend.engine.movement import propose
from backend.models.block import Block
from backend.models.grid import BOARD_HEIGHT, BOARD_WIDTH, EXIT, FLOOR
from backend.models.level import Level, MoveRecord

logger = logging.getLogger(__name__)

# How far, in cells, a press may miss a block and still grab it.
HIT_MARGIN = 0.2


class GamePlay:
    """Orchestrates play on a single level.

    A drag runs ``begin_drag`` → ``point``/``update_drag`` → ``commit``.
    Only ``commit`` (and ``undo``, which replays through the same path)
    writes to the live grid.
    """

    def __init__(self, level: Level) -> None:
        self.level = level
        self.state = InteractionState()

    @classmethod
    def from_record(cls, record: str, *, strict: bool = False) -> GamePlay:
        """Create a session from a single 64-glyph record."""
        return cls(parse(record, strict=strict))

    # -- queries --------------------------------------------------------------

    @property
    def blocks(self) -> list[Block]:
        return self.level.blocks

    @property
    def is_won(self) -> bool:
        return self.level.solved

    @property
    def moves(self) -> int:
        return len(self.level.history)

    @property
    def dragging(self) -> bool:
        return self.state.dragging

    @property
    def drag_block(self) -> Block | None:
        if self.state.drag_target is None:
            return None
        return self.level.blocks[self.state.drag_target]

    # -- pointer and drag -----------------------------------------------------

    def point(self, x: float, y: float) -> None:
        """Record the pointer position; extends the drag if one is active."""
        self.state.move_pointer(x, y)
        if self.state.dragging:
            self._propose()

    def begin_drag(self, x: float, y: float) -> bool:
        """Grab the movable block under ``(x, y)``.

        Returns True if a block was grabbed.  Presses off the board grab
        nothing; only pointer moves during a drag are clamped.
        """
        if self.state.dragging or not (
            0 <= x < BOARD_WIDTH and 0 <= y < BOARD_HEIGHT
        ):
            return False
        self.state.move_pointer(x, y)

        index = self._hit_exact(*self.state.cell)
        if index is None:
            index = self._hit_near(*self.state.pointer)
        if index is None:
            return False

        block = self.level.blocks[index]
        block.drag = True
        block.target_x, block.target_y = block.x1, block.y1
        self.state.start_drag(index)
        logger.debug(
            "Dragging block %d at (%d, %d)-(%d, %d)",
            index, block.x1, block.y1, block.x2, block.y2,
        )
        return True

    def update_drag(self, x: float, y: float) -> None:
        if not self.state.dragging:
            return
        self.point(x, y)

    def commit(self) -> bool:
        """Write the dragged block's proposed position into the live grid.

        Every release of a drag is recorded, including one that leaves the
        block where it was.  Returns False when no drag was active.
        """
        index = self.state.drag_target
        if index is None:
            return False
        block = self.level.blocks[index]
        self.level.history.append(MoveRecord(index, block.x1, block.y1))
        self._apply(index, block.target_x, block.target_y)
        logger.debug("Committed block %d to (%d, %d)", index, block.x1, block.y1)
        if self.level.solved:
            logger.info("Level solved in %d moves", self.moves)
        return True

    def cancel_drag(self) -> None:
        """Drop an active drag without moving the block or recording it."""
        block = self.drag_block
        if block is not None:
            block.drag = False
        self.state.clear_drag()

    def undo(self) -> bool:
        """Move the most recently committed block back where it came from."""
        self.cancel_drag()
        if not self.level.history:
            return False
        record = self.level.history.pop()
        self._apply(record.block_index, record.origin_x, record.origin_y)
        logger.debug(
            "Undid move of block %d back to (%d, %d)",
            record.block_index, record.origin_x, record.origin_y,
        )
        return True

    def reset(self) -> None:
        """Restore the level to its parsed layout and forget all moves."""
        fresh = parse(self.level.template)
        self.level.grid = fresh.grid
        self.level.blocks = fresh.blocks
        self.level.exit_pos = fresh.exit_pos
        self.level.history.clear()
        self.level.solved = False
        self.state.clear_drag()

    # -- helpers --------------------------------------------------------------

    def _propose(self) -> None:
        block = self.drag_block
        assert block is not None and self.state.drag_origin is not None
        ox, oy = self.state.drag_origin
        cx, cy = self.state.cell
        propose(block, cx - ox, cy - oy, self.level.grid)

    def _apply(self, index: int, x: int, y: int) -> None:
        """Move block *index* to ``(x, y)`` in the live grid and check for a win."""
        level = self.level
        block = level.blocks[index]
        for cx, cy in block.cells():
            level.grid.set(cx, cy, EXIT if (cx, cy) == level.exit_pos else FLOOR)

        block.move_to(x, y)
        for cx, cy in block.cells():
            level.grid.set(cx, cy, block.id)
        level.solved = block.contains(*level.exit_pos)

        block.drag = False
        block.target_x = block.target_y = 0
        self.state.clear_drag()

    def _hit_exact(self, x: int, y: int) -> int | None:
        for i, block in enumerate(self.level.blocks):
            if block.movable and block.contains(x, y):
                return i
        return None

    def _hit_near(self, px: float, py: float) -> int | None:
        for i, block in enumerate(self.level.blocks):
            if not block.movable:
                continue
            if (
                block.x1 - HIT_MARGIN <= px < block.x2 + 1 + HIT_MARGIN
                and block.y1 - HIT_MARGIN <= py < block.y2 + 1 + HIT_MARGIN
            ):
                return i
        return None
