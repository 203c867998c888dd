"""Collision-aware move extents for a dragged block."""

from __future__ import annotations

from backend.models.block import Axis, Block
from backend.models.grid import EXIT, FLOOR, Grid, on_board


def compute_extent(block: Block, delta: int, grid: Grid) -> int:
    """Return the furthest legal offset towards *delta* along the block's axis.

    The block is walked one cell at a time.  Each candidate offset is kept
    only if both end cells of the translated footprint are on the board and
    are floor, the exit, or part of the block itself; the first failure
    stops the walk.  The live grid is not modified.
    """
    if not block.movable:
        raise ValueError(f"Block at ({block.x1}, {block.y1}) cannot move.")
    if delta == 0:
        return 0

    step = 1 if delta > 0 else -1
    accepted = 0
    for offset in range(step, delta + step, step):
        lead, trail = _ends(block, offset)
        if not (_passable(grid, *lead, block.id) and _passable(grid, *trail, block.id)):
            break
        accepted = offset
    return accepted


def propose(block: Block, dx: int, dy: int, grid: Grid) -> None:
    """Set the block's proposed target for a pointer delta of ``(dx, dy)``.

    Only the axis component the block can travel along is used.
    """
    match block.axis:
        case Axis.HORIZONTAL:
            block.target_x = block.x1 + compute_extent(block, dx, grid)
            block.target_y = block.y1
        case Axis.VERTICAL:
            block.target_x = block.x1
            block.target_y = block.y1 + compute_extent(block, dy, grid)
        case Axis.FIXED:
            raise ValueError(f"Block at ({block.x1}, {block.y1}) cannot move.")


# -- helpers ------------------------------------------------------------------


def _ends(block: Block, offset: int) -> tuple[tuple[int, int], tuple[int, int]]:
    """First and last cell of the footprint shifted by *offset*."""
    match block.axis:
        case Axis.HORIZONTAL:
            return (block.x1 + offset, block.y1), (block.x2 + offset, block.y1)
        case Axis.VERTICAL:
            return (block.x1, block.y1 + offset), (block.x1, block.y2 + offset)
    raise ValueError(f"Block at ({block.x1}, {block.y1}) cannot move.")


def _passable(grid: Grid, x: int, y: int, block_id: int) -> bool:
    if not on_board(x, y):
        return False
    return grid.get(x, y) in (FLOOR, EXIT, block_id)
