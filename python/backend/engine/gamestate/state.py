"""Tracks the transient pointer and drag state of a level being played."""

from __future__ import annotations

from backend.models.grid import BOARD_HEIGHT, BOARD_WIDTH

# Largest pointer coordinate that still falls inside the last cell.
_EDGE = 1e-6


class InteractionState:
    """Holds the pointer position and the block currently being dragged.

    Pointer coordinates are in board units: ``(3.5, 2.5)`` is the centre
    of cell ``(3, 2)``.
    """

    def __init__(self) -> None:
        self.pointer: tuple[float, float] = (0.0, 0.0)
        self.drag_origin: tuple[int, int] | None = None
        self.drag_target: int | None = None

    # -- pointer --------------------------------------------------------------

    def move_pointer(self, x: float, y: float) -> None:
        """Store the pointer position, clamped to the board."""
        self.pointer = (
            min(max(x, 0.0), BOARD_WIDTH - _EDGE),
            min(max(y, 0.0), BOARD_HEIGHT - _EDGE),
        )

    @property
    def cell(self) -> tuple[int, int]:
        """The board cell under the pointer."""
        px, py = self.pointer
        return int(px), int(py)

    # -- drag -----------------------------------------------------------------

    @property
    def dragging(self) -> bool:
        return self.drag_target is not None

    def start_drag(self, block_index: int) -> None:
        self.drag_origin = self.cell
        self.drag_target = block_index

    def clear_drag(self) -> None:
        self.drag_origin = None
        self.drag_target = None
