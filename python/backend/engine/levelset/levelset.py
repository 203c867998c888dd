"""Ordered set of levels with bounded navigation."""

from __future__ import annotations

import logging
from pathlib import Path

from backend.engine.gameplay import GamePlay
from backend.engine.levelcodec import LevelFormatError, load_levels
from backend.models.level import Level

logger = logging.getLogger(__name__)

LEVELS_FILENAME = "levels.dat"


class LevelSet:
    """Holds one ``GamePlay`` per level and tracks which one is active."""

    def __init__(self, levels: list[Level]) -> None:
        if not levels:
            raise LevelFormatError("Level set contains no levels.")
        self._games = [GamePlay(level) for level in levels]
        self._current = 0

    # -- construction ---------------------------------------------------------

    @classmethod
    def from_data(cls, data: str | bytes, *, strict: bool = False) -> LevelSet:
        return cls(load_levels(data, strict=strict))

    @classmethod
    def load(cls, path: Path, *, strict: bool = False) -> LevelSet:
        """Load a level file, or ``levels.dat`` inside a directory."""
        if path.is_dir():
            path = path / LEVELS_FILENAME
        levels = cls.from_data(path.read_bytes(), strict=strict)
        logger.info("Loaded %d levels from %s", len(levels), path)
        return levels

    # -- navigation -----------------------------------------------------------

    @property
    def index(self) -> int:
        return self._current

    def __len__(self) -> int:
        return len(self._games)

    def current(self) -> GamePlay:
        return self._games[self._current]

    def next(self) -> bool:
        if self._current + 1 >= len(self._games):
            return False
        self._go(self._current + 1)
        return True

    def previous(self) -> bool:
        if self._current == 0:
            return False
        self._go(self._current - 1)
        return True

    def select(self, index: int) -> None:
        """Jump to *index*, clamped to the available levels."""
        self._go(min(max(index, 0), len(self._games) - 1))

    def advance_if_solved(self) -> bool:
        """Reset a solved level and move on to the next one.

        Returns True once per solve; the reset clears the solved flag, so
        polling again does nothing.
        """
        game = self.current()
        if not game.is_won:
            return False
        game.reset()
        self.next()
        return True

    def _go(self, index: int) -> None:
        self.current().cancel_drag()
        self._current = index
        logger.info("Level %d of %d", index + 1, len(self._games))
