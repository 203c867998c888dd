from backend.models.block import Axis, Block, BlockType, Exit, Glyph, Piece, Player, Wall
from backend.models.grid import Grid
from backend.models.level import Level, MoveRecord

__all__ = [
    "Axis",
    "Block",
    "BlockType",
    "Exit",
    "Glyph",
    "Grid",
    "Level",
    "MoveRecord",
    "Piece",
    "Player",
    "Wall",
]
