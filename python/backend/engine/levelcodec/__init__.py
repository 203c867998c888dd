from backend.engine.levelcodec.codec import (
    LevelFormatError,
    UnknownGlyphError,
    encode,
    format_grid,
    format_occupancy,
    iter_records,
    load_levels,
    parse,
)

__all__ = [
    "LevelFormatError",
    "UnknownGlyphError",
    "encode",
    "format_grid",
    "format_occupancy",
    "iter_records",
    "load_levels",
    "parse",
]
