from backend.engine.levelset.levelset import LEVELS_FILENAME, LevelSet

__all__ = ["LEVELS_FILENAME", "LevelSet"]
