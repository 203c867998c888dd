from backend.engine.gameplay.game import HIT_MARGIN, GamePlay

__all__ = ["GamePlay", "HIT_MARGIN"]
