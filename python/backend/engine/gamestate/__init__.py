from backend.engine.gamestate.state import InteractionState

__all__ = ["InteractionState"]
