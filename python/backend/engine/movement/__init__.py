from backend.engine.movement.mover import compute_extent, propose

__all__ = ["compute_extent", "propose"]
