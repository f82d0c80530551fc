from __future__ import annotations

from config import COLLAPSE_SPEED, BUILDING_MIN_HEIGHT
from world.entities import Building


class CollapseController:
    """Lowers collapsed buildings toward a minimum height at a constant rate.

    Height is checked against the floor before each step and is not clamped,
    so the final step may land up to ``rate * dt`` below ``min_height``.
    """

    def __init__(
        self,
        *,
        rate: float = COLLAPSE_SPEED,
        min_height: float = BUILDING_MIN_HEIGHT,
    ) -> None:
        self.rate = float(rate)
        self.min_height = float(min_height)

    def advance(self, building: Building, dt: float) -> None:
        if building.collapsed and building.height > self.min_height:
            building.height -= self.rate * dt

    def settled(self, building: Building) -> bool:
        return building.height <= self.min_height


__all__ = ["CollapseController"]
