"""Plain entity data for the vignette.

Everything mutable lives in one ``SceneState`` aggregate owned by the state
machine; the controllers in this package receive the pieces they act on.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from pygame.math import Vector2

from config import BUILDING_HEIGHT


@dataclass
class Aircraft:
    """An aircraft flying along a fixed horizontal lane (only x advances)."""

    position: Vector2
    crashed: bool = False

    @property
    def x(self) -> float:
        return float(self.position.x)

    @property
    def y(self) -> float:
        return float(self.position.y)


@dataclass
class Building:
    x: float
    height: float = BUILDING_HEIGHT
    original_height: float = BUILDING_HEIGHT
    collapsed: bool = False


@dataclass(frozen=True)
class SceneryItem:
    """Decorative cloud or tree; never touched after scatter."""

    kind: str
    x: float
    y: float


@dataclass
class BlastParticle:
    position: Vector2
    velocity: Vector2
    lifetime: float


@dataclass
class FlightPair:
    """One aircraft and the building it flies toward.

    ``start_x``/``lane_y`` are kept so a reset can restore the aircraft.
    """

    aircraft: Aircraft
    building: Building
    start_x: float
    lane_y: float

    @classmethod
    def create(
        cls,
        start_x: float,
        lane_y: float,
        building_x: float,
        *,
        building_height: float = BUILDING_HEIGHT,
    ) -> "FlightPair":
        return cls(
            aircraft=Aircraft(Vector2(start_x, lane_y)),
            building=Building(
                x=float(building_x),
                height=float(building_height),
                original_height=float(building_height),
            ),
            start_x=float(start_x),
            lane_y=float(lane_y),
        )

    def restore(self) -> None:
        self.aircraft.position = Vector2(self.start_x, self.lane_y)
        self.aircraft.crashed = False
        self.building.height = self.building.original_height
        self.building.collapsed = False


@dataclass
class SceneState:
    pairs: List[FlightPair] = field(default_factory=list)
    clouds: List[SceneryItem] = field(default_factory=list)
    trees: List[SceneryItem] = field(default_factory=list)

    @property
    def aircraft(self) -> Tuple[Aircraft, ...]:
        return tuple(p.aircraft for p in self.pairs)

    @property
    def buildings(self) -> Tuple[Building, ...]:
        return tuple(p.building for p in self.pairs)
