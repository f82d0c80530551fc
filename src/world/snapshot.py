"""Read-only frame snapshot handed from the simulation to the renderer.

All views are frozen dataclasses holding plain floats, so the renderer can
keep a snapshot around without aliasing live simulation objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Phase(Enum):
    ACTIVE = "active"
    RESETTING_DELAY = "resetting_delay"


@dataclass(frozen=True)
class AircraftView:
    x: float
    y: float
    crashed: bool


@dataclass(frozen=True)
class BuildingView:
    x: float
    height: float
    collapsed: bool


@dataclass(frozen=True)
class ParticleView:
    x: float
    y: float
    # Remaining lifetime / blast duration, usable as opacity
    alpha: float


@dataclass(frozen=True)
class SceneSnapshot:
    aircraft: Tuple[AircraftView, ...]
    buildings: Tuple[BuildingView, ...]
    clouds: Tuple[Tuple[float, float], ...]
    trees: Tuple[Tuple[float, float], ...]
    particles: Tuple[ParticleView, ...]
    phase: Phase
    cycle: int

    @property
    def resetting(self) -> bool:
        return self.phase is Phase.RESETTING_DELAY
