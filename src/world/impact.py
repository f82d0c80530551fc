from __future__ import annotations

from config import NOSE_OFFSET
from world.entities import Aircraft, Building
from world.particles import ParticleSystem


class ImpactDetector:
    """Decides when an aircraft's nose reaches its building.

    The first positive check marks both entities and emits the blast at the
    building's x on the aircraft's lane; later checks on a crashed aircraft
    do nothing.
    """

    def __init__(self, particles: ParticleSystem, *, nose_offset: float = NOSE_OFFSET) -> None:
        self.particles = particles
        self.nose_offset = float(nose_offset)

    def reached(self, aircraft: Aircraft, building: Building) -> bool:
        return aircraft.x + self.nose_offset >= building.x

    def check(self, aircraft: Aircraft, building: Building) -> bool:
        """Return True only on the frame the impact happens."""
        if aircraft.crashed or not self.reached(aircraft, building):
            return False
        aircraft.crashed = True
        building.collapsed = True
        self.particles.spawn(building.x, aircraft.y)
        return True


__all__ = ["ImpactDetector"]
