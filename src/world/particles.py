"""Blast particle pool.

Only one blast is alive at a time: ``spawn`` discards whatever is left of the
previous batch before emitting a new one. ``advance`` integrates every
particle with the same dt before pruning, so particles that expire this frame
still move on their final step.
"""

from __future__ import annotations

import math
from typing import List, Sequence

from pygame.math import Vector2

from config import (
    BLAST_DURATION,
    BLAST_PARTICLES,
    BLAST_SPEED_MIN,
    BLAST_SPEED_MAX,
)
from core.random_source import RandomSource
from world.entities import BlastParticle


class ParticleSystem:
    def __init__(
        self,
        rng: RandomSource,
        *,
        batch_size: int = BLAST_PARTICLES,
        duration: float = BLAST_DURATION,
        speed_min: float = BLAST_SPEED_MIN,
        speed_max: float = BLAST_SPEED_MAX,
    ) -> None:
        self.rng = rng
        self.batch_size = int(batch_size)
        self.duration = float(duration)
        self.speed_min = float(speed_min)
        self.speed_max = float(speed_max)
        self._particles: List[BlastParticle] = []

    @property
    def particles(self) -> Sequence[BlastParticle]:
        """Live particles as a tuple; mutate only through this class."""
        return tuple(self._particles)

    def __len__(self) -> int:
        return len(self._particles)

    def is_empty(self) -> bool:
        return not self._particles

    def clear(self) -> None:
        self._particles.clear()

    def spawn(self, origin_x: float, origin_y: float) -> None:
        self._particles.clear()
        for _ in range(self.batch_size):
            angle = self.rng.uniform(0.0, 2.0 * math.pi)
            speed = self.rng.uniform(self.speed_min, self.speed_max)
            # duration - U[0, duration) keeps lifetime in (0, duration]
            lifetime = self.duration - self.rng.uniform(0.0, self.duration)
            self._particles.append(
                BlastParticle(
                    position=Vector2(origin_x, origin_y),
                    velocity=Vector2(math.cos(angle) * speed, math.sin(angle) * speed),
                    lifetime=lifetime,
                )
            )

    def advance(self, dt: float) -> None:
        if not self._particles:
            return
        for p in self._particles:
            p.position += p.velocity * dt
            p.lifetime -= dt
        self._particles = [p for p in self._particles if p.lifetime > 0.0]

    def alpha_of(self, particle: BlastParticle) -> float:
        """Remaining lifetime as a fraction of the blast duration."""
        if self.duration <= 0.0:
            return 0.0
        return max(0.0, min(1.0, particle.lifetime / self.duration))


__all__ = ["ParticleSystem"]
