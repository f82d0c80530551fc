"""Scene state machine: the only place the vignette's rules run.

Cycle::

    ACTIVE --(all crashed, all settled, no particles)--> RESETTING_DELAY
    RESETTING_DELAY --(timer >= reset_delay)--> ACTIVE (scene reinitialized)

There is no terminal state. ``update(dt)`` accepts any non-negative dt, so
tests can drive it with fixed steps independent of real time.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from config import (
    PLANE_SPEED,
    RESET_DELAY,
    FLIGHT_PAIRS,
    BUILDING_HEIGHT,
    NUM_CLOUDS,
    NUM_TREES,
    VERBOSE,
)
from core.random_source import RandomSource
from world.entities import FlightPair, SceneState
from world.collapse import CollapseController
from world.impact import ImpactDetector
from world.particles import ParticleSystem
from world.scenery import spawn_clouds, spawn_trees
from world.snapshot import (
    AircraftView,
    BuildingView,
    ParticleView,
    Phase,
    SceneSnapshot,
)


class SceneStateMachine:
    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        *,
        flight_pairs: Iterable[Tuple[float, float, float]] = FLIGHT_PAIRS,
        plane_speed: float = PLANE_SPEED,
        reset_delay: float = RESET_DELAY,
        building_height: float = BUILDING_HEIGHT,
        num_clouds: int = NUM_CLOUDS,
        num_trees: int = NUM_TREES,
        particles: Optional[ParticleSystem] = None,
        collapse: Optional[CollapseController] = None,
        detector: Optional[ImpactDetector] = None,
        verbose: bool = VERBOSE,
    ) -> None:
        self.rng = rng if rng is not None else RandomSource()
        self.flight_pairs = tuple(tuple(p) for p in flight_pairs)
        self.plane_speed = float(plane_speed)
        self.reset_delay = float(reset_delay)
        self.building_height = float(building_height)
        self.num_clouds = int(num_clouds)
        self.num_trees = int(num_trees)
        self.verbose = verbose

        self.particles = particles if particles is not None else ParticleSystem(self.rng)
        self.collapse = collapse if collapse is not None else CollapseController()
        self.detector = detector if detector is not None else ImpactDetector(self.particles)

        self.state = SceneState()
        self.phase = Phase.ACTIVE
        self.reset_timer = 0.0
        self.cycle = 0
        # Time spent in ACTIVE during the current cycle (for log lines)
        self.cycle_time = 0.0
        self.reset()
        self._log(
            f"Initialized {len(self.state.pairs)} flight pairs (seed={self.rng.seed})"
        )

    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Reinitialize every entity and return to ACTIVE."""
        self.state.pairs = [
            FlightPair.create(sx, ly, bx, building_height=self.building_height)
            for sx, ly, bx in self.flight_pairs
        ]
        self.state.clouds = spawn_clouds(self.rng, self.num_clouds)
        self.state.trees = spawn_trees(self.rng, self.num_trees)
        self.particles.clear()
        self.phase = Phase.ACTIVE
        self.reset_timer = 0.0
        self.cycle_time = 0.0

    def is_complete(self) -> bool:
        return (
            all(p.aircraft.crashed for p in self.state.pairs)
            and all(self.collapse.settled(p.building) for p in self.state.pairs)
            and self.particles.is_empty()
        )

    # ------------------------------------------------------------------
    def update(self, dt: float) -> None:
        assert dt >= 0.0, f"negative dt: {dt}"
        if self.phase is Phase.ACTIVE:
            self._update_active(dt)
        else:
            self._update_resetting(dt)

    def _update_active(self, dt: float) -> None:
        self.cycle_time += dt
        for index, pair in enumerate(self.state.pairs):
            aircraft = pair.aircraft
            if aircraft.crashed:
                continue
            if self.detector.check(aircraft, pair.building):
                self._log(f"Impact on pair {index} at t={self.cycle_time:.3f}s")
            else:
                aircraft.position.x += self.plane_speed * dt

        for pair in self.state.pairs:
            self.collapse.advance(pair.building, dt)

        self.particles.advance(dt)
        self._check_invariants()

        if self.is_complete():
            self.phase = Phase.RESETTING_DELAY
            self.reset_timer = 0.0
            self._log(
                f"Cycle {self.cycle} complete after {self.cycle_time:.2f}s; "
                f"resetting in {self.reset_delay:.1f}s"
            )

    def _update_resetting(self, dt: float) -> None:
        self.reset_timer += dt
        if self.reset_timer >= self.reset_delay:
            self.reset()
            self.cycle += 1
            self._log(f"Scene reset; starting cycle {self.cycle}")

    def _check_invariants(self) -> None:
        assert self.reset_timer == 0.0, "reset timer running while active"
        for pair in self.state.pairs:
            assert pair.building.height > 0.0, "building height reached zero"
            assert pair.building.collapsed == pair.aircraft.crashed
        assert all(p.lifetime > 0.0 for p in self.particles.particles)

    # ------------------------------------------------------------------
    def snapshot(self) -> SceneSnapshot:
        return SceneSnapshot(
            aircraft=tuple(
                AircraftView(a.x, a.y, a.crashed) for a in self.state.aircraft
            ),
            buildings=tuple(
                BuildingView(b.x, b.height, b.collapsed) for b in self.state.buildings
            ),
            clouds=tuple((c.x, c.y) for c in self.state.clouds),
            trees=tuple((t.x, t.y) for t in self.state.trees),
            particles=tuple(
                ParticleView(
                    float(p.position.x),
                    float(p.position.y),
                    self.particles.alpha_of(p),
                )
                for p in self.particles.particles
            ),
            phase=self.phase,
            cycle=self.cycle,
        )

    def _log(self, message: str) -> None:
        if self.verbose:
            print(f"[Scene] {message}")


__all__ = ["Phase", "SceneStateMachine"]
