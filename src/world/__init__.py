"""World package: re-export the simulation types for simpler imports.

Callers can import public types from `world` directly, e.g.:

    from world import SceneStateMachine, Phase, SceneSnapshot

The presentation-facing VignetteScene is imported from its own module so the
simulation can be used without OpenGL installed.
"""

from .entities import Aircraft, Building, BlastParticle, FlightPair, SceneryItem, SceneState
from .particles import ParticleSystem
from .impact import ImpactDetector
from .collapse import CollapseController
from .scenery import spawn_scenery, spawn_clouds, spawn_trees
from .snapshot import AircraftView, BuildingView, ParticleView, SceneSnapshot
from .scene_state import Phase, SceneStateMachine

__all__ = [
    "Aircraft",
    "Building",
    "BlastParticle",
    "FlightPair",
    "SceneryItem",
    "SceneState",
    "ParticleSystem",
    "ImpactDetector",
    "CollapseController",
    "spawn_scenery",
    "spawn_clouds",
    "spawn_trees",
    "AircraftView",
    "BuildingView",
    "ParticleView",
    "SceneSnapshot",
    "Phase",
    "SceneStateMachine",
]
