"""Vignette scene: hosts the state machine and hands snapshots to the renderer.

The engine only sees the generic Scene protocol. Simulation runs in
``update`` and the renderer reads the snapshot taken at the end of that
update, never a half-updated state.
"""

from __future__ import annotations

from typing import Optional

from core.random_source import RandomSource
from core.scene import Scene
from world.scene_state import SceneStateMachine
from world.snapshot import SceneSnapshot


RESET_BANNER = "Resetting..."


class VignetteScene(Scene):
    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        *,
        machine: Optional[SceneStateMachine] = None,
        renderer=None,
    ) -> None:
        super().__init__()
        self.machine = machine if machine is not None else SceneStateMachine(rng)
        # Built on first render so the simulation runs without a GL stack
        self.renderer = renderer
        self.updaters.append(self.machine.update)
        self.snapshot: SceneSnapshot = self.machine.snapshot()

    def update(self, dt: float) -> None:
        super().update(dt)
        self.snapshot = self.machine.snapshot()

    def render(self, *, text=None, fps: float | None = None):  # pragma: no cover - visual
        if self.renderer is None:
            from render.scene_renderer import SceneRenderer

            self.renderer = SceneRenderer()
        self.renderer.draw(self.snapshot)
        if text is None:
            return
        text.begin()
        if fps is not None:
            text.draw_text(f"FPS: {fps:5.1f}", 12, 10, key="fps")
        if self.snapshot.resetting:
            text.draw_text(RESET_BANNER, text.width // 2, text.height // 2, key="banner", align="center")
        text.end()
