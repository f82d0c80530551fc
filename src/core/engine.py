"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window, GL state and the frame loop.
- Scene: owns simulation updates and drawing.
- FrameClock: measures dt; the engine sleeps a fixed slice for pacing.

Uses the legacy fixed-function pipeline with an identity projection, so the
scene draws directly in normalized [-1, 1] coordinates.
"""

from __future__ import annotations

from typing import Optional

import pygame
from OpenGL.GL import (
    glEnable,
    glBlendFunc,
    glClearColor,
    glViewport,
    GL_BLEND,
    GL_SRC_ALPHA,
    GL_ONE_MINUS_SRC_ALPHA,
)

from config import *
from core.clock import FrameClock
from core.random_source import RandomSource
from core.scene import Scene
from ui.overlay_text import OverlayText
from world.vignette_scene import VignetteScene


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(
        self,
        *,
        width: int = WIDTH,
        height: int = HEIGHT,
        fullscreen: bool = FULLSCREEN,
        seed: Optional[int] = None,
    ):
        pygame.init()
        pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLEBUFFERS, 1)
        pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLESAMPLES, 4)
        pygame.display.set_caption(TITLE)
        self.width = width
        self.height = height
        flags = pygame.DOUBLEBUF | pygame.OPENGL | pygame.RESIZABLE
        if fullscreen:
            flags |= pygame.FULLSCREEN
        try:
            # vsync: 1 to enable, 0 to disable
            pygame.display.set_mode((width, height), flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # Older pygame versions won't accept the vsync kwarg, or vsync
            # was unavailable on this driver.
            pygame.display.set_mode((width, height), flags)

        # GL state
        glViewport(0, 0, width, height)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glClearColor(*SKY_COLOR)

        self.scene: Scene = VignetteScene(RandomSource(seed))
        self.clock = FrameClock()
        self.text = OverlayText(width, height)
        if VERBOSE:
            print(f"[Engine] Window {width}x{height} ready")

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type == pygame.VIDEORESIZE:
                self._resize(event.w, event.h)
                continue
            self.scene.handle_event(event)
        return True

    def _resize(self, width: int, height: int) -> None:  # pragma: no cover - visual
        self.width, self.height = width, height
        glViewport(0, 0, width, height)
        self.text.resize(width, height)
        self.scene.resize(width, height)

    # ------------------------------------------------------------------
    def update(self, dt: float):
        # Scene owns all simulation updates
        self.scene.update(dt)

    # ------------------------------------------------------------------
    def render(self):  # pragma: no cover - visual
        self.scene.render(text=self.text, fps=self.clock.get_fps())
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        try:
            while running:
                dt = self.clock.tick()
                running = self.handle_events()
                if not running:
                    break
                self.update(dt)
                self.render()
                pygame.time.wait(FRAME_SLEEP_MS)
        finally:
            pygame.quit()
