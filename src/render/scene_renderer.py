"""Immediate-mode drawing of a SceneSnapshot.

Draws in normalized device coordinates with the fixed-function pipeline;
the engine leaves the projection at identity. Nothing here mutates
simulation state.
"""

from __future__ import annotations

import math

from OpenGL.GL import (
    glBegin,
    glEnd,
    glClear,
    glColor3f,
    glColor4f,
    glVertex2f,
    glPointSize,
    glPushMatrix,
    glPopMatrix,
    glTranslatef,
    glScalef,
    GL_COLOR_BUFFER_BIT,
    GL_QUADS,
    GL_POLYGON,
    GL_TRIANGLES,
    GL_TRIANGLE_FAN,
    GL_LINES,
    GL_POINTS,
)

from config import *
from world.snapshot import SceneSnapshot


def draw_rect(x: float, y: float, w: float, h: float) -> None:  # pragma: no cover - visual
    glBegin(GL_QUADS)
    glVertex2f(x, y)
    glVertex2f(x + w, y)
    glVertex2f(x + w, y + h)
    glVertex2f(x, y + h)
    glEnd()


class SceneRenderer:
    """Draws background, scenery, buildings, aircraft and blast particles."""

    def __init__(
        self,
        *,
        building_width: float = BUILDING_WIDTH,
        base_y: float = BUILDING_BASE_Y,
        plane_scale: float = PLANE_SCALE,
        antenna_pairs: tuple = ANTENNA_PAIRS,
    ) -> None:
        self.building_width = building_width
        self.base_y = base_y
        self.plane_scale = plane_scale
        self.antenna_pairs = set(antenna_pairs)

    def draw(self, snap: SceneSnapshot) -> None:  # pragma: no cover - visual
        glClear(GL_COLOR_BUFFER_BIT)
        self._draw_background()
        for x, y in snap.clouds:
            self._draw_cloud(x, y)
        for x, y in snap.trees:
            self._draw_tree(x, y)
        for i, b in enumerate(snap.buildings):
            glColor3f(*BUILDING_COLOR)
            draw_rect(b.x, self.base_y, self.building_width, b.height)
            self._draw_windows(b.x, self.base_y, self.building_width, b.height)
            if i in self.antenna_pairs:
                self._draw_antenna(b.x + self.building_width / 2, self.base_y + b.height)
        for a in snap.aircraft:
            if not a.crashed:
                self._draw_plane(a.x, a.y)
        self._draw_particles(snap)

    # ------------------------------------------------------------------
    def _draw_background(self) -> None:  # pragma: no cover - visual
        glBegin(GL_QUADS)
        glColor3f(*SKY_BOTTOM)
        glVertex2f(-1.0, -1.0)
        glVertex2f(1.0, -1.0)
        glColor3f(*GROUND_COLOR)
        glVertex2f(1.0, -0.5)
        glVertex2f(-1.0, -0.5)
        glEnd()

    def _draw_cloud(self, x: float, y: float) -> None:  # pragma: no cover - visual
        glColor3f(1.0, 1.0, 1.0)
        for i in range(3):
            cx = x + i * CLOUD_SIZE * 0.5
            glBegin(GL_TRIANGLE_FAN)
            for deg in range(0, 361, 30):
                theta = math.radians(deg)
                glVertex2f(cx + math.cos(theta) * CLOUD_SIZE, y + math.sin(theta) * CLOUD_SIZE * 0.5)
            glEnd()

    def _draw_tree(self, x: float, y: float) -> None:  # pragma: no cover - visual
        # trunk
        glColor3f(0.5, 0.35, 0.05)
        draw_rect(x + TREE_WIDTH / 4, y, TREE_WIDTH / 2, TREE_HEIGHT / 3)
        # crown
        glColor3f(0.0, 0.5, 0.0)
        glBegin(GL_TRIANGLES)
        glVertex2f(x, y + TREE_HEIGHT / 3)
        glVertex2f(x + TREE_WIDTH / 2, y + TREE_HEIGHT)
        glVertex2f(x + TREE_WIDTH, y + TREE_HEIGHT / 3)
        glEnd()

    def _draw_windows(self, x: float, y: float, w: float, h: float) -> None:  # pragma: no cover - visual
        glColor3f(0.0, 0.0, 0.0)
        ww = w / BUILDING_WINDOW_COLS
        wh = h / BUILDING_WINDOW_ROWS
        for i in range(BUILDING_WINDOW_COLS):
            for j in range(BUILDING_WINDOW_ROWS):
                draw_rect(x + i * ww, y + j * wh, ww - 0.01, wh - 0.01)

    def _draw_antenna(self, x: float, y: float) -> None:  # pragma: no cover - visual
        glColor3f(0.5, 0.5, 0.5)
        glBegin(GL_LINES)
        glVertex2f(x, y)
        glVertex2f(x, y + ANTENNA_HEIGHT)
        glEnd()

    def _draw_plane(self, x: float, y: float) -> None:  # pragma: no cover - visual
        glPushMatrix()
        glTranslatef(x, y, 0.0)
        glScalef(self.plane_scale, self.plane_scale, 1.0)

        # fuselage
        glColor3f(0.8, 0.8, 0.8)
        glBegin(GL_POLYGON)
        glVertex2f(0.0, 0.0)
        glVertex2f(0.5, 0.05)
        glVertex2f(0.6, 0.0)
        glVertex2f(0.5, -0.05)
        glEnd()

        # wings, then tail
        glColor3f(0.6, 0.6, 0.6)
        glBegin(GL_TRIANGLES)
        for x0, tip_x, x1, tip_y in ((0.2, 0.35, 0.4, 0.15), (0.45, 0.55, 0.55, 0.1)):
            for sign in (1.0, -1.0):
                glVertex2f(x0, 0.0)
                glVertex2f(tip_x, sign * tip_y)
                glVertex2f(x1, 0.0)
        glEnd()

        glColor3f(0.3, 0.3, 0.3)
        for i in range(1, 4):
            draw_rect(i * 0.1, -0.02, 0.05, 0.02)
        glPopMatrix()

    def _draw_particles(self, snap: SceneSnapshot) -> None:  # pragma: no cover - visual
        if not snap.particles:
            return
        glPointSize(BLAST_POINT_SIZE)
        glBegin(GL_POINTS)
        r, g, b = BLAST_COLOR
        for p in snap.particles:
            glColor4f(r, g, b, p.alpha)
            glVertex2f(p.x, p.y)
        glEnd()
