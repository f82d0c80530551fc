"""Screen-space text overlay (FPS label, reset banner) for the GL window.

Each label owns a texture slot keyed by name; the texture is re-uploaded only
when the label's text changes. If pygame.font is unavailable the overlay
prints a note once and every draw call becomes a no-op.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Optional

import pygame
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    glPushMatrix,
    glPopMatrix,
    glBegin,
    glEnd,
    glOrtho,
    glLoadIdentity,
    glTexCoord2f,
    glVertex2f,
    glColor4f,
    glEnable,
    glDisable,
    glMatrixMode,
    GL_TEXTURE_2D,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_LINEAR,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_PROJECTION,
    GL_MODELVIEW,
    GL_QUADS,
)


@dataclass
class _Label:
    tex_id: int
    size: Tuple[int, int] = (0, 0)
    text: str | None = None


class OverlayText:
    def __init__(self, screen_width: int, screen_height: int, size: int = 32) -> None:
        self.width = screen_width
        self.height = screen_height
        self._labels: Dict[str, _Label] = {}
        self._active = False
        self.font: Optional[pygame.font.Font]
        try:
            self.font = pygame.font.Font(None, size)
        except (pygame.error, RuntimeError) as e:  # pragma: no cover - environment dependent
            print(f"[Overlay] Font unavailable, text disabled: {e}")
            self.font = None

    def resize(self, width: int, height: int) -> None:
        self.width, self.height = width, height

    def begin(self) -> None:  # pragma: no cover - visual
        if self._active or self.font is None:
            return
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()
        glEnable(GL_TEXTURE_2D)
        self._active = True

    def end(self) -> None:  # pragma: no cover - visual
        if not self._active:
            return
        glDisable(GL_TEXTURE_2D)
        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)
        self._active = False

    def _upload(self, label: _Label, text: str, color: Tuple[int, int, int, int]) -> None:  # pragma: no cover - visual
        surf = self.font.render(text, True, color)
        data = pygame.image.tostring(surf, "RGBA", True)
        w, h = surf.get_width(), surf.get_height()
        glBindTexture(GL_TEXTURE_2D, label.tex_id)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, w, h, 0, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        label.size = (w, h)
        label.text = text

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Tuple[int, int, int, int] = (255, 255, 255, 255),
        *,
        key: str,
        align: str = "topleft",
    ) -> None:  # pragma: no cover - visual
        """Draw one line at screen coords; align is 'topleft' or 'center'."""
        if not self._active:
            return
        label = self._labels.get(key)
        if label is None:
            label = _Label(tex_id=glGenTextures(1))
            self._labels[key] = label
        if label.text != text:
            self._upload(label, text, color)

        w, h = label.size
        if align == "center":
            x, y = x - w / 2, y - h / 2

        glBindTexture(GL_TEXTURE_2D, label.tex_id)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        # tostring(..., True) flips rows, so v runs bottom-up
        glTexCoord2f(0.0, 1.0)
        glVertex2f(x, y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(x + w, y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(x + w, y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(x, y + h)
        glEnd()
