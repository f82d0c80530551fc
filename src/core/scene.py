from typing import List, Callable
from dataclasses import dataclass, field

# Per-frame callback fed the clamped dt
UpdateFn = Callable[[float], None]


@dataclass
class Scene:
    """Base protocol an Engine hosts: update, handle_event, render.

    Subclasses register per-frame callbacks in ``updaters`` (run in order)
    and override ``render`` for their own drawing.
    """

    updaters: List[UpdateFn] = field(default_factory=list)

    def update(self, dt: float) -> None:
        for fn in self.updaters:
            fn(dt)

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    def resize(self, width: int, height: int) -> None:
        pass

    def render(self, *, text=None, fps: float | None = None):  # pragma: no cover - visual
        pass
