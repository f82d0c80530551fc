"""Scatter decorative clouds and trees inside configured bounds.

Called on every reset so each cycle gets a fresh sky and tree line.
"""

from __future__ import annotations

from typing import List, Tuple

from config import (
    NUM_CLOUDS,
    CLOUD_X_RANGE,
    CLOUD_Y_RANGE,
    NUM_TREES,
    TREE_X_RANGE,
    TREE_Y,
)
from core.random_source import RandomSource
from world.entities import SceneryItem


def spawn_scenery(
    rng: RandomSource,
    kind: str,
    *,
    count: int,
    x_range: Tuple[float, float],
    y_range: Tuple[float, float],
) -> List[SceneryItem]:
    """Return ``count`` items placed uniformly in the x/y ranges.

    A degenerate range (lo == hi) pins that axis, which is how trees sit on
    a single ground line.
    """
    items: List[SceneryItem] = []
    for _ in range(count):
        x = rng.uniform(*x_range)
        y = y_range[0] if y_range[0] == y_range[1] else rng.uniform(*y_range)
        items.append(SceneryItem(kind, x, y))
    return items


def spawn_clouds(rng: RandomSource, count: int = NUM_CLOUDS) -> List[SceneryItem]:
    return spawn_scenery(
        rng, "cloud", count=count, x_range=CLOUD_X_RANGE, y_range=CLOUD_Y_RANGE
    )


def spawn_trees(rng: RandomSource, count: int = NUM_TREES) -> List[SceneryItem]:
    return spawn_scenery(
        rng, "tree", count=count, x_range=TREE_X_RANGE, y_range=(TREE_Y, TREE_Y)
    )
