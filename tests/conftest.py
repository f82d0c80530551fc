import pytest

from core.random_source import RandomSource
from world.scene_state import SceneStateMachine


@pytest.fixture
def rng():
    return RandomSource(seed=1234)


@pytest.fixture
def machine():
    return SceneStateMachine(RandomSource(seed=7), verbose=False)
