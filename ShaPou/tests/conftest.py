import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class StubRng:
    """Deterministic stand-in for random.Random.

    random() always returns `value`; uniform() pops queued values first and
    falls back to the midpoint; choice() picks the first element.
    """
    def __init__(self, value=0.99, uniforms=None):
        self.value = value
        self.uniforms = list(uniforms or [])

    def random(self):
        return self.value

    def uniform(self, a, b):
        if self.uniforms:
            return self.uniforms.pop(0)
        return (a + b) / 2

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def quiet_rng():
    """Never spawns anything."""
    return StubRng(0.99)


@pytest.fixture
def eager_rng():
    """Spawns on every roll, always good food."""
    return StubRng(0.0)
