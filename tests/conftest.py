import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from biomorph.gene import Genotype, default_genotype  # noqa: E402


class FixedRng:
    """Stand-in RNG whose ``randrange`` always returns the same draw."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self.value


@pytest.fixture
def adam() -> Genotype:
    return default_genotype()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
