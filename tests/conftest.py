from __future__ import annotations

import random

import pytest


class ScriptedRandom(random.Random):
    """Random source whose randrange answers come from a fixed list."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def randrange(self, *args, **kwargs):
        return self.values.pop(0)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def rng():
    return random.Random(1234)
