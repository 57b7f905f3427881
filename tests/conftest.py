"""Pytest configuration for path tracer tests.

Provides seeded random streams and a scripted stand-in for random.Random
that lets tests force specific sampling outcomes.
"""

import random

import pytest


class ScriptedRng:
    """Replays fixed values for random()/uniform(); cycles when exhausted."""

    def __init__(self, randoms=(0.5,), uniforms=(0.0,)):
        self._randoms = list(randoms)
        self._uniforms = list(uniforms)
        self._r = 0
        self._u = 0

    def random(self):
        value = self._randoms[self._r % len(self._randoms)]
        self._r += 1
        return value

    def uniform(self, a, b):
        value = self._uniforms[self._u % len(self._uniforms)]
        self._u += 1
        return value


@pytest.fixture
def rng():
    """A seeded random stream so sampled tests are reproducible."""
    return random.Random(1234)


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRng instances."""
    return ScriptedRng
