"""Random sources for druuid entropy."""

import random

_random = random.SystemRandom()


def uniform():
    """Uniform sample in [0.0, 1.0)."""
    return _random.random()
