"""
Secure random helpers.

Every draw that decides roles, words or speaking order comes from the OS
CSPRNG. Callers may pass their own ``random.Random`` instance (tests use a
seeded one), but the default is always ``secure_random``.
"""

import random
import secrets
from typing import List, Sequence, TypeVar

T = TypeVar("T")

secure_random: random.Random = secrets.SystemRandom()


def randint_inclusive(low: int, high: int, rng: random.Random = secure_random) -> int:
    """Uniform integer from the closed range [low, high]."""
    if high < low:
        raise ValueError(f"Empty range [{low}, {high}]")
    return low + rng.randrange(high - low + 1)


def choice(items: Sequence[T], rng: random.Random = secure_random) -> T:
    """Uniform pick from a non-empty sequence."""
    if not items:
        raise IndexError("Cannot choose from an empty sequence")
    return items[rng.randrange(len(items))]


def coin_flip(rng: random.Random = secure_random) -> bool:
    return rng.randrange(2) == 1


def shuffled(items: Sequence[T], rng: random.Random = secure_random) -> List[T]:
    """Return a Fisher-Yates shuffled copy of ``items``."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randrange(i + 1)
        result[i], result[j] = result[j], result[i]
    return result
