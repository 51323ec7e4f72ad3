from __future__ import annotations
import random
from typing import Callable
from .errors import InvalidDie, RandomnessUnavailable

def _die_from(rng: random.Random) -> Callable[[int], int]:
    def generate(sides: int) -> int:
        if sides < 1:
            raise InvalidDie(f"Cannot roll a die with {sides} sides")
        return rng.randrange(sides) + 1
    return generate

def acquire_os_generator() -> Callable[[int], int]:
    """
    Acquire the OS-backed randomness source once and wrap it as a die generator.

    SystemRandom only touches os.urandom when asked for bits, so draw once here
    to surface a missing entropy source before any dice are rolled.
    """
    rng = random.SystemRandom()
    try:
        rng.getrandbits(8)
    except (NotImplementedError, OSError) as e:
        raise RandomnessUnavailable(str(e) or "OS randomness source unavailable") from e
    return _die_from(rng)

def seeded_generator(seed: int) -> Callable[[int], int]:
    return _die_from(random.Random(seed))
