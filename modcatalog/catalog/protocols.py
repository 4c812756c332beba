"""Protocol definitions for the randomness the metadata synthesizer consumes."""

from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar

_T = TypeVar("_T")


class RandomSource(Protocol):
    """Minimal random API used for placeholder metadata.

    ``random.Random`` satisfies it, so a seeded instance gives repeatable runs.
    """

    def random(self) -> float:
        ...

    def randint(self, a: int, b: int) -> int:
        ...

    def choice(self, seq: Sequence[_T]) -> _T:
        ...


def make_random_source(seed: int | None = None) -> RandomSource:
    return random.Random(seed)
