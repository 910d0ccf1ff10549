from __future__ import annotations

import random
from typing import Iterable, List, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that draws a uniform integer from ``[0, stop)``.

    ``random.Random`` and ``random.SystemRandom`` satisfy this as-is.
    """

    def randrange(self, stop: int) -> int: ...


def default_random_source(secure: bool = False) -> RandomSource:
    if secure:
        return random.SystemRandom()
    return random.Random()


def sample_into(buffer: List[T], rng: RandomSource, k: int, iterable: Iterable[T]) -> None:
    """Append a uniform sample of at most ``k`` items of ``iterable`` to ``buffer``.

    Algorithm R over the region starting at ``len(buffer)``; items already in
    ``buffer`` are never read or moved. ``iterable`` is consumed fully and
    ``rng.randrange`` is called once per item past the first ``k``.
    A source that returns values outside ``[0, stop)`` gives undefined
    results. Errors raised by ``iterable`` propagate and leave the region
    partially filled.
    """
    offset = len(buffer)
    n = 0
    for x in iterable:
        n += 1
        if n <= k:
            buffer.append(x)
        else:
            j = rng.randrange(n)
            if j < k:
                buffer[offset + j] = x


def sample(rng: RandomSource, k: int, iterable: Iterable[T]) -> List[T]:
    """Return a uniform sample of ``min(k, len(iterable))`` items, in reservoir order."""
    reservoir: List[T] = []
    sample_into(reservoir, rng, k, iterable)
    return reservoir


__all__ = ["RandomSource", "default_random_source", "sample", "sample_into"]
