"""
Module: partitioning.randomness

Purpose:
    Randomness capability consumed by the partitioner and the group namer.
    ``random.Random`` satisfies the protocol, so production code passes an
    unseeded instance and tests pass a seeded one or a deterministic fake.
"""

from __future__ import annotations

import random
from typing import Any, MutableSequence, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Source of shuffles and choices."""

    def shuffle(self, x: MutableSequence[Any]) -> None:
        """Permute ``x`` in place."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence."""
        ...


def resolve_rng(rng: Optional[RandomSource]) -> RandomSource:
    """Return ``rng`` or a fresh, unseeded ``random.Random``."""
    return rng if rng is not None else random.Random()
