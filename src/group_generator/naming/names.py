"""
Decorative team names for generated groups.

Names are purely cosmetic; nothing about a name depends on who is in the
group, and the partitioner never sees this module.
"""
from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple

from group_generator.partitioning.randomness import RandomSource, resolve_rng

ADJECTIVES: Tuple[str, ...] = (
    "Dynamic", "Creative", "Brilliant", "Energetic", "Innovative", "Visionary",
    "Courageous", "Fearless", "Bombastic", "Epic", "Legendary", "Mighty",
    "Fierce", "Savage", "Radical", "Awesome",
)

NOUNS: Tuple[str, ...] = (
    "Team", "Squad", "Group", "Crew", "Alliance", "Gang", "Pack", "Tribe", "Clan",
)


class GroupNamer(Protocol):
    """Anything that can label the group at a 0-based index."""

    def name_group(self, index: int) -> str:
        ...


class RandomGroupNamer:
    """
    Picks an adjective and a noun independently for every group.

    Repeats across groups are allowed, matching a roll of two dice.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        adjectives: Sequence[str] = ADJECTIVES,
        nouns: Sequence[str] = NOUNS,
    ):
        if not adjectives:
            raise ValueError("adjectives must not be empty")
        if not nouns:
            raise ValueError("nouns must not be empty")
        self._rng = resolve_rng(rng)
        self.adjectives = tuple(adjectives)
        self.nouns = tuple(nouns)

    def name_group(self, index: int) -> str:
        return f"{self._rng.choice(self.adjectives)} {self._rng.choice(self.nouns)}"


def generate_group_name(rng: Optional[RandomSource] = None) -> str:
    """Return a single random "<Adjective> <Noun>" name."""
    return RandomGroupNamer(rng).name_group(0)
