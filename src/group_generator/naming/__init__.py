"""Cosmetic group names."""

from .names import ADJECTIVES, NOUNS, GroupNamer, RandomGroupNamer, generate_group_name

__all__ = [
    "ADJECTIVES",
    "NOUNS",
    "GroupNamer",
    "RandomGroupNamer",
    "generate_group_name",
]
