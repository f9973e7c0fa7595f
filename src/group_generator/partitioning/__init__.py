"""
Module: partitioning

Purpose:
    The group partitioner: turns the present students and a group size
    into a randomized Partition, or a GenerationError the UI can show.

Key Functions:
    - partition(): Randomly split names into round-robin groups

Key Classes:
    - RandomSource: Injectable randomness capability
    - GenerationError, EmptySelectionError, SizeExceedsAvailableError

Used By:
    - group_generator.state: generate_groups
"""

from .randomness import RandomSource, resolve_rng
from .partitioner import (
    partition,
    GenerationError,
    EmptySelectionError,
    SizeExceedsAvailableError,
)

__all__ = [
    "partition",
    "RandomSource",
    "resolve_rng",
    "GenerationError",
    "EmptySelectionError",
    "SizeExceedsAvailableError",
]
