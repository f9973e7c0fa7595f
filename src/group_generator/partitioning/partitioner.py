"""
Module: partitioning.partitioner

Purpose:
    Splits the present students into randomized, evenly sized groups.

Key Functions:
    - partition(): Main entry point for group generation

Key Classes:
    - GenerationError: Base for user-correctable generation failures
    - EmptySelectionError: Nobody is present
    - SizeExceedsAvailableError: Group size larger than the present count

Algorithm:
    1. Shuffle a copy of the present names uniformly
    2. number_of_groups = ceil(count / group_size)
    3. Deal shuffled names round-robin: index i -> group i % number_of_groups
    4. Return the Partition

Dependencies:
    - math, logging (std)
    - core.models.Partition
    - partitioning.randomness.RandomSource

Used By:
    - state.app_state.generate_groups
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from group_generator.core.models import Partition

from .randomness import RandomSource, resolve_rng

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Generation could not run with the current attendance and group size."""
    pass


class EmptySelectionError(GenerationError):
    """No students are present."""

    def __init__(self) -> None:
        super().__init__("No students are present")


class SizeExceedsAvailableError(GenerationError):
    """Requested group size is larger than the number of present students."""

    def __init__(self, group_size: int, available: int) -> None:
        self.group_size = group_size
        self.available = available
        super().__init__(
            f"Group size ({group_size}) is larger than the number of "
            f"present students ({available})"
        )


def partition(
    present_names: Sequence[str],
    group_size: int,
    rng: Optional[RandomSource] = None,
) -> Partition:
    """
    Randomly partition present students into groups.

    Groups are dealt round-robin, so when ``group_size`` does not divide the
    head count every group holds either floor or ceil of the average rather
    than leaving one short remainder group.

    Args:
        present_names: Names of present students (not modified)
        group_size: Requested group size, must be >= 1
        rng: Randomness source; defaults to an unseeded ``random.Random``

    Returns:
        Partition with ceil(len(present_names) / group_size) groups

    Raises:
        ValueError: If group_size < 1
        EmptySelectionError: If present_names is empty
        SizeExceedsAvailableError: If group_size > len(present_names)

    Example:
        >>> p = partition(["A", "B", "C", "D", "E"], 2)
        >>> p.group_count
        3
    """
    if group_size < 1:
        raise ValueError(f"group_size must be at least 1: {group_size}")

    available = len(present_names)
    if available == 0:
        raise EmptySelectionError()
    if group_size > available:
        raise SizeExceedsAvailableError(group_size, available)

    shuffled = list(present_names)
    resolve_rng(rng).shuffle(shuffled)

    number_of_groups = math.ceil(available / group_size)
    groups: List[List[str]] = [[] for _ in range(number_of_groups)]
    for index, name in enumerate(shuffled):
        groups[index % number_of_groups].append(name)

    result = Partition(tuple(tuple(g) for g in groups))
    logger.debug(
        f"Partitioned {available} students into {result.group_count} groups "
        f"(requested size {group_size}, sizes {list(result.sizes)})"
    )
    return result
