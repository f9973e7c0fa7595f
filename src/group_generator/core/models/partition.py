"""
Module: partition

Purpose:
    Provides the Partition dataclass - the output of a single group
    generation: an ordered sequence of groups of student names.

Dependencies:
    - dataclasses (std)

Used By:
    - partitioning.partitioner.partition
    - state.app_state
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


Group = Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Partition:
    """
    Disjoint, exhaustive grouping of present students.

    Attributes:
        groups: Groups in display order; members in assignment order

    Invariants:
        - Every group is non-empty
        - Group sizes differ by at most one (round-robin distribution)

    Example:
        >>> p = Partition((("A", "C"), ("B",)))
        >>> p.sizes
        (2, 1)
    """

    groups: Tuple[Group, ...]

    def __post_init__(self) -> None:
        """Validate partition on construction."""
        for i, group in enumerate(self.groups):
            if not group:
                raise ValueError(f"Group {i + 1} is empty")

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator[Group]:
        return iter(self.groups)

    def __getitem__(self, index: int) -> Group:
        return self.groups[index]

    @property
    def group_count(self) -> int:
        return len(self.groups)

    @property
    def sizes(self) -> Tuple[int, ...]:
        return tuple(len(g) for g in self.groups)

    @property
    def members(self) -> Tuple[str, ...]:
        """All members flattened, group by group."""
        return tuple(name for group in self.groups for name in group)
