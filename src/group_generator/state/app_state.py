"""
Module: state.app_state

Purpose:
    Explicit application state for the Group Generator window, plus the
    pure update functions the GUI calls in response to user actions.

Key Functions:
    - initial_state(config): State at startup
    - toggle_attendance(state, index): Flip one student's attendance
    - increment_group_size / decrement_group_size / set_group_size
    - begin_generation(state): Clear results and mark generating
    - generate_groups(state, rng, namer): Partition and name groups
    - apply_result(state, result): Reveal a delayed generation result

Key Classes:
    - AppState: Immutable snapshot of everything the window shows
    - NamedGroup: A generated group paired with its decorative name

Dependencies:
    - core.models: Roster
    - partitioning: partition, GenerationError
    - naming: GroupNamer, RandomGroupNamer

Used By:
    - gui.main_window.MainWindow
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from group_generator.config import AppConfig
from group_generator.core.models import Roster
from group_generator.naming import GroupNamer, RandomGroupNamer
from group_generator.partitioning import GenerationError, RandomSource, partition

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NamedGroup:
    """
    A generated group as displayed.

    Attributes:
        index: 0-based position; shown as "Group {index + 1}"
        name: Decorative team name, fixed for the lifetime of the result
        members: Student names in assignment order
    """

    index: int
    name: str
    members: Tuple[str, ...]

    @property
    def title(self) -> str:
        return f"Group {self.index + 1}: {self.name}"


@dataclass(frozen=True, slots=True)
class AppState:
    """
    Immutable snapshot of the generator window.

    Attributes:
        roster: Students and their attendance
        group_size: Requested group size
        groups: Last generated groups (empty before first generation or on error)
        error: User-facing message from the last failed generation
        is_generating: True between begin_generation and generate_groups

    Invariants:
        - group_size >= 1
        - groups and error are never both set
    """

    roster: Roster
    group_size: int = 3
    groups: Tuple[NamedGroup, ...] = ()
    error: Optional[str] = None
    is_generating: bool = False

    def __post_init__(self) -> None:
        """Validate state on construction."""
        if self.group_size < 1:
            raise ValueError(f"group_size must be at least 1: {self.group_size}")

    @property
    def present_count(self) -> int:
        return self.roster.present_count

    @property
    def total_count(self) -> int:
        return self.roster.total_count

    @property
    def can_decrement(self) -> bool:
        return self.group_size > 1


def initial_state(config: Optional[AppConfig] = None) -> AppState:
    """Build the startup state from configuration."""
    config = config or AppConfig()
    return AppState(
        roster=Roster.from_names(config.students),
        group_size=config.default_group_size,
    )


def toggle_attendance(state: AppState, index: int) -> AppState:
    """
    Flip attendance for the student at ``index``.

    Raises:
        IndexError: If index is outside the roster
    """
    roster = state.roster.toggle(index)
    student = roster[index]
    logger.debug(f"{student.name} marked {'present' if student.is_present else 'absent'}")
    return replace(state, roster=roster)


def set_group_size(state: AppState, size: int) -> AppState:
    """Set group size, clamped to at least 1."""
    return replace(state, group_size=max(1, size))


def increment_group_size(state: AppState) -> AppState:
    return set_group_size(state, state.group_size + 1)


def decrement_group_size(state: AppState) -> AppState:
    return set_group_size(state, state.group_size - 1)


def begin_generation(state: AppState) -> AppState:
    """Clear the previous result and mark a generation in progress."""
    return replace(state, groups=(), error=None, is_generating=True)


def generate_groups(
    state: AppState,
    rng: Optional[RandomSource] = None,
    namer: Optional[GroupNamer] = None,
) -> AppState:
    """
    Partition the present students and attach team names.

    User-correctable failures (nobody present, group size too large) are
    stored in ``state.error`` rather than raised.

    Args:
        state: Current state
        rng: Randomness for the shuffle; unseeded if None
        namer: Team namer; RandomGroupNamer if None

    Returns:
        New state with either ``groups`` or ``error`` set, not generating
    """
    present = state.roster.present_names()
    try:
        result = partition(present, state.group_size, rng)
    except GenerationError as e:
        logger.warning(str(e))
        return replace(state, groups=(), error=str(e), is_generating=False)

    namer = namer or RandomGroupNamer()
    groups = tuple(
        NamedGroup(index=i, name=namer.name_group(i), members=members)
        for i, members in enumerate(result)
    )
    logger.info(
        f"Generated {len(groups)} groups from {len(present)} present students "
        f"(group size {state.group_size})"
    )
    return replace(state, groups=groups, error=None, is_generating=False)


def apply_result(state: AppState, result: AppState) -> AppState:
    """
    Copy the outcome of a generation onto the current state.

    Used when results are revealed after a delay: attendance or group size
    changed in the meantime is kept, only groups and error are taken from
    ``result``.
    """
    return replace(state, groups=result.groups, error=result.error, is_generating=False)
