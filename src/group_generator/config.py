"""
Module: config

Purpose:
    Application configuration. Immutable, validated on construction.

Key Classes:
    - AppConfig: Initial roster, default group size, reveal delay, theme

Dependencies:
    - dataclasses (std)

Used By:
    - state.app_state.initial_state
    - gui.main_window.MainWindow
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_STUDENTS: Tuple[str, ...] = (
    "RČ", "AČ", "DK", "RL", "TL", "KL", "KN", "VO", "TP", "DR", "MR",
)


@dataclass(frozen=True)
class AppConfig:
    """
    Configuration for a Group Generator session (immutable).

    Nothing here is read from or written to disk; every session starts
    from these values.

    Attributes:
        students: Initial roster, everyone present
        default_group_size: Group size shown on startup
        reveal_delay_ms: Pause before showing generated groups (0 = instant)
        dark_mode: Start with the dark palette
        window_title: Main window title

    Invariants:
        - default_group_size >= 1
        - reveal_delay_ms >= 0
        - student names are unique and non-blank

    Example:
        >>> AppConfig(reveal_delay_ms=0).default_group_size
        3
    """

    students: Tuple[str, ...] = DEFAULT_STUDENTS
    default_group_size: int = 3
    reveal_delay_ms: int = 800
    dark_mode: bool = True
    window_title: str = "Group Generator"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.default_group_size < 1:
            raise ValueError(f"default_group_size must be at least 1: {self.default_group_size}")
        if self.reveal_delay_ms < 0:
            raise ValueError(f"reveal_delay_ms must be non-negative: {self.reveal_delay_ms}")
        # Accept lists from callers but store a tuple
        object.__setattr__(self, "students", tuple(self.students))
        blank = [s for s in self.students if not isinstance(s, str) or not s.strip()]
        if blank:
            raise ValueError(f"Student names must be non-empty strings: {blank}")
        if len(set(self.students)) != len(self.students):
            raise ValueError("Student names must be unique")
