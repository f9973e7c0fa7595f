"""
Application state and pure update functions.

The GUI holds a single AppState and replaces it with the return value of
these functions; no widget mutates shared state directly.
"""

from .app_state import (
    AppState,
    NamedGroup,
    initial_state,
    toggle_attendance,
    set_group_size,
    increment_group_size,
    decrement_group_size,
    begin_generation,
    generate_groups,
    apply_result,
)

__all__ = [
    "AppState",
    "NamedGroup",
    "initial_state",
    "toggle_attendance",
    "set_group_size",
    "increment_group_size",
    "decrement_group_size",
    "begin_generation",
    "generate_groups",
    "apply_result",
]
