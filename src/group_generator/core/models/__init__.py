"""
Core Models Package

Immutable, validated data models shared by the partitioner, the
application state and the GUI.

All models in this package are frozen dataclasses. Updates such as an
attendance toggle return a new instance instead of mutating in place, so
every state transition can be tested without a GUI.
"""

from .students import Student, Roster
from .partition import Partition, Group

__all__ = [
    "Student",
    "Roster",
    "Partition",
    "Group",
]
