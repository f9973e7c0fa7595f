"""
Group Generator Core Package

Shared data models for the partitioner, the application state and the GUI.
"""

from .models import Student, Roster, Partition, Group

__all__ = [
    "Student",
    "Roster",
    "Partition",
    "Group",
]
