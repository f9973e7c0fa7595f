"""
Module: students

Purpose:
    Provides the Student and Roster dataclasses - the attendance-aware
    roster the generator draws present students from.

Key Functions:
    - Roster.from_names(names): Build a roster with everyone present
    - Roster.toggle(index): Flip one student's attendance
    - Roster.present_names(): Names of present students, in roster order

Dependencies:
    - dataclasses (std)

Used By:
    - state.app_state.AppState
    - gui.widgets.roster_panel
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Tuple


@dataclass(frozen=True, slots=True)
class Student:
    """
    A single roster entry.

    Attributes:
        name: Display name, unique within the roster
        is_present: Whether the student takes part in the next generation

    Example:
        >>> s = Student("RL")
        >>> s.toggled().is_present
        False
    """

    name: str
    is_present: bool = True

    def __post_init__(self) -> None:
        """Validate student on construction."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"Student name must be a non-empty string: {self.name!r}")

    def toggled(self) -> Student:
        """Return a copy with attendance flipped."""
        return replace(self, is_present=not self.is_present)


@dataclass(frozen=True, slots=True)
class Roster:
    """
    Ordered, immutable collection of students.

    Attributes:
        students: Students in display order

    Invariants:
        - Student names are unique
        - Order never changes; toggling replaces a single entry in place

    Example:
        >>> roster = Roster.from_names(["A", "B"]).toggle(0)
        >>> roster.present_names()
        ('B',)
    """

    students: Tuple[Student, ...] = ()

    def __post_init__(self) -> None:
        """Validate roster on construction."""
        seen: set[str] = set()
        for student in self.students:
            if student.name in seen:
                raise ValueError(f"Duplicate student name in roster: {student.name}")
            seen.add(student.name)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Roster:
        """Create a roster with every student marked present."""
        return cls(tuple(Student(name) for name in names))

    def __len__(self) -> int:
        return len(self.students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self.students)

    def __getitem__(self, index: int) -> Student:
        return self.students[index]

    @property
    def total_count(self) -> int:
        return len(self.students)

    @property
    def present_count(self) -> int:
        return sum(1 for s in self.students if s.is_present)

    def present_names(self) -> Tuple[str, ...]:
        """
        Get the names of present students.

        Returns:
            Names in roster order, absentees skipped
        """
        return tuple(s.name for s in self.students if s.is_present)

    def toggle(self, index: int) -> Roster:
        """
        Flip attendance for the student at ``index``.

        Args:
            index: Position in the roster (negative indices are rejected)

        Returns:
            New Roster with one student replaced

        Raises:
            IndexError: If index is outside the roster
        """
        if not 0 <= index < len(self.students):
            raise IndexError(f"No student at index {index} (roster has {len(self.students)})")
        updated = list(self.students)
        updated[index] = updated[index].toggled()
        return Roster(tuple(updated))
