"""
Tests for application state transitions.

Every update function is pure: the input state is never modified and the
returned state reflects exactly one user action.
"""

import logging

import pytest

from group_generator.state import (
    AppState,
    NamedGroup,
    apply_result,
    begin_generation,
    decrement_group_size,
    generate_groups,
    increment_group_size,
    initial_state,
    set_group_size,
    toggle_attendance,
)


@pytest.fixture
def state(config) -> AppState:
    return initial_state(config)


class TestInitialState:
    def test_built_from_config(self, state, config):
        assert state.total_count == len(config.students)
        assert state.present_count == len(config.students)
        assert state.group_size == config.default_group_size
        assert state.groups == ()
        assert state.error is None
        assert state.is_generating is False

    def test_default_config(self):
        state = initial_state()
        assert state.total_count == 11
        assert state.group_size == 3

    def test_group_size_below_one_rejected(self, state):
        with pytest.raises(ValueError):
            AppState(roster=state.roster, group_size=0)


class TestAttendance:
    def test_toggle_marks_absent(self, state):
        new_state = toggle_attendance(state, 0)

        assert new_state.present_count == state.present_count - 1
        assert new_state.roster[0].is_present is False
        assert state.roster[0].is_present is True

    def test_toggle_bad_index(self, state):
        with pytest.raises(IndexError):
            toggle_attendance(state, 99)


class TestGroupSize:
    def test_increment_is_unbounded(self, state):
        for _ in range(20):
            state = increment_group_size(state)
        assert state.group_size == 23

    def test_decrement_clamps_at_one(self, state):
        for _ in range(10):
            state = decrement_group_size(state)
        assert state.group_size == 1
        assert state.can_decrement is False

    @pytest.mark.parametrize("size, expected", [(5, 5), (1, 1), (0, 1), (-4, 1)])
    def test_set_group_size_clamps(self, state, size, expected):
        assert set_group_size(state, size).group_size == expected


class TestGenerateGroups:
    def test_success_names_every_group(self, state, identity_rng, fixed_namer):
        """7 students, size 3 -> 3 groups dealt round-robin."""
        new_state = generate_groups(state, identity_rng, fixed_namer)

        assert new_state.error is None
        assert new_state.is_generating is False
        assert new_state.groups == (
            NamedGroup(0, "Team 1", ("Ana", "Dee", "Gus")),
            NamedGroup(1, "Team 2", ("Ben", "Eli")),
            NamedGroup(2, "Team 3", ("Cy", "Fay")),
        )
        assert new_state.groups[0].title == "Group 1: Team 1"

    def test_absent_students_are_left_out(self, state, identity_rng, fixed_namer):
        state = toggle_attendance(state, 0)
        state = toggle_attendance(state, 6)

        new_state = generate_groups(state, identity_rng, fixed_namer)

        members = [m for g in new_state.groups for m in g.members]
        assert sorted(members) == ["Ben", "Cy", "Dee", "Eli", "Fay"]
        assert "Ana" not in members
        assert len(new_state.groups) == 2

    def test_default_namer_used_when_none_given(self, state, seeded_rng):
        new_state = generate_groups(state, seeded_rng)
        assert all(" " in g.name for g in new_state.groups)

    def test_nobody_present_sets_error(self, state):
        for i in range(state.total_count):
            state = toggle_attendance(state, i)

        new_state = generate_groups(state)

        assert new_state.error == "No students are present"
        assert new_state.groups == ()

    def test_group_size_too_large_sets_error(self, state):
        state = set_group_size(state, 8)

        new_state = generate_groups(state)

        assert new_state.error == (
            "Group size (8) is larger than the number of present students (7)"
        )
        assert new_state.groups == ()

    def test_success_clears_previous_error(self, state, seeded_rng):
        failed = generate_groups(set_group_size(state, 50))
        recovered = generate_groups(set_group_size(failed, 2), seeded_rng)

        assert recovered.error is None
        assert len(recovered.groups) == 4

    def test_previous_groups_discarded(self, state, seeded_rng):
        first = generate_groups(state, seeded_rng)
        second = generate_groups(set_group_size(first, 100))

        assert second.groups == ()

    def test_logs_outcome(self, state, seeded_rng, caplog):
        with caplog.at_level(logging.INFO, logger="group_generator"):
            generate_groups(state, seeded_rng)
            generate_groups(set_group_size(state, 99))

        messages = [r.getMessage() for r in caplog.records]
        assert any("Generated 3 groups from 7 present students" in m for m in messages)
        assert any("Group size (99)" in m for m in messages)


class TestDelayedReveal:
    def test_begin_generation_clears_result(self, state, seeded_rng):
        generated = generate_groups(state, seeded_rng)

        pending = begin_generation(generated)

        assert pending.is_generating is True
        assert pending.groups == ()
        assert pending.error is None

    def test_apply_result_keeps_later_attendance_changes(self, state, seeded_rng):
        result = generate_groups(state, seeded_rng)
        waiting = toggle_attendance(begin_generation(state), 2)

        revealed = apply_result(waiting, result)

        assert revealed.groups == result.groups
        assert revealed.is_generating is False
        assert revealed.roster[2].is_present is False
