import pytest

from sunflower.constants import (
    LEAF_ANIMATION_DURATION,
    PETAL_TOTAL_DURATION,
    PHOTO_ANIMATION_DURATION,
    STEM_ANIMATION_DURATION,
)
from sunflower.state import AnimationState, Phase, elapsed, progress
from tests.fakes import advance_to_idle


class TestProgress:
    def test_unset_start_is_zero(self):
        assert progress(None, 2000, 5000) == 0.0
        assert elapsed(None, 5000) == 0.0

    def test_bounded_and_monotonic(self):
        values = [progress(1000, 2000, now) for now in range(1000, 4000, 37)]
        assert all(0.0 <= v <= 1.0 for v in values)
        assert values == sorted(values)

    def test_reaches_one_exactly_at_duration(self):
        assert progress(1000, 2000, 2999) < 1.0
        assert progress(1000, 2000, 3000) == 1.0
        assert progress(1000, 2000, 10000) == 1.0

    def test_clock_running_backwards_is_clamped(self):
        assert elapsed(1000, 500) == 0.0
        assert progress(1000, 2000, 500) == 0.0


class TestEvaluate:
    def test_first_evaluation_starts_stem_only(self, state):
        frame = state.evaluate(1000)
        assert state.stem_start == 1000
        assert state.leaves_start is None
        assert state.petals_start is None
        assert state.photo_start is None
        assert frame.stem_progress == 0.0
        assert not frame.leaves_active
        assert frame.phase is Phase.GROWING
        assert frame.needs_another_tick

    def test_leaves_and_petals_start_when_stem_completes(self, state):
        state.evaluate(1000)
        frame = state.evaluate(1000 + STEM_ANIMATION_DURATION - 1)
        assert state.leaves_start is None
        assert not frame.leaves_active

        frame = state.evaluate(1000 + STEM_ANIMATION_DURATION)
        assert state.leaves_start == 3000
        assert state.petals_start == 3000
        assert frame.leaves_active and frame.petals_active
        assert frame.leaf_progress == 0.0
        assert frame.phase is Phase.BLOOMING

    def test_leaves_start_lazily_on_late_evaluation(self, state):
        state.evaluate(1000)
        state.evaluate(9000)
        assert state.leaves_start == 9000
        assert state.photo_start is None

    def test_photo_waits_for_full_petal_sequence(self, state):
        state.evaluate(1000)
        state.evaluate(3000)
        frame = state.evaluate(3000 + PETAL_TOTAL_DURATION - 1)
        assert state.photo_start is None
        assert not frame.photo_active

        frame = state.evaluate(3000 + PETAL_TOTAL_DURATION)
        assert state.photo_start == 11000
        assert frame.photo_active
        assert frame.photo_progress == 0.0
        assert frame.phase is Phase.REVEALING
        assert not frame.is_idle

    def test_idle_requires_photo_finished(self, state):
        state.evaluate(1000)
        state.evaluate(3000)
        state.evaluate(11000)
        assert not state.evaluate(11000 + PHOTO_ANIMATION_DURATION - 1).is_idle

        frame = state.evaluate(11000 + PHOTO_ANIMATION_DURATION)
        assert frame.is_idle
        assert frame.phase is Phase.IDLE
        assert not frame.needs_another_tick

    def test_not_idle_before_photo_starts_even_after_long_wait(self, state):
        state.evaluate(1000)
        state.evaluate(3000)
        # Leaves long done, petals just short of done: photo not started.
        frame = state.evaluate(3000 + PETAL_TOTAL_DURATION - 0.5)
        assert frame.leaf_progress == 1.0
        assert not frame.is_idle

    def test_idempotent_for_same_instant(self, state):
        state.evaluate(1000)
        state.evaluate(3000)
        first = state.evaluate(5000)
        starts = (state.stem_start, state.leaves_start, state.petals_start, state.photo_start)
        second = state.evaluate(5000)
        assert first == second
        assert (state.stem_start, state.leaves_start, state.petals_start, state.photo_start) == starts

    def test_clock_going_backwards_never_regresses_a_stage(self, state):
        state.evaluate(1000)
        state.evaluate(3000)
        frame = state.evaluate(2000)
        assert state.leaves_start == 3000
        assert frame.leaf_progress == 0.0
        assert frame.petal_elapsed == 0.0
        assert frame.stem_progress == 1.0
        assert frame.phase is Phase.BLOOMING

    def test_stage_ordering_holds_over_a_sweep(self, state):
        for now in range(0, 20000, 50):
            state.evaluate(now)
            if state.leaves_start is not None:
                assert state.stem_start is not None
                assert state.leaves_start >= state.stem_start
            if state.petals_start is not None:
                assert state.leaves_start is not None
            if state.photo_start is not None:
                assert state.photo_start - state.petals_start >= PETAL_TOTAL_DURATION

    def test_leaf_progress_tracks_leaf_duration(self, state):
        state.evaluate(0)
        state.evaluate(2000)
        frame = state.evaluate(2000 + LEAF_ANIMATION_DURATION / 4)
        assert frame.leaf_progress == pytest.approx(0.25)


class TestReset:
    def test_reset_from_idle(self, state):
        now = advance_to_idle(state)
        assert state.evaluate(now).is_idle

        state.reset()
        assert (state.stem_start, state.leaves_start, state.petals_start, state.photo_start) == (
            None,
            None,
            None,
            None,
        )
        frame = state.evaluate(now + 10)
        assert frame.stem_progress == 0.0
        assert not frame.leaves_active
        assert not frame.petals_active
        assert not frame.photo_active
        assert not frame.is_idle
        assert state.stem_start == now + 10

    def test_restart_request_applies_on_next_evaluate(self, state):
        now = advance_to_idle(state)
        state.request_restart()
        # Nothing changes until the next pass.
        assert state.photo_start is not None

        frame = state.evaluate(now + 1)
        assert not state.restart_requested
        assert frame.phase is Phase.GROWING
        assert state.leaves_start is None
        assert state.stem_start == now + 1

    def test_reset_mid_animation(self, state):
        state.evaluate(1000)
        state.evaluate(3000)
        state.reset()
        frame = state.evaluate(4000)
        assert frame.stem_progress == 0.0
        assert state.petals_start is None


def test_fresh_state_is_unset():
    state = AnimationState()
    assert state.stem_start is None
    assert not state.restart_requested
