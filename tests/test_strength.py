"""
Strength Exercise Tests
=======================

End-to-end tests of the glute exercise with ω = 4.0, ζ = 0.3, 30 Hz and
±8.0 targets.
"""

import pytest

from termgym.exercises import ExerciseKind, StrengthExercise
from termgym.render.frames import GLUTE_FRAMES


def run_until(exercise, predicate, max_ticks=2000):
    for _ in range(max_ticks):
        exercise.update()
        if predicate(exercise):
            return
    raise AssertionError("condition not reached")


@pytest.fixture
def exercise(localizer):
    exercise = StrengthExercise(localizer)
    exercise.reset()
    return exercise


class TestStrengthCycle:
    """Tests for the settle-and-flip cycle driven by real springs."""

    def test_initial_state(self, exercise):
        assert exercise.cycle_count == 0
        assert exercise.cycle.target == -8.0
        assert exercise.composite.frame_index == 0

    def test_settles_within_bounded_window_after_each_retarget(self, exercise):
        retarget_ticks = []
        for tick in range(1, 901):
            exercise.update()
            if exercise.last_result.retargeted:
                retarget_ticks.append(tick)

        assert len(retarget_ticks) >= 5
        intervals = [b - a for a, b in zip([0] + retarget_ticks, retarget_ticks)]
        # First swing starts at rest on 0, later ones start settled on the opposite extreme
        assert 65 <= intervals[0] <= 80
        for interval in intervals[1:]:
            assert 88 <= interval <= 104

    def test_counter_increments_by_one_and_sign_alternates(self, exercise):
        counts = []
        targets = []
        for _ in range(900):
            before = exercise.cycle_count
            exercise.update()
            if exercise.last_result.retargeted:
                assert exercise.cycle_count == before + 1
                counts.append(exercise.cycle_count)
                targets.append(exercise.last_result.target)
            else:
                assert exercise.cycle_count == before

        assert counts == list(range(1, len(counts) + 1))
        assert targets[0] == 8.0
        for a, b in zip(targets, targets[1:]):
            assert b == -a

    def test_frame_index_follows_motion(self, exercise):
        positions = []
        indices = []
        for _ in range(600):
            exercise.update()
            positions.append(exercise.composite["main"].position)
            indices.append(exercise.select_frame().frame_index)

        for i in range(len(positions) - 1):
            if positions[i + 1] >= positions[i]:
                assert indices[i + 1] >= indices[i]
            else:
                assert indices[i + 1] <= indices[i]
        assert 0 in indices
        assert 4 in indices
        assert all(0 <= index <= 4 for index in indices)

    def test_frame_index_non_decreasing_while_rising(self, exercise):
        run_until(exercise, lambda e: e.last_result.retargeted)
        assert exercise.cycle.target == 8.0

        indices = []
        while True:
            exercise.update()
            main = exercise.composite["main"]
            if indices and main.velocity < 0:
                break
            if main.velocity >= 0:
                indices.append(exercise.select_frame().frame_index)

        assert indices == sorted(indices)
        assert indices[-1] == 4

    def test_reset(self, exercise):
        for _ in range(300):
            exercise.update()
        exercise.reset()

        assert exercise.cycle_count == 0
        assert exercise.cycle.target == -8.0
        assert exercise.composite.frame_index == 0
        assert exercise.composite["main"].position == 0.0
        assert exercise.last_result is None


class TestStrengthText:
    """Tests for instructions, counter and tips."""

    def test_metadata(self, exercise):
        assert exercise.kind is ExerciseKind.STRENGTH
        assert exercise.category == "Strength"
        assert exercise.name
        assert exercise.description
        assert not exercise.is_complete()

    def test_first_rep_squeezes(self, exercise, localizer):
        assert exercise.get_instructions() == localizer.t("squeeze_instruction")
        assert exercise.get_counter() == "Rep: 1"

    def test_instruction_alternates_every_two_cycles(self, exercise, localizer):
        run_until(exercise, lambda e: e.cycle_count == 1)
        assert exercise.get_instructions() == localizer.t("squeeze_instruction")
        assert exercise.get_counter() == "Rep: 1"

        run_until(exercise, lambda e: e.cycle_count == 2)
        assert exercise.get_instructions() == localizer.t("lift_instruction")
        assert exercise.get_counter() == "Rep: 2"

        run_until(exercise, lambda e: e.cycle_count == 4)
        assert exercise.get_instructions() == localizer.t("squeeze_instruction")
        assert exercise.get_counter() == "Rep: 3"

    def test_tips(self, exercise, localizer):
        tips = exercise.get_tips()
        assert len(tips) == 5
        assert tips[0] == localizer.t("tip_follow_rhythm")
        assert tips[-1] == localizer.t("tip_exit")

    def test_missing_translations_fall_back_to_keys(self, bare_localizer):
        exercise = StrengthExercise(bare_localizer)
        exercise.reset()
        assert exercise.get_instructions() == "squeeze_instruction"
        assert exercise.get_counter() == "rep_counter"


class TestStrengthRender:
    """Tests for the rendered exercise block."""

    def test_lines_follow_selection(self, exercise, localizer):
        for _ in range(45):
            exercise.update()
        selection = exercise.select_frame()
        hints = selection.hints
        lines = exercise.render()

        frame = GLUTE_FRAMES[selection.frame_index]
        suffix = f" {hints.tilt}" if hints.tilt else ""
        assert lines[:len(frame)] == [" " * hints.line_padding + line + suffix for line in frame]

        if hints.overlay_key:
            assert len(lines) == len(frame) + 1
            assert lines[-1] == " " * hints.overlay_padding + localizer.t(hints.overlay_key)
        else:
            assert len(lines) == len(frame)

    def test_overlay_appears_at_peak(self, exercise, localizer):
        labels = set()
        for _ in range(600):
            exercise.update()
            hints = exercise.select_frame().hints
            if hints.overlay_key:
                labels.add(exercise.render()[-1].strip())
        assert localizer.t("peak_activation") in labels
