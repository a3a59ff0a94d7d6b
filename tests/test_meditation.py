"""
Meditation Exercise Tests
=========================

Tests for the timed 4-7-8 breathing exercise.
"""

import pytest

from termgym.cycle.transitions import BreathSchedule
from termgym.exercises import ExerciseKind, MeditationExercise
from termgym.models.cycle import BreathPhase
from termgym.render.frames import BREATHING_FRAMES


@pytest.fixture
def exercise(localizer):
    exercise = MeditationExercise(localizer)
    exercise.reset()
    return exercise


def advance(exercise, ticks):
    for _ in range(ticks):
        exercise.update()


class TestMeditationCycle:
    """Tests for phase-driven targets."""

    def test_initial_state(self, exercise):
        assert exercise.phase is BreathPhase.INHALE
        assert exercise.breath_cycles == 0
        assert exercise.composite.frame_index == 0

    def test_inhale_targets(self, exercise):
        exercise.update()
        composite = exercise.composite
        assert composite["breath"].target == 8.0
        assert composite["lung"].target == pytest.approx(6.4)

    def test_exhale_targets(self, exercise):
        advance(exercise, 330)
        assert exercise.phase is BreathPhase.EXHALE
        composite = exercise.composite
        assert composite["breath"].target == -8.0
        assert composite["lung"].target == pytest.approx(-4.8)

    def test_targets_switch_on_transition_tick(self, exercise):
        advance(exercise, 329)
        assert exercise.phase is BreathPhase.HOLD
        assert exercise.composite["breath"].target == 8.0

        exercise.update()
        assert exercise.last_result.previous_phase is BreathPhase.HOLD
        assert exercise.last_result.phase is BreathPhase.EXHALE
        assert exercise.composite["breath"].target == -8.0
        assert exercise.composite["lung"].target == pytest.approx(-4.8)

    def test_targets_switch_back_on_new_inhale(self, exercise):
        advance(exercise, 629)
        assert exercise.phase is BreathPhase.PAUSE
        assert exercise.composite["breath"].target == -8.0

        exercise.update()
        assert exercise.last_result.phase_changed
        assert exercise.phase is BreathPhase.INHALE
        assert exercise.composite["breath"].target == 8.0
        assert exercise.composite["lung"].target == pytest.approx(6.4)

    def test_phase_sequence(self, exercise):
        seen = []
        for _ in range(630):
            exercise.update()
            if not seen or seen[-1] is not exercise.phase:
                seen.append(exercise.phase)
        assert seen == [
            BreathPhase.INHALE,
            BreathPhase.HOLD,
            BreathPhase.EXHALE,
            BreathPhase.PAUSE,
            BreathPhase.INHALE,
        ]

    def test_one_breath_per_traversal(self, exercise):
        advance(exercise, 569)
        assert exercise.breath_cycles == 0
        exercise.update()
        assert exercise.breath_cycles == 1
        advance(exercise, 630)
        assert exercise.breath_cycles == 2

    def test_breath_channel_rises_during_inhale(self, exercise):
        advance(exercise, 120)
        assert exercise.composite["breath"].position > 0.0

    def test_custom_schedule(self, localizer):
        exercise = MeditationExercise(
            localizer,
            schedule=BreathSchedule(inhale=1, hold=1, exhale=1, pause=1),
        )
        exercise.reset()
        advance(exercise, 4)
        assert exercise.breath_cycles == 1
        assert exercise.phase is BreathPhase.INHALE

    def test_reset(self, exercise):
        advance(exercise, 400)
        exercise.reset()
        assert exercise.phase is BreathPhase.INHALE
        assert exercise.breath_cycles == 0
        assert exercise.composite.frame_index == 0
        assert exercise.last_result is None


class TestMeditationText:
    """Tests for instructions, counter and tips."""

    def test_metadata(self, exercise):
        assert exercise.kind is ExerciseKind.MEDITATION
        assert exercise.category == "Meditation"
        assert not exercise.is_complete()

    @pytest.mark.parametrize("ticks,key", [
        (1, "breathe_in_instruction"),
        (120, "hold_breath_instruction"),
        (330, "breathe_out_instruction"),
        (570, "pause_instruction"),
    ])
    def test_instruction_per_phase(self, exercise, localizer, ticks, key):
        advance(exercise, ticks)
        assert exercise.get_instructions() == localizer.t(key)

    def test_counter(self, exercise):
        assert exercise.get_counter() == "Breath cycles: 0"
        advance(exercise, 570)
        assert exercise.get_counter() == "Breath cycles: 1"

    def test_tips(self, exercise, localizer):
        tips = exercise.get_tips()
        assert tips[0] == localizer.t("tip_breathe_478")
        assert localizer.t("tip_exit") in tips


class TestMeditationRender:
    """Tests for the rendered breathing block."""

    def test_phase_indicator_on_first_line(self, exercise, localizer):
        exercise.update()
        lines = exercise.render()
        assert lines[0].endswith("  ↑ " + localizer.t("inhaling"))
        assert all("↑" not in line for line in lines[1:])

        advance(exercise, 119)
        assert exercise.render()[0].endswith("  ⏸ " + localizer.t("holding"))

        advance(exercise, 210)
        assert exercise.render()[0].endswith("  ↓ " + localizer.t("exhaling"))

        advance(exercise, 240)
        assert exercise.render()[0].endswith("  ⏹ " + localizer.t("pausing"))

    def test_lines_padded_with_hints(self, exercise):
        advance(exercise, 60)
        selection = exercise.select_frame()
        lines = exercise.render()
        frame = BREATHING_FRAMES[selection.frame_index]

        assert len(lines) == len(frame)
        padding = " " * selection.hints.line_padding
        assert all(line.startswith(padding) for line in lines)
        assert lines[1] == padding + frame[1]

    def test_heart_glyph_swapped(self, exercise):
        advance(exercise, 60)
        selection = exercise.select_frame()
        heart_line = next(line for line in exercise.render() if "♡" in line or "💗" in line or "💖" in line)

        if selection.hints.glyph_swaps:
            old, new = selection.hints.glyph_swaps[0]
            assert old not in heart_line
            assert new in heart_line
        else:
            assert "♡" in heart_line
