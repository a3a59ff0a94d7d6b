"""
Exercise Factory
================

Builds the single session of a run from its kind and the settings.
"""

import logging

from termgym.config import Settings
from termgym.cycle.transitions import BreathSchedule
from termgym.exercises.base import ExerciseKind, ExerciseSession
from termgym.exercises.meditation import MeditationExercise
from termgym.exercises.strength import StrengthExercise
from termgym.i18n.localizer import Localizer


logger = logging.getLogger(__name__)


def create_exercise(
    kind: ExerciseKind,
    localizer: Localizer,
    settings: Settings,
) -> ExerciseSession:
    """
    Create an exercise session from settings.

    Args:
        kind: Exercise variant
        localizer: Text provider shared with the screen
        settings: Loaded configuration

    Returns:
        Reset session, ready for its first tick

    Raises:
        ValueError: If kind is not a known variant
    """
    animation = settings.animation

    if kind is ExerciseKind.STRENGTH:
        logger.info("Using StrengthExercise")
        session: ExerciseSession = StrengthExercise(
            localizer,
            frame_rate=animation.frame_rate,
            angular_frequency=settings.spring.angular_frequency,
            damping_ratio=settings.spring.damping_ratio,
            animation_range=animation.animation_range,
            settle_epsilon=animation.settle_epsilon,
        )

    elif kind is ExerciseKind.MEDITATION:
        meditation = settings.meditation
        schedule = BreathSchedule.from_seconds(
            animation.frame_rate,
            inhale=meditation.inhale_seconds,
            hold=meditation.hold_seconds,
            exhale=meditation.exhale_seconds,
            pause=meditation.pause_seconds,
        )
        logger.info(f"Using MeditationExercise: cycle={schedule.cycle_length} ticks")
        session = MeditationExercise(
            localizer,
            frame_rate=animation.frame_rate,
            schedule=schedule,
            animation_range=animation.animation_range,
        )

    else:
        raise ValueError(f"Unknown exercise kind: {kind}")

    session.reset()
    return session
