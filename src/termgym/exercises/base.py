"""
Exercise Sessions
=================

Capability interface shared by every exercise variant.

The set of variants is closed (ExerciseKind). Exactly one session is
created per run, before the animation loop starts, and it is never
swapped mid-run.

Design Rules:
    - update() advances the physics and the cycle by exactly one tick
    - render() returns the exercise block as text lines, top to bottom
    - All user-visible text comes from the Localizer
"""

from enum import Enum
from typing import List, Protocol

from termgym.models.render import FrameSelection


class ExerciseKind(str, Enum):
    """
    Closed set of exercise variants.

    Attributes:
        STRENGTH: Glute squeeze/lift driven by the settle-and-flip cycle
        MEDITATION: 4-7-8 breathing driven by the timed phase cycle
    """

    STRENGTH = "strength"
    MEDITATION = "meditation"

    @property
    def summary_key(self) -> str:
        """Text key of the final summary message."""
        if self is ExerciseKind.MEDITATION:
            return "meditation_complete"
        return "workout_complete"


class ExerciseSession(Protocol):
    """
    Protocol for exercise variants.

    Implemented by:
        - StrengthExercise
        - MeditationExercise
    """

    kind: ExerciseKind
    name: str
    category: str
    description: str

    def update(self) -> None:
        """Advance every spring channel and the exercise cycle one tick."""
        ...

    def select_frame(self) -> FrameSelection:
        """Frame index and render hints for the current state."""
        ...

    def render(self) -> List[str]:
        """Exercise block for the current state, as text lines."""
        ...

    def get_instructions(self) -> str:
        ...

    def get_tips(self) -> List[str]:
        ...

    def get_counter(self) -> str:
        ...

    def is_complete(self) -> bool:
        ...

    def reset(self) -> None:
        """Return to the initial state."""
        ...
