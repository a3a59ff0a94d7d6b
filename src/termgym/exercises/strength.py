"""
Strength Exercise
=================

Glute squeeze/lift guided by a five-channel spring group.

Channels:
    main:    primary contract/expand motion, selects the frame
    left:    slightly faster, less damped; asymmetric padding and tilt
    right:   slightly slower, more damped; asymmetric padding and tilt
    breath:  slow sinusoidal micro-movement of the whole figure
    tension: stiff, well damped follower of 1.2x the main target; overlay label

Cycle:
    The main target alternates between -R and +R. Each time the main spring
    settles the target flips and the cycle counter advances. Two settles make
    one repetition, and the instruction alternates every two cycles.
"""

import logging
from typing import List, Optional

from termgym.cycle.graph import CycleGraph
from termgym.cycle.transitions import CycleResult, RetargetPolicy
from termgym.exercises.base import ExerciseKind
from termgym.i18n.localizer import Localizer
from termgym.models.render import FrameSelection
from termgym.models.spring import CompositeState
from termgym.physics.composer import MultiSpringComposer, strength_channels
from termgym.render.frames import GLUTE_FRAMES, FrameSet
from termgym.render.mapper import map_to_frame, strength_hints


logger = logging.getLogger(__name__)


PRIMARY_CHANNEL = "main"

TIP_KEYS = (
    "tip_follow_rhythm",
    "tip_squeeze",
    "tip_lift",
    "tip_core",
    "tip_exit",
)


class StrengthExercise:
    """
    Glute lifting exercise with spring-animated guidance.

    Attributes:
        composer: Spring channels of the exercise
        cycle: Contract-expand state machine
        frame_set: Frames from fully contracted to peak activation

    Example:
        exercise = StrengthExercise(Localizer.load("en"))
        exercise.reset()

        for _ in range(90):
            exercise.update()
        print("\\n".join(exercise.render()))
    """

    kind = ExerciseKind.STRENGTH
    name = "Glute Lift"
    category = "Strength"
    description = "Glute lifting exercise with animated guidance"

    def __init__(
        self,
        localizer: Localizer,
        frame_rate: float = 30.0,
        angular_frequency: float = 4.0,
        damping_ratio: float = 0.3,
        animation_range: float = 8.0,
        settle_epsilon: float = 0.5,
        frame_set: FrameSet = GLUTE_FRAMES,
    ) -> None:
        """
        Initialize strength exercise.

        Args:
            localizer: Text provider
            frame_rate: Ticks per second (spring sample rate)
            angular_frequency: Main spring angular frequency
            damping_ratio: Main spring damping ratio
            animation_range: Magnitude R of the extremes
            settle_epsilon: Settling tolerance of the main spring
            frame_set: Frames to animate
        """
        self.localizer = localizer
        self.animation_range = animation_range
        self.frame_set = frame_set

        self.composer = MultiSpringComposer(
            strength_channels(angular_frequency, damping_ratio),
            sample_rate=frame_rate,
        )
        self.cycle = CycleGraph(RetargetPolicy(animation_range, settle_epsilon))

        self._composite: CompositeState = self.composer.snapshot()
        self._last_result: Optional[CycleResult] = None

        logger.info(
            f"StrengthExercise initialized: ω={angular_frequency}, "
            f"ζ={damping_ratio}, range=±{animation_range}, fps={frame_rate}"
        )

    @property
    def cycle_count(self) -> int:
        return self.cycle.cycle_state.cycle_count

    @property
    def composite(self) -> CompositeState:
        """Channel states after the last tick."""
        return self._composite

    @property
    def last_result(self) -> Optional[CycleResult]:
        return self._last_result

    def update(self) -> None:
        """Advance every channel one step, then evaluate the cycle."""
        self._composite = self.composer.step(self.cycle.target)
        self._last_result = self.cycle.process(self._composite[PRIMARY_CHANNEL])

        if self._last_result.retargeted:
            logger.info(
                f"Cycle {self.cycle_count} at frame {self._composite.frame_index}: "
                f"target → {self._last_result.target:+.1f}"
            )

    def select_frame(self) -> FrameSelection:
        return map_to_frame(
            self._composite,
            self.frame_set,
            primary=PRIMARY_CHANNEL,
            animation_range=self.animation_range,
            derive_hints=strength_hints,
        )

    def render(self) -> List[str]:
        selection = self.select_frame()
        hints = selection.hints

        padding = " " * hints.line_padding
        suffix = f" {hints.tilt}" if hints.tilt else ""
        lines = [
            f"{padding}{line}{suffix}"
            for line in self.frame_set[selection.frame_index]
        ]

        if hints.overlay_key:
            lines.append(" " * hints.overlay_padding + self.localizer.t(hints.overlay_key))

        return lines

    def get_instructions(self) -> str:
        if self.cycle_count % 4 in (0, 1):
            return self.localizer.t("squeeze_instruction")
        return self.localizer.t("lift_instruction")

    def get_tips(self) -> List[str]:
        return [self.localizer.t(key) for key in TIP_KEYS]

    def get_counter(self) -> str:
        return self.localizer.tf("rep_counter", self.cycle_count // 2 + 1)

    def is_complete(self) -> bool:
        # Runs until interrupted
        return False

    def reset(self) -> None:
        self.cycle.reset()
        self.composer.reset(initial_target=self.cycle.target)
        self._composite = self.composer.snapshot()
        self._last_result = None
