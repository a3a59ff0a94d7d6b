"""
Meditation Exercise
===================

Deep breathing guided by a timed 4-7-8 phase cycle.

Channels:
    breath: primary, follows the phase target (+R inhale/hold, -R exhale/pause)
    lung:   follows +0.8R / -0.6R with its own lag; padding pulse
    heart:  very slow sinusoid; padding pulse and heart glyph intensity

Unlike the strength exercise, retargeting is driven by the phase timer,
not by the spring settling.
"""

import logging
from typing import Dict, List, Optional

from termgym.cycle.graph import BreathGraph
from termgym.cycle.transitions import BreathPhasePolicy, BreathSchedule, PhaseResult
from termgym.exercises.base import ExerciseKind
from termgym.i18n.localizer import Localizer
from termgym.models.cycle import BreathPhase
from termgym.models.render import FrameSelection
from termgym.models.spring import CompositeState
from termgym.physics.composer import MultiSpringComposer, meditation_channels
from termgym.render.frames import BREATHING_FRAMES, FrameSet
from termgym.render.mapper import breath_hints, map_to_frame


logger = logging.getLogger(__name__)


PRIMARY_CHANNEL = "breath"

# Phase -> (indicator arrow, text key) appended to the first frame line
PHASE_INDICATORS: Dict[BreathPhase, tuple] = {
    BreathPhase.INHALE: ("↑", "inhaling"),
    BreathPhase.HOLD: ("⏸", "holding"),
    BreathPhase.EXHALE: ("↓", "exhaling"),
    BreathPhase.PAUSE: ("⏹", "pausing"),
}

INSTRUCTION_KEYS: Dict[BreathPhase, str] = {
    BreathPhase.INHALE: "breathe_in_instruction",
    BreathPhase.HOLD: "hold_breath_instruction",
    BreathPhase.EXHALE: "breathe_out_instruction",
    BreathPhase.PAUSE: "pause_instruction",
}

TIP_KEYS = (
    "tip_breathe_478",
    "tip_inhale",
    "tip_hold",
    "tip_exhale",
    "tip_pause",
    "tip_focus",
    "tip_exit",
)


class MeditationExercise:
    """
    Deep breathing meditation with spring-animated lungs.

    Attributes:
        composer: Spring channels of the exercise
        breathing: Timed phase state machine
        frame_set: Frames from exhaled to peak inhale
    """

    kind = ExerciseKind.MEDITATION
    name = "Deep Breathing Meditation"
    category = "Meditation"
    description = "Guided deep breathing exercise for relaxation and mindfulness"

    def __init__(
        self,
        localizer: Localizer,
        frame_rate: float = 30.0,
        schedule: Optional[BreathSchedule] = None,
        animation_range: float = 8.0,
        frame_set: FrameSet = BREATHING_FRAMES,
    ) -> None:
        """
        Initialize meditation exercise.

        Args:
            localizer: Text provider
            frame_rate: Ticks per second (spring sample rate)
            schedule: Phase durations in ticks (4-7-8-2 seconds if None)
            animation_range: Magnitude R of the breathing extremes
            frame_set: Frames to animate
        """
        self.localizer = localizer
        self.animation_range = animation_range
        self.frame_set = frame_set

        self.policy = BreathPhasePolicy(
            schedule=schedule or BreathSchedule.from_seconds(frame_rate),
            animation_range=animation_range,
        )
        self.composer = MultiSpringComposer(meditation_channels(), sample_rate=frame_rate)
        self.breathing = BreathGraph(self.policy)

        self._composite: CompositeState = self.composer.snapshot()
        self._last_result: Optional[PhaseResult] = None

    @property
    def phase(self) -> BreathPhase:
        return self.breathing.breath_state.phase

    @property
    def breath_cycles(self) -> int:
        return self.breathing.breath_state.breath_cycles

    @property
    def composite(self) -> CompositeState:
        return self._composite

    @property
    def last_result(self) -> Optional[PhaseResult]:
        return self._last_result

    def update(self) -> None:
        """Advance the phase timer, then every channel one step."""
        self._last_result = self.breathing.process()
        # Targets follow the phase entered on this tick, so a hold→exhale
        # tick already pulls toward -R
        phase = self._last_result.phase

        self._composite = self.composer.step(
            self.policy.breath_target(phase),
            overrides={"lung": self.policy.lung_target(phase)},
        )

    def select_frame(self) -> FrameSelection:
        return map_to_frame(
            self._composite,
            self.frame_set,
            primary=PRIMARY_CHANNEL,
            animation_range=self.animation_range,
            derive_hints=breath_hints,
        )

    def render(self) -> List[str]:
        selection = self.select_frame()
        hints = selection.hints
        padding = " " * hints.line_padding
        arrow, key = PHASE_INDICATORS[self.phase]

        lines = []
        for i, line in enumerate(self.frame_set[selection.frame_index]):
            for old, new in hints.glyph_swaps:
                line = line.replace(old, new)
            if i == 0:
                line += f"  {arrow} {self.localizer.t(key)}"
            lines.append(f"{padding}{line}")
        return lines

    def get_instructions(self) -> str:
        return self.localizer.t(INSTRUCTION_KEYS[self.phase])

    def get_tips(self) -> List[str]:
        return [self.localizer.t(key) for key in TIP_KEYS]

    def get_counter(self) -> str:
        return self.localizer.tf("breath_counter", self.breath_cycles)

    def is_complete(self) -> bool:
        # Runs until interrupted
        return False

    def reset(self) -> None:
        self.breathing.reset()
        self.composer.reset(initial_target=self.policy.breath_target(BreathPhase.EXHALE))
        self._composite = self.composer.snapshot()
        self._last_result = None
