"""
Cycle Transition Logic
======================

Deterministic state transition policies for the two exercise cycles.

Contract-expand cycle (RetargetPolicy):
    SETTLING → RETARGETING when the primary spring has settled:
        |position - target| < ε AND |velocity| < ε
    On RETARGETING the target sign flips and the cycle counter advances
    by exactly one; the next tick is SETTLING again.

    Coupling "close to target" with "no residual momentum" keeps an
    overshooting spring from retargeting while it passes the target.

Timed breathing cycle (BreathPhasePolicy):
    inhale → hold → exhale → pause → inhale ...
    The phase timer increments every tick. When it reaches the current
    phase's duration the phase advances and the timer resets to 0.
    The breath counter increments once per traversal, at exhale → pause.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Tuple

from termgym.models.cycle import BreathPhase, BreathState, CycleState, LoopPhase
from termgym.models.spring import SpringState
from termgym.physics.spring import is_settled


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CycleResult:
    """Result of one contract-expand evaluation."""

    phase: LoopPhase
    target: float
    retargeted: bool

    def __repr__(self) -> str:
        return (
            f"CycleResult({self.phase.value}, target={self.target:+.1f}, "
            f"retargeted={self.retargeted})"
        )


class RetargetPolicy:
    """
    Settle-then-flip policy of the contract-expand cycle.

    Attributes:
        animation_range: Magnitude R of the two extremes
        settle_epsilon: Tolerance ε of the settling condition
    """

    def __init__(self, animation_range: float = 8.0, settle_epsilon: float = 0.5) -> None:
        if animation_range <= 0:
            raise ValueError("animation_range must be positive")
        if settle_epsilon <= 0:
            raise ValueError("settle_epsilon must be positive")

        self.animation_range = animation_range
        self.settle_epsilon = settle_epsilon

    def is_settled(self, primary: SpringState) -> bool:
        """Settling condition on the primary channel."""
        return is_settled(primary, self.settle_epsilon)

    def retarget(self, state: CycleState) -> CycleState:
        """Flip the target sign and advance the cycle counter."""
        return state.model_copy(update={
            "cycle_count": state.cycle_count + 1,
            "target_sign": -state.target_sign,
            "phase": LoopPhase.RETARGETING,
        })

    def settle(self, state: CycleState) -> CycleState:
        """Stay (or return) in SETTLING with the current target."""
        if state.phase is LoopPhase.SETTLING:
            return state
        return state.model_copy(update={"phase": LoopPhase.SETTLING})

    def evaluate(
        self,
        state: CycleState,
        primary: SpringState,
    ) -> Tuple[CycleState, CycleResult]:
        """
        Evaluate one tick.

        Args:
            state: Cycle state before this tick
            primary: Primary channel after this tick's spring step

        Returns:
            Tuple of (new_cycle_state, cycle_result)
        """
        if self.is_settled(primary):
            new_state = self.retarget(state)
        else:
            new_state = self.settle(state)

        return new_state, CycleResult(
            phase=new_state.phase,
            target=new_state.target(self.animation_range),
            retargeted=new_state.phase is LoopPhase.RETARGETING,
        )


@dataclass(frozen=True)
class BreathSchedule:
    """
    Duration of each breathing phase in ticks.

    Defaults follow the 4-7-8 technique with a 2 second pause at 30 fps.
    """

    inhale: int = 120
    hold: int = 210
    exhale: int = 240
    pause: int = 60

    def __post_init__(self) -> None:
        for phase in BreathPhase:
            if self.duration(phase) < 1:
                raise ValueError(f"{phase.value} duration must be at least one tick")

    @classmethod
    def from_seconds(
        cls,
        frame_rate: float,
        inhale: float = 4.0,
        hold: float = 7.0,
        exhale: float = 8.0,
        pause: float = 2.0,
    ) -> "BreathSchedule":
        """Build a schedule from phase lengths in seconds."""
        return cls(
            inhale=round(inhale * frame_rate),
            hold=round(hold * frame_rate),
            exhale=round(exhale * frame_rate),
            pause=round(pause * frame_rate),
        )

    def duration(self, phase: BreathPhase) -> int:
        return getattr(self, phase.value)

    @property
    def cycle_length(self) -> int:
        """Ticks in one full inhale → pause traversal."""
        return sum(self.duration(phase) for phase in BreathPhase)


@dataclass(frozen=True)
class PhaseResult:
    """Result of one breathing evaluation."""

    phase: BreathPhase
    previous_phase: BreathPhase
    breath_completed: bool

    @property
    def phase_changed(self) -> bool:
        return self.phase is not self.previous_phase


class BreathPhasePolicy:
    """
    Timed phase sequencing of the breathing cycle.

    Attributes:
        schedule: Phase durations in ticks
        animation_range: Magnitude R of the breathing extremes
    """

    # Phase -> (breath target, lung target) as multiples of R
    TARGET_FACTORS: Dict[BreathPhase, Tuple[float, float]] = {
        BreathPhase.INHALE: (1.0, 0.8),
        BreathPhase.HOLD: (1.0, 0.8),
        BreathPhase.EXHALE: (-1.0, -0.6),
        BreathPhase.PAUSE: (-1.0, -0.6),
    }

    def __init__(
        self,
        schedule: BreathSchedule = BreathSchedule(),
        animation_range: float = 8.0,
    ) -> None:
        self.schedule = schedule
        self.animation_range = animation_range

    def evaluate(self, state: BreathState) -> Tuple[BreathState, PhaseResult]:
        """
        Advance the phase timer by one tick.

        Returns:
            Tuple of (new_breath_state, phase_result)
        """
        timer = state.phase_timer + 1
        phase = state.phase
        cycles = state.breath_cycles
        completed = False

        if timer >= self.schedule.duration(phase):
            if phase is BreathPhase.EXHALE:
                cycles += 1
                completed = True
            phase = phase.next
            timer = 0
            logger.debug(f"Breath phase: {state.phase.value} → {phase.value}")

        new_state = BreathState(phase=phase, phase_timer=timer, breath_cycles=cycles)
        return new_state, PhaseResult(
            phase=phase,
            previous_phase=state.phase,
            breath_completed=completed,
        )

    def breath_target(self, phase: BreathPhase) -> float:
        """Target of the breathing channel during a phase."""
        return self.TARGET_FACTORS[phase][0] * self.animation_range

    def lung_target(self, phase: BreathPhase) -> float:
        """Target of the lung channel during a phase."""
        return self.TARGET_FACTORS[phase][1] * self.animation_range
