"""
Cycle State Models
==================

State carried by the exercise state machines between ticks.

Core Concepts:
    - LoopPhase: SETTLING / RETARGETING of the contract-expand cycle
    - CycleState: cycle counter and current target sign
    - BreathPhase: inhale / hold / exhale / pause of the timed breathing cycle
    - BreathState: current phase, its timer and completed breath cycles

Transitions:
    SETTLING → RETARGETING: primary spring settled on its target
    RETARGETING → SETTLING: immediately, after the target sign flipped

    inhale → hold → exhale → pause → inhale ...
    Each phase lasts a fixed number of ticks.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LoopPhase(str, Enum):
    """
    Phases of the contract-expand cycle.

    Attributes:
        SETTLING: Primary spring moving toward the current target
        RETARGETING: Target flipped on this tick, cycle counter advanced
    """

    SETTLING = "SETTLING"
    RETARGETING = "RETARGETING"


class CycleState(BaseModel):
    """
    Contract-expand cycle state.

    The initial state is SETTLING toward the negative extreme.

    Attributes:
        cycle_count: Number of settling events so far
        target_sign: Sign of the current extreme (-1 contract, +1 expand)
        phase: Phase reached on the last evaluated tick
    """

    model_config = ConfigDict(frozen=True)

    cycle_count: int = Field(default=0, ge=0, description="Settling events so far")
    target_sign: int = Field(default=-1, description="Sign of the current extreme")
    phase: LoopPhase = Field(default=LoopPhase.SETTLING, description="Current phase")

    def target(self, animation_range: float) -> float:
        """Target value for the primary channel."""
        return self.target_sign * animation_range


class BreathPhase(str, Enum):
    """Phases of the timed breathing cycle, in traversal order."""

    INHALE = "inhale"
    HOLD = "hold"
    EXHALE = "exhale"
    PAUSE = "pause"

    @property
    def next(self) -> "BreathPhase":
        """Phase that follows this one."""
        order = list(BreathPhase)
        return order[(order.index(self) + 1) % len(order)]


class BreathState(BaseModel):
    """
    Timed breathing cycle state.

    Attributes:
        phase: Current breathing phase
        phase_timer: Ticks elapsed in the current phase
        breath_cycles: Completed inhale → pause traversals
    """

    model_config = ConfigDict(frozen=True)

    phase: BreathPhase = Field(default=BreathPhase.INHALE)
    phase_timer: int = Field(default=0, ge=0)
    breath_cycles: int = Field(default=0, ge=0)
