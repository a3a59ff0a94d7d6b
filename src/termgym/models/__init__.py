"""
Data Models
===========

Value types and state models for termgym.

Models:
    Spring:
        - SpringState: position / velocity / target of one channel
        - SpringParameters: angular frequency, damping ratio, sample rate
        - CompositeState: all channels of a composer after one tick

    Cycle:
        - LoopPhase, CycleState: contract-expand cycle
        - BreathPhase, BreathState: timed breathing cycle

    Render:
        - RenderHints: padding, tilt, overlay label, glyph swaps
        - FrameSelection: frame index plus hints
"""

from termgym.models.spring import CompositeState, SpringParameters, SpringState
from termgym.models.cycle import BreathPhase, BreathState, CycleState, LoopPhase
from termgym.models.render import FrameSelection, RenderHints

__all__ = [
    # Spring
    "SpringState",
    "SpringParameters",
    "CompositeState",
    # Cycle
    "LoopPhase",
    "CycleState",
    "BreathPhase",
    "BreathState",
    # Render
    "RenderHints",
    "FrameSelection",
]
