"""
Physics Module
==============

Spring physics driving the animation.

This module provides:
    - spring.py: fixed time-step damped harmonic oscillator
    - composer.py: several spring channels advanced on one frame clock
"""

from termgym.physics.spring import (
    Spring,
    estimate_settle_ticks,
    is_settled,
    simulate,
    step,
)
from termgym.physics.composer import (
    ChannelSpec,
    MultiSpringComposer,
    meditation_channels,
    strength_channels,
)

__all__ = [
    "Spring",
    "step",
    "is_settled",
    "simulate",
    "estimate_settle_ticks",
    "ChannelSpec",
    "MultiSpringComposer",
    "strength_channels",
    "meditation_channels",
]
