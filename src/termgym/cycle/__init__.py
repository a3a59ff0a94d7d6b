"""
Cycle Module
============

Deterministic state machines behind the exercise cycles.

This module implements:
    - transitions.py: settle/retarget and timed breathing policies
    - graph.py: LangGraph workflows invoking those policies every tick

Key Design Decisions:
    - LangGraph is used for STRUCTURE, not reasoning
    - All transitions are deterministic and inspectable
    - Settling requires both arrival and no residual momentum
"""

from termgym.cycle.transitions import (
    BreathPhasePolicy,
    BreathSchedule,
    CycleResult,
    PhaseResult,
    RetargetPolicy,
)
from termgym.cycle.graph import BreathGraph, CycleGraph

__all__ = [
    "RetargetPolicy",
    "CycleResult",
    "BreathSchedule",
    "BreathPhasePolicy",
    "PhaseResult",
    "CycleGraph",
    "BreathGraph",
]
