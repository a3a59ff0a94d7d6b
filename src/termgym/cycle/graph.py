"""
Cycle Graphs
============

LangGraph state machines driving the exercise cycles.

LangGraph is used for CONTROL FLOW only: every node is a deterministic
function of the graph state and the transition policies.

Contract-expand graph:
    START → check_settled ─┬─ settled ──→ retarget → END
                           └─ moving ───→ settle   → END

Breathing graph:
    START → advance_phase → END

Both graphs are invoked once per tick by the owning exercise.
"""

import logging
from typing import Any, Dict, Optional, TypedDict

from langgraph.graph import END, StateGraph

from termgym.cycle.transitions import (
    BreathPhasePolicy,
    CycleResult,
    PhaseResult,
    RetargetPolicy,
)
from termgym.models.cycle import BreathState, CycleState
from termgym.models.spring import SpringState


logger = logging.getLogger(__name__)


class CycleGraphState(TypedDict):
    """
    State passed through the contract-expand graph.

    Attributes:
        cycle_state: Persistent cycle state across ticks
        primary: Primary channel after this tick's spring step
        settled: Whether the primary channel satisfied the settling condition
        result: Output of the last evaluation
    """
    cycle_state: CycleState
    primary: Optional[SpringState]
    settled: bool
    result: Optional[CycleResult]


def create_initial_cycle_state() -> CycleGraphState:
    """Create initial contract-expand graph state."""
    return {
        "cycle_state": CycleState(),
        "primary": None,
        "settled": False,
        "result": None,
    }


class CycleGraph:
    """
    LangGraph contract-expand state machine.

    Receives the primary SpringState every tick, flips the target once the
    spring has settled and reports the target for the next tick.
    """

    def __init__(self, policy: Optional[RetargetPolicy] = None) -> None:
        """
        Initialize the cycle graph.

        Args:
            policy: Retarget policy (uses defaults if None)
        """
        self.policy = policy or RetargetPolicy()
        self._graph = self._build_graph()
        self._state: CycleGraphState = create_initial_cycle_state()

        logger.info(
            f"CycleGraph initialized: range=±{self.policy.animation_range}, "
            f"ε={self.policy.settle_epsilon}"
        )

    def _build_graph(self):
        """Build the LangGraph workflow."""
        workflow = StateGraph(CycleGraphState)

        workflow.add_node("check_settled", self._check_settled_node)
        workflow.add_node("retarget", self._retarget_node)
        workflow.add_node("settle", self._settle_node)

        workflow.set_entry_point("check_settled")
        workflow.add_conditional_edges(
            "check_settled",
            self._route,
            {"retarget": "retarget", "settle": "settle"},
        )
        workflow.add_edge("retarget", END)
        workflow.add_edge("settle", END)

        return workflow.compile()

    def _check_settled_node(self, state: CycleGraphState) -> Dict[str, Any]:
        primary = state.get("primary")
        settled = primary is not None and self.policy.is_settled(primary)
        return {"settled": settled}

    @staticmethod
    def _route(state: CycleGraphState) -> str:
        return "retarget" if state.get("settled") else "settle"

    def _retarget_node(self, state: CycleGraphState) -> Dict[str, Any]:
        previous = state["cycle_state"]
        cycle_state = self.policy.retarget(previous)
        target = cycle_state.target(self.policy.animation_range)

        logger.debug(
            f"Retarget [cycle {cycle_state.cycle_count}]: "
            f"{previous.target(self.policy.animation_range):+.1f} → {target:+.1f}"
        )

        return {
            "cycle_state": cycle_state,
            "result": CycleResult(
                phase=cycle_state.phase,
                target=target,
                retargeted=True,
            ),
        }

    def _settle_node(self, state: CycleGraphState) -> Dict[str, Any]:
        cycle_state = self.policy.settle(state["cycle_state"])
        return {
            "cycle_state": cycle_state,
            "result": CycleResult(
                phase=cycle_state.phase,
                target=cycle_state.target(self.policy.animation_range),
                retargeted=False,
            ),
        }

    def process(self, primary: SpringState) -> CycleResult:
        """
        Evaluate one tick.

        Args:
            primary: Primary channel after this tick's spring step

        Returns:
            CycleResult with the phase reached and the target for next tick
        """
        self._state["primary"] = primary
        result = self._graph.invoke(self._state)
        self._state = result
        return result["result"]

    @property
    def cycle_state(self) -> CycleState:
        return self._state["cycle_state"]

    @property
    def target(self) -> float:
        """Current target of the primary channel."""
        return self.cycle_state.target(self.policy.animation_range)

    def reset(self) -> None:
        """Reset to SETTLING toward the negative extreme, cycle 0."""
        self._state = create_initial_cycle_state()


class BreathGraphState(TypedDict):
    """
    State passed through the breathing graph.

    Attributes:
        breath_state: Persistent breathing state across ticks
        result: Output of the last evaluation
    """
    breath_state: BreathState
    result: Optional[PhaseResult]


def create_initial_breath_state() -> BreathGraphState:
    """Create initial breathing graph state."""
    return {
        "breath_state": BreathState(),
        "result": None,
    }


class BreathGraph:
    """LangGraph timed breathing state machine."""

    def __init__(self, policy: Optional[BreathPhasePolicy] = None) -> None:
        self.policy = policy or BreathPhasePolicy()
        self._graph = self._build_graph()
        self._state: BreathGraphState = create_initial_breath_state()

        schedule = self.policy.schedule
        logger.info(
            f"BreathGraph initialized: inhale={schedule.inhale}, hold={schedule.hold}, "
            f"exhale={schedule.exhale}, pause={schedule.pause} ticks"
        )

    def _build_graph(self):
        workflow = StateGraph(BreathGraphState)
        workflow.add_node("advance_phase", self._advance_phase_node)
        workflow.set_entry_point("advance_phase")
        workflow.add_edge("advance_phase", END)
        return workflow.compile()

    def _advance_phase_node(self, state: BreathGraphState) -> Dict[str, Any]:
        breath_state, result = self.policy.evaluate(state["breath_state"])
        if result.breath_completed:
            logger.info(f"Breath cycle completed: {breath_state.breath_cycles}")
        return {"breath_state": breath_state, "result": result}

    def process(self) -> PhaseResult:
        """Advance the breathing cycle by one tick."""
        result = self._graph.invoke(self._state)
        self._state = result
        return result["result"]

    @property
    def breath_state(self) -> BreathState:
        return self._state["breath_state"]

    def reset(self) -> None:
        """Reset to the start of an inhale, zero cycles."""
        self._state = create_initial_breath_state()
