"""
termgym
=======

Spring-animated exercises in the terminal.

An animated figure contracts and expands on a fixed-step damped spring
integrator. Several springs with slightly different character drive
different visual aspects of the same figure, and a deterministic cycle
flips the target each time the primary spring settles.

Components:
    - physics: spring integrator and multi-spring composer
    - render: frame sets, state-to-frame mapper, screen layout, terminal
    - cycle: LangGraph state machines for the exercise cycles
    - exercises: strength and meditation sessions
    - runtime: asyncio animation loop with signal-based cancellation
    - i18n: key lookup with identity fallback

Example:
    from termgym.main import main

    raise SystemExit(main(["--exercise", "strength"]))
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
