"""
Runtime Module
==============

The asyncio animation loop and its cancellation handling.
"""

from termgym.runtime.loop import STOP_SIGNALS, AnimationLoop

__all__ = [
    "AnimationLoop",
    "STOP_SIGNALS",
]
