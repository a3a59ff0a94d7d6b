"""
Render Module
=============

Everything between the spring state and the terminal.

This module provides:
    - frames.py: ASCII frame sets
    - mapper.py: continuous spring state → frame index + render hints
    - screen.py: full screen layout as text lines
    - terminal.py: Renderer protocol and ANSI terminal renderer

screen.py depends on the exercises package and is imported from its
module path rather than re-exported here.
"""

from termgym.render.frames import BREATHING_FRAMES, GLUTE_FRAMES, FrameSet
from termgym.render.mapper import (
    breath_hints,
    map_to_frame,
    normalize,
    quantize,
    strength_hints,
)
from termgym.render.terminal import Renderer, TerminalRenderer

__all__ = [
    "FrameSet",
    "GLUTE_FRAMES",
    "BREATHING_FRAMES",
    "normalize",
    "quantize",
    "map_to_frame",
    "strength_hints",
    "breath_hints",
    "Renderer",
    "TerminalRenderer",
]
