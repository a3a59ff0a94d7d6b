"""
Render Models
=============

Output of the state-to-frame mapper.

The mapper reduces a CompositeState to a frame index plus a small set of
render hints. The exercise session turns both into text lines.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class RenderHints:
    """
    Secondary rendering parameters derived from auxiliary springs.

    Attributes:
        padding: Base left padding of the frame block
        line_padding: Left padding applied to every frame line
        tilt: Directional indicator appended to each line, if any
        overlay_key: Text-provider key of the intensity label, if any
        overlay_padding: Left padding of the intensity label
        glyph_swaps: (old, new) substitutions applied to frame lines
    """

    padding: int = 0
    line_padding: int = 0
    tilt: Optional[str] = None
    overlay_key: Optional[str] = None
    overlay_padding: int = 0
    glyph_swaps: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class FrameSelection:
    """
    Result of mapping continuous state onto a frame set.

    Attributes:
        frame_index: Index into the frame set, always in [0, N-1]
        normalized: Normalized primary position in [0, 1]
        hints: Render hints for the selected frame
    """

    frame_index: int
    normalized: float
    hints: RenderHints = field(default_factory=RenderHints)
