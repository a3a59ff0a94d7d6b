#!/usr/bin/env python3
"""
Headless Cycle Simulation
=========================

Runs the strength exercise without a terminal and reports how many ticks
the primary spring needs to settle after each retarget.

This script:
    1. Builds a StrengthExercise with the given spring parameters
    2. Advances it for a fixed number of ticks (no pacing, no rendering)
    3. Logs every retarget with the ticks since the previous one
    4. Reports a final summary and the closed-form settle estimate

Usage:
    python scripts/simulate.py --ticks 1800
    python scripts/simulate.py --angular-frequency 6 --damping-ratio 0.5
"""

import argparse
import logging
import os
import sys
from typing import Dict, List

import numpy as np

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from termgym.exercises import StrengthExercise
from termgym.i18n import Localizer
from termgym.models import SpringParameters
from termgym.physics import estimate_settle_ticks


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger(__name__)


def run_simulation(
    ticks: int,
    frame_rate: int,
    angular_frequency: float,
    damping_ratio: float,
    animation_range: float,
) -> Dict[str, object]:
    """
    Run the headless simulation.

    Args:
        ticks: Number of ticks to simulate
        frame_rate: Ticks per second
        angular_frequency: Primary spring angular frequency
        damping_ratio: Primary spring damping ratio
        animation_range: Magnitude R of the extremes

    Returns:
        Summary dict
    """
    logger.info("=" * 60)
    logger.info("Headless Cycle Simulation")
    logger.info("=" * 60)
    logger.info(f"Ticks: {ticks} ({ticks / frame_rate:.1f}s at {frame_rate} fps)")
    logger.info(f"Spring: ω={angular_frequency}, ζ={damping_ratio}")
    logger.info(f"Range: ±{animation_range}")
    logger.info("=" * 60)

    exercise = StrengthExercise(
        Localizer(),
        frame_rate=frame_rate,
        angular_frequency=angular_frequency,
        damping_ratio=damping_ratio,
        animation_range=animation_range,
    )
    exercise.reset()

    intervals: List[int] = []
    last_retarget = 0

    for tick in range(1, ticks + 1):
        exercise.update()
        result = exercise.last_result
        if result is not None and result.retargeted:
            intervals.append(tick - last_retarget)
            logger.info(
                f"  Retarget #{exercise.cycle_count} at tick {tick} "
                f"(+{tick - last_retarget}), frame {exercise.select_frame().frame_index}, "
                f"next target {result.target:+.1f}"
            )
            last_retarget = tick

    expected = estimate_settle_ticks(
        SpringParameters(angular_frequency, damping_ratio, sample_rate=frame_rate),
        start=-animation_range,
        target=animation_range,
    )
    settle = np.asarray(intervals[1:], dtype=float)

    logger.info("=" * 60)
    logger.info("FINAL SUMMARY")
    logger.info("=" * 60)
    logger.info(f"Retargets: {len(intervals)}")
    logger.info(f"Repetitions: {exercise.cycle_count // 2}")
    if settle.size:
        logger.info(
            f"Settle ticks per half cycle: mean={settle.mean():.1f}, "
            f"min={settle.min():.0f}, max={settle.max():.0f}"
        )
    logger.info(f"Closed-form estimate (-R → +R): {expected}")
    logger.info("=" * 60)

    if intervals:
        logger.info("✅ SIMULATION PASSED - Cycle advanced")
    else:
        logger.error("❌ SIMULATION FAILED - Primary spring never settled")

    return {
        "ticks": ticks,
        "retargets": len(intervals),
        "intervals": intervals,
        "estimate": expected,
    }


def main():
    parser = argparse.ArgumentParser(
        description="Headless simulation of the strength exercise cycle"
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=900,
        help="Ticks to simulate (default: 900)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=30,
        help="Ticks per second (default: 30)",
    )
    parser.add_argument(
        "--angular-frequency",
        type=float,
        default=4.0,
        help="Primary spring angular frequency (default: 4.0)",
    )
    parser.add_argument(
        "--damping-ratio",
        type=float,
        default=0.3,
        help="Primary spring damping ratio (default: 0.3)",
    )
    parser.add_argument(
        "--range",
        type=float,
        default=8.0,
        help="Animation range R (default: 8.0)",
    )

    args = parser.parse_args()

    result = run_simulation(
        ticks=args.ticks,
        frame_rate=args.fps,
        angular_frequency=args.angular_frequency,
        damping_ratio=args.damping_ratio,
        animation_range=args.range,
    )

    sys.exit(0 if result["retargets"] > 0 else 1)


if __name__ == "__main__":
    main()
