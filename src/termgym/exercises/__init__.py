"""
Exercises Module
================

Exercise variants driven by the spring composer.

This module provides:
    - base.py: ExerciseKind and the ExerciseSession protocol
    - strength.py: glute squeeze/lift (settle-and-flip cycle)
    - meditation.py: 4-7-8 deep breathing (timed phase cycle)
    - factory.py: create_exercise() from settings
"""

from termgym.exercises.base import ExerciseKind, ExerciseSession
from termgym.exercises.strength import StrengthExercise
from termgym.exercises.meditation import MeditationExercise
from termgym.exercises.factory import create_exercise

__all__ = [
    "ExerciseKind",
    "ExerciseSession",
    "StrengthExercise",
    "MeditationExercise",
    "create_exercise",
]
