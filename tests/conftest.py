"""
Test Configuration
==================

Pytest fixtures and test doubles for termgym.
"""

import json
import logging
from typing import Iterable, List

import pytest

from termgym.exercises.base import ExerciseKind
from termgym.i18n.localizer import Localizer


@pytest.fixture
def localizer():
    """English localizer from the bundled locale files."""
    return Localizer.load("en")


@pytest.fixture
def bare_localizer():
    """Localizer without translations (every lookup returns its key)."""
    return Localizer()


@pytest.fixture
def locale_dir(tmp_path):
    """Directory with a small English and German locale."""
    directory = tmp_path / "locales"
    directory.mkdir()
    (directory / "en.json").write_text(
        json.dumps({"title": "Gym", "rep_counter": "Rep: {0}"}),
        encoding="utf-8",
    )
    (directory / "de.json").write_text(
        json.dumps({"title": "Fitnessstudio", "rep_counter": "Wdh: {0}"}),
        encoding="utf-8",
    )
    return directory


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No TERMGYM_* variables and no config file in the search paths."""
    for name in (
        "TERMGYM_LANG",
        "TERMGYM_LOCALE_DIR",
        "TERMGYM_FPS",
        "TERMGYM_ANGULAR_FREQUENCY",
        "TERMGYM_DAMPING_RATIO",
        "TERMGYM_LOG_LEVEL",
        "TERMGYM_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def restore_logging():
    """Undo setup_logging() changes to the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


class RecordingRenderer:
    """Renderer double recording every call."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def clear(self) -> None:
        self.calls.append(("clear",))

    def write_lines(self, lines: Iterable[str]) -> None:
        self.calls.append(("lines", list(lines)))

    def write_inline(self, text: str) -> None:
        self.calls.append(("inline", text))

    def hide_cursor(self) -> None:
        self.calls.append(("hide_cursor",))

    def show_cursor(self) -> None:
        self.calls.append(("show_cursor",))

    @property
    def clears(self) -> int:
        return sum(1 for call in self.calls if call[0] == "clear")

    @property
    def writes(self) -> List[List[str]]:
        return [call[1] for call in self.calls if call[0] == "lines"]


class CountingSession:
    """Exercise session double counting its updates."""

    kind = ExerciseKind.STRENGTH
    name = "Counting"
    category = "Strength"
    description = "Test session"

    def __init__(self, on_update=None) -> None:
        self.updates = 0
        self.on_update = on_update

    def update(self) -> None:
        self.updates += 1
        if self.on_update is not None:
            self.on_update(self.updates)

    def select_frame(self):
        raise NotImplementedError

    def render(self) -> List[str]:
        return [f"frame {self.updates}"]

    def get_instructions(self) -> str:
        return "instruction"

    def get_tips(self) -> List[str]:
        return ["tip"]

    def get_counter(self) -> str:
        return f"count {self.updates}"

    def is_complete(self) -> bool:
        return False

    def reset(self) -> None:
        self.updates = 0


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def session():
    return CountingSession()


@pytest.fixture
def session_factory():
    """Build session doubles, optionally with an update hook."""
    return CountingSession
