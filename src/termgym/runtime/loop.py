"""
Animation Loop
==============

Frame-rate paced tick loop with signal-based cancellation.

Per tick:
    1. session.update()        (springs + cycle advance exactly once)
    2. compose the screen      (text from the Localizer)
    3. renderer.clear() + renderer.write_lines(screen)

Cancellation:
    SIGINT and SIGTERM set an asyncio.Event. The only suspension point of
    the loop waits on that event with the remaining tick period as timeout,
    so a signal ends the wait immediately and no further tick runs. The
    final clear + summary render happens exactly once, after which the
    signal handlers are removed.

Example:
    loop = AnimationLoop(session, TerminalRenderer(), localizer, frame_rate=30)
    ticks = asyncio.run(loop.run())
"""

import asyncio
import logging
import signal
from typing import Callable, Dict, List, Optional

from termgym.exercises.base import ExerciseSession
from termgym.i18n.localizer import Localizer
from termgym.render.screen import compose_screen, compose_summary
from termgym.render.terminal import Renderer


logger = logging.getLogger(__name__)


STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class AnimationLoop:
    """
    Drives one exercise session until cancelled.

    Attributes:
        session: Exercise session (updated once per tick)
        renderer: Screen output
        localizer: Text provider for the screen and the summary
        frame_rate: Ticks per second
        max_ticks: Stop on its own after this many ticks (None = run until cancelled)
    """

    def __init__(
        self,
        session: ExerciseSession,
        renderer: Renderer,
        localizer: Localizer,
        frame_rate: float = 30.0,
        max_ticks: Optional[int] = None,
        log_every_n_ticks: int = 300,
    ) -> None:
        if frame_rate <= 0:
            raise ValueError(f"frame_rate must be positive, got {frame_rate}")

        self.session = session
        self.renderer = renderer
        self.localizer = localizer
        self.frame_rate = frame_rate
        self.max_ticks = max_ticks
        self.log_every_n_ticks = log_every_n_ticks

        # Internal state
        self._stop_event: Optional[asyncio.Event] = None
        self._stop_requested: bool = False
        self._running: bool = False
        self._ticks: int = 0
        self._fallback_handlers: Dict[signal.Signals, Callable] = {}

    @property
    def ticks(self) -> int:
        """Ticks processed by the current or last run."""
        return self._ticks

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def period(self) -> float:
        return 1.0 / self.frame_rate

    def request_stop(self) -> None:
        """Cancel the loop as a stop signal would."""
        self._stop_requested = True
        if self._stop_event is not None:
            self._stop_event.set()

    async def run(self) -> int:
        """
        Run until cancelled (or max_ticks is reached).

        Returns:
            Number of ticks processed
        """
        loop = asyncio.get_running_loop()
        self._stop_event = asyncio.Event()
        if self._stop_requested:
            self._stop_event.set()

        self._ticks = 0
        self._running = True
        installed = self._install_signal_handlers(loop)

        logger.info(
            f"AnimationLoop started: {self.session.name}, "
            f"fps={self.frame_rate}, max_ticks={self.max_ticks}"
        )

        try:
            next_tick = loop.time() + self.period

            while not self._stop_event.is_set():
                remaining = max(0.0, next_tick - loop.time())
                try:
                    await asyncio.wait_for(self._stop_event.wait(), timeout=remaining)
                    break
                except asyncio.TimeoutError:
                    pass

                self._tick()

                if self.max_ticks is not None and self._ticks >= self.max_ticks:
                    break

                next_tick += self.period
                # Never try to catch up on missed ticks
                next_tick = max(next_tick, loop.time())
        finally:
            self._remove_signal_handlers(loop, installed)
            self._running = False
            self._stop_requested = False

        self._finish()
        logger.info(f"AnimationLoop stopped after {self._ticks} ticks")
        return self._ticks

    def _tick(self) -> None:
        self.session.update()
        screen = compose_screen(self.session, self.localizer)
        self.renderer.clear()
        self.renderer.write_lines(screen)
        self._ticks += 1

        if self._ticks % self.log_every_n_ticks == 0:
            logger.info(f"Tick {self._ticks}: {self.session.get_counter()}")

    def _finish(self) -> None:
        self.renderer.clear()
        self.renderer.write_lines(compose_summary(self.session, self.localizer))

    def _on_signal(self, sig: signal.Signals) -> None:
        logger.info(f"Received {sig.name}, stopping animation")
        if self._stop_event is not None:
            self._stop_event.set()

    def _install_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> List[signal.Signals]:
        installed: List[signal.Signals] = []
        self._fallback_handlers = {}

        for sig in STOP_SIGNALS:
            try:
                loop.add_signal_handler(sig, self._on_signal, sig)
                installed.append(sig)
                continue
            except NotImplementedError:
                pass
            except RuntimeError as e:
                logger.warning(f"Cannot watch {sig.name}: {e}")
                continue

            # Event loops without add_signal_handler (e.g. Windows)
            try:
                self._fallback_handlers[sig] = signal.signal(
                    sig,
                    lambda signum, frame: loop.call_soon_threadsafe(
                        self._on_signal, signal.Signals(signum)
                    ),
                )
            except ValueError as e:
                logger.warning(f"Cannot watch {sig.name}: {e}")

        return installed

    def _remove_signal_handlers(
        self,
        loop: asyncio.AbstractEventLoop,
        installed: List[signal.Signals],
    ) -> None:
        for sig in installed:
            loop.remove_signal_handler(sig)
        for sig, previous in self._fallback_handlers.items():
            signal.signal(sig, previous)
        self._fallback_handlers = {}
