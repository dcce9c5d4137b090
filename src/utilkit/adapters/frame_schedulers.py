"""Frame schedulers for driving DOM animations."""

from __future__ import annotations

import asyncio
import logging
import time

from utilkit.config import DEFAULT_FRAME_RATE
from utilkit.interfaces.errors import NoRunningLoopError
from utilkit.interfaces.frame_scheduler import FrameCallback, FrameScheduler

logger = logging.getLogger(__name__)

__all__ = ["AsyncioFrameScheduler", "ManualFrameScheduler"]


class AsyncioFrameScheduler(FrameScheduler):
    """Deliver frames from the running asyncio event loop at a fixed rate.

    Frames are emulated with `loop.call_later`, one callback per request, so
    the loop must be running when `request_frame` is called.
    """

    def __init__(self, fps: int = DEFAULT_FRAME_RATE) -> None:
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self._interval = 1.0 / fps

    @property
    def interval_ms(self) -> float:
        """Delay between frames in milliseconds."""
        return self._interval * 1000.0

    def now(self) -> float:
        return time.monotonic() * 1000.0

    def request_frame(self, callback: FrameCallback) -> None:
        """Schedule ``callback`` on the running loop.

        Raises:
            NoRunningLoopError: If called outside a running event loop.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as exc:
            raise NoRunningLoopError() from exc
        loop.call_later(self._interval, lambda: callback(self.now()))


class ManualFrameScheduler(FrameScheduler):
    """Deterministic scheduler whose clock only moves when told to.

    Useful in tests and in hosts that render on their own tick:

        scheduler = ManualFrameScheduler()
        future = fade_in(element, 100, scheduler=scheduler)
        scheduler.run_until_idle()
        assert future.done()
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)
        self._pending: list[FrameCallback] = []
        self._frames = 0

    @property
    def pending(self) -> int:
        """Number of callbacks waiting for the next frame."""
        return len(self._pending)

    @property
    def frames(self) -> int:
        """Number of frames delivered so far."""
        return self._frames

    def now(self) -> float:
        return self._now

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    def advance(self, ms: float = 1000.0 / DEFAULT_FRAME_RATE) -> None:
        """Move the clock forward by ``ms`` and deliver one frame.

        Callbacks requested while the frame runs wait for the next one.
        """
        self._now += ms
        self._frames += 1
        callbacks, self._pending = self._pending, []
        for callback in callbacks:
            callback(self._now)

    def run_until_idle(
        self, step: float = 1000.0 / DEFAULT_FRAME_RATE, max_frames: int = 100_000
    ) -> int:
        """Deliver frames until nothing is pending.

        Args:
            step: Clock increment per frame in milliseconds.
            max_frames: Upper bound to stop runaway animations.

        Returns:
            int: Number of frames delivered by this call.
        """
        delivered = 0
        while self._pending and delivered < max_frames:
            self.advance(step)
            delivered += 1
        if self._pending:
            logger.warning(
                "Stopped after %d frames with %d callbacks pending",
                delivered,
                len(self._pending),
            )
        return delivered
