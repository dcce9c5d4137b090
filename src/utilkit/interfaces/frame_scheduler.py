"""Interface for per-frame schedulers."""

import abc
from collections.abc import Callable

FrameCallback = Callable[[float], None]


class FrameScheduler(abc.ABC):
    """Contract for a host that drives animations frame by frame.

    Timestamps are milliseconds on a monotonic clock; only differences
    between them are meaningful.
    """

    @abc.abstractmethod
    def now(self) -> float:
        """Return the current timestamp in milliseconds."""

    @abc.abstractmethod
    def request_frame(self, callback: FrameCallback) -> None:
        """Call ``callback`` once, with the frame timestamp, on the next frame."""
