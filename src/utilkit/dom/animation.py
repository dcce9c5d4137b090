"""Frame-driven animations and scrolling.

Each transition registers one callback per frame with a `FrameScheduler`
(the element's document scheduler unless ``scheduler=`` is given) and
computes ``progress = min(elapsed / duration, 1)``. The returned
`concurrent.futures.Future` resolves once progress reaches 1, or carries
the exception if a frame step fails.

With asyncio, await the result through `asyncio.wrap_future`:

    await asyncio.wrap_future(fade_in(element, 200))

Animations on the same element are not coordinated; each one writes its
style property on every frame.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any

from utilkit.config import DEFAULT_ANIMATION_DURATION_MS
from utilkit.interfaces.dom import Element
from utilkit.interfaces.frame_scheduler import FrameScheduler

logger = logging.getLogger(__name__)

__all__ = [
    "fade_in",
    "fade_out",
    "slide_down",
    "slide_up",
    "scroll",
    "scroll_into_view",
]


def _animate(
    element: Element,
    duration: float,
    step: Callable[[float], None],
    *,
    scheduler: FrameScheduler | None,
    finish: Callable[[], None] | None = None,
) -> Future[None]:
    frames = scheduler or element.owner_document.frame_scheduler
    future: Future[None] = Future()
    start = frames.now()

    def on_frame(timestamp: float) -> None:
        if future.done():
            return
        if duration > 0:
            progress = min(max((timestamp - start) / duration, 0.0), 1.0)
        else:
            progress = 1.0
        try:
            step(progress)
            if progress < 1:
                frames.request_frame(on_frame)
                return
            if finish is not None:
                finish()
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Animation step failed on %r", element)
            future.set_exception(exc)
            return
        future.set_result(None)

    frames.request_frame(on_frame)
    return future


def fade_in(
    element: Element,
    duration: float = DEFAULT_ANIMATION_DURATION_MS,
    display: str = "block",
    *,
    scheduler: FrameScheduler | None = None,
) -> Future[None]:
    """Show ``element`` with ``display`` and raise its opacity from 0 to 1."""
    logger.debug("fade_in %r over %sms", element, duration)
    element.style["opacity"] = 0
    element.style["display"] = display

    def step(progress: float) -> None:
        element.style["opacity"] = progress

    return _animate(element, duration, step, scheduler=scheduler)


def fade_out(
    element: Element,
    duration: float = DEFAULT_ANIMATION_DURATION_MS,
    *,
    scheduler: FrameScheduler | None = None,
) -> Future[None]:
    """Lower opacity from its computed value to 0, then hide the element."""
    logger.debug("fade_out %r over %sms", element, duration)
    try:
        initial = float(element.computed_style("opacity"))
    except ValueError:
        initial = 1.0

    def step(progress: float) -> None:
        element.style["opacity"] = initial * (1 - progress)

    def finish() -> None:
        element.style["display"] = "none"

    return _animate(element, duration, step, scheduler=scheduler, finish=finish)


def slide_down(
    element: Element,
    duration: float = DEFAULT_ANIMATION_DURATION_MS,
    *,
    scheduler: FrameScheduler | None = None,
) -> Future[None]:
    """Show ``element`` and grow its height from 0 to its scroll height."""
    logger.debug("slide_down %r over %sms", element, duration)
    element.style["display"] = "block"
    height = element.scroll_height
    element.style["height"] = "0"
    element.style["overflow"] = "hidden"

    def step(progress: float) -> None:
        element.style["height"] = f"{height * progress:g}px"

    def finish() -> None:
        element.style["height"] = ""
        element.style["overflow"] = ""

    return _animate(element, duration, step, scheduler=scheduler, finish=finish)


def slide_up(
    element: Element,
    duration: float = DEFAULT_ANIMATION_DURATION_MS,
    *,
    scheduler: FrameScheduler | None = None,
) -> Future[None]:
    """Shrink ``element`` from its scroll height to 0, then hide it."""
    logger.debug("slide_up %r over %sms", element, duration)
    height = element.scroll_height
    element.style["height"] = f"{height:g}px"
    element.style["overflow"] = "hidden"

    def step(progress: float) -> None:
        element.style["height"] = f"{height * (1 - progress):g}px"

    def finish() -> None:
        element.style["display"] = "none"
        element.style["height"] = ""
        element.style["overflow"] = ""

    return _animate(element, duration, step, scheduler=scheduler, finish=finish)


def scroll(
    element: Element,
    top: float | None = None,
    left: float | None = None,
    behavior: str = "smooth",
) -> None:
    """Scroll ``element``'s content; None leaves an axis where it is."""
    element.scroll_to(top=top, left=left, behavior=behavior)


def scroll_into_view(element: Element, options: dict[str, Any] | None = None) -> None:
    """Bring ``element`` into view, smoothly unless ``options`` say otherwise."""
    element.scroll_into_view({"behavior": "smooth"} if options is None else options)
