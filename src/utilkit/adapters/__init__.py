"""Adapters (host implementations) for UTILKIT.

Provide concrete implementations of the `utilkit.interfaces` contracts: an
in-memory HTML document backed by BeautifulSoup and soupsieve, and frame
schedulers for the animation helpers.

Dependency rule: may import `utilkit.interfaces` and `utilkit.config`; the
facades in `utilkit.dom` must not import this package.
"""

from .frame_schedulers import AsyncioFrameScheduler, ManualFrameScheduler
from .soup_dom import SoupDocument, SoupElement

__all__ = [
    "AsyncioFrameScheduler",
    "ManualFrameScheduler",
    "SoupDocument",
    "SoupElement",
]
