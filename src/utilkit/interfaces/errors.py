"""Errors related to DOM interfaces."""

INSERT_POSITIONS = ("beforebegin", "afterbegin", "beforeend", "afterend")


class DomError(Exception):
    """Base class for all DOM-related errors."""


class InvalidInsertPositionError(DomError, ValueError):
    """Raised when an adjacent-insert position is not one of `INSERT_POSITIONS`."""

    def __init__(self, position: str) -> None:
        super().__init__(
            f"Invalid insert position {position!r}; expected one of "
            f"{', '.join(INSERT_POSITIONS)}."
        )
        self.position = position


class NoRunningLoopError(DomError, RuntimeError):
    """Raised when a frame is requested from an asyncio scheduler outside a running loop."""

    def __init__(self) -> None:
        super().__init__("Animation frames require a running asyncio event loop.")


class NoDocumentError(DomError, LookupError):
    """Raised when a DOM helper needs the default document and none is set."""

    def __init__(self) -> None:
        super().__init__(
            "No default document; pass one explicitly or call "
            "utilkit.dom.context.set_document() first."
        )
