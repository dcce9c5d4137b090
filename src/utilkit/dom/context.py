"""Default document for DOM helpers.

Helpers that take an optional ``context``/``document`` fall back to the
document set here. The value lives in a `ContextVar`, so each thread and each
asyncio task sees the document its own context set.

    from utilkit.dom import context, selector

    context.set_document(doc)
    selector.get("#app")  # same as selector.get("#app", doc)
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from utilkit.interfaces.dom import Document
from utilkit.interfaces.errors import NoDocumentError

__all__ = ["set_document", "get_document", "clear_document", "use_document"]

_document_var: ContextVar[Document | None] = ContextVar("utilkit_document", default=None)


def set_document(document: Document) -> None:
    """Make ``document`` the default for the current context."""
    _document_var.set(document)


def clear_document() -> None:
    """Forget the default document of the current context."""
    _document_var.set(None)


def get_document() -> Document:
    """Return the default document.

    Raises:
        NoDocumentError: If no default document was set.
    """
    document = _document_var.get()
    if document is None:
        raise NoDocumentError()
    return document


@contextmanager
def use_document(document: Document) -> Iterator[Document]:
    """Temporarily make ``document`` the default, restoring the previous one on exit."""
    token = _document_var.set(document)
    try:
        yield document
    finally:
        _document_var.reset(token)
