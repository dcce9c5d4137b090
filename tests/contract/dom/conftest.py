"""Fixtures for DOM contract tests."""

from collections.abc import Callable, Iterable

import pytest

from utilkit.adapters import ManualFrameScheduler, SoupDocument
from utilkit.interfaces.dom import Document

PAGE = """
<div id="app" class="container main">
  <ul id="list">
    <li class="item" data-id="1">One</li>
    <li class="item active" data-id="2">Two</li>
    <li class="item" data-id="3">Three</li>
  </ul>
  <p id="note" style="color: red; margin-top: 4px;">Note</p>
  <span id="hidden" hidden>Secret</span>
</div>
"""

FORM = """
<form id="signup">
  <input name="username" value="alice">
  <input name="password" type="password">
  <input name="remember" type="checkbox" value="yes" checked>
  <input name="terms" type="checkbox">
  <input name="plan" type="radio" value="free" checked>
  <input name="plan" type="radio" value="pro">
  <input name="nickname" value="al" disabled>
  <input value="no name">
  <input name="go" type="submit" value="Go">
  <select name="country">
    <option value="cn">China</option>
    <option value="us" selected>United States</option>
  </select>
  <select name="tags" multiple>
    <option value="a" selected>A</option>
    <option value="b">B</option>
    <option value="c" selected>C</option>
  </select>
  <textarea name="bio">Hello</textarea>
  <button name="action" value="save">Save</button>
</form>
"""

DocumentFactory = Callable[..., Document]


@pytest.fixture(params=["soup"])
def make_document(request: pytest.FixtureRequest) -> Iterable[DocumentFactory]:
    """Return a factory building a fresh Document for the requested backend.

    Supported params:
      - `"soup"` → SoupDocument driven by a ManualFrameScheduler

    The factory accepts the markup plus backend keyword arguments (hooks such
    as ``submit_handler``). Animations advance only when the test drives
    ``document.frame_scheduler``.
    """

    match request.param:
        case "soup":

            def factory(markup: str = "", **kwargs) -> Document:
                return SoupDocument(markup, frame_scheduler=ManualFrameScheduler(), **kwargs)

            yield factory
        case _:
            raise ValueError(f"unknown document type: {request.param}")


@pytest.fixture
def page(make_document: DocumentFactory) -> Document:  # pylint: disable=redefined-outer-name
    """A small page with a list, a styled paragraph and a hidden span."""
    return make_document(PAGE)


@pytest.fixture
def signup(
    make_document: DocumentFactory, form_markup: str  # pylint: disable=redefined-outer-name
) -> Document:
    """A form covering every kind of control."""
    return make_document(form_markup)


@pytest.fixture
def form_markup() -> str:
    """Markup of the `signup` form, for tests that build their own document."""
    return FORM
