"""
Live browser integration tests for pageswap.

Run with:
    pytest tests/test_integration_live.py -m integration -v -s

These are excluded from the default `pytest tests/` run because they require
a Playwright-controlled Chromium browser. Pages are loaded with
page.set_content(), so no network access is needed.
"""

from __future__ import annotations

from typing import AsyncGenerator
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from playwright.async_api import Browser, Page, async_playwright

from pageswap import DOMCapture, ReplaceRenderer, View, ViewDelegate

pytestmark = pytest.mark.integration

_PAGE_ONE = """
<html><body>
  <nav id="nav" data-turbo-permanent><input id="q" autofocus></nav>
  <main data-page="one"><h2 id="intro">One</h2><a name="bottom">end</a></main>
</body></html>
"""

_PAGE_TWO = """
<html><body>
  <nav id="nav" data-turbo-permanent><input id="other"></nav>
  <main data-page="two"><h2 id="details">Two</h2></main>
</body></html>
"""


@pytest_asyncio.fixture
async def browser() -> AsyncGenerator[Browser, None]:
    async with async_playwright() as pw:
        b = await pw.chromium.launch(
            headless=True,
            args=["--no-sandbox", "--disable-dev-shm-usage"],
        )
        yield b
        await b.close()


@pytest_asyncio.fixture
async def page(browser: Browser) -> AsyncGenerator[Page, None]:
    ctx = await browser.new_context(viewport={"width": 1280, "height": 800})
    pg = await ctx.new_page()
    yield pg
    await ctx.close()


@pytest.mark.asyncio
async def test_capture_reads_markers_and_focus(page: Page) -> None:
    await page.set_content(_PAGE_ONE)
    await page.focus("#q")

    snapshot = await DOMCapture().capture(page)

    assert snapshot.is_connected
    assert [e.id for e in snapshot.permanent_elements] == ["nav"]
    assert snapshot.active_element.id == "q"
    assert snapshot.get_element_for_anchor("bottom").tag == "a"
    assert snapshot.first_autofocusable_element.id == "q"


@pytest.mark.asyncio
async def test_render_between_two_captured_pages(page: Page) -> None:
    await page.set_content(_PAGE_ONE)
    await page.focus("#q")
    current = await DOMCapture().capture(page)
    nav = current.get_permanent_element_by_id("nav")

    await page.set_content(_PAGE_TWO)
    incoming = await DOMCapture().capture(page)

    delegate = MagicMock(spec=ViewDelegate)
    delegate.allows_immediate_render.return_value = True
    view = View(delegate, current.element)

    await view.render(ReplaceRenderer(view.snapshot, incoming))

    assert view.snapshot.get_permanent_element_by_id("nav") is nav
    assert view.snapshot.active_element.id == "q"
    assert view.snapshot.has_anchor("details")
    assert not view.snapshot.has_anchor("intro")
