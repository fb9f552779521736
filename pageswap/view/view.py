"""View — per-page render orchestrator."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pageswap.core.config import DEFAULT_CONFIG, PageSwapConfig
from pageswap.core.types import Element, ScrollPosition, VisitDirection, Window
from pageswap.core.url import Locatable, get_anchor
from pageswap.render.renderer import Renderer
from pageswap.snapshot.snapshot import Snapshot
from pageswap.view.delegate import ViewDelegate
from pageswap.view.interception import RenderInterception, ResumeSignal

logger = logging.getLogger(__name__)


class View:
    """
    Drives a Renderer through one render cycle at a time and keeps scroll,
    focus and presentation markers of the page in line.

    Usage:
        view = View(delegate, document.body)
        await view.render(renderer)
        view.scroll_to_anchor_from_location("https://example.com/#top")

    Render cycle:
        interception -> prepare -> render -> finalize

    Callers must not overlap render() calls on one View; nothing here
    detects or rejects a second concurrent call.
    """

    def __init__(
        self,
        delegate: ViewDelegate,
        element: Element,
        *,
        config: PageSwapConfig = DEFAULT_CONFIG,
        scroll_root: Any = None,
    ) -> None:
        self.delegate = delegate
        self.element = element
        self.config = config
        self.snapshot = Snapshot(element, config)
        self.renderer: Renderer | None = None
        # Render-in-flight marker; set only while a cycle runs
        self.render_task: asyncio.Task | None = None
        self._scroll_root = scroll_root
        # Used only when the element belongs to no document
        self._detached_window = Window()

    # ------------------------------------------------------------------
    # Scroll & focus
    # ------------------------------------------------------------------

    @property
    def scroll_root(self) -> Any:
        if self._scroll_root is not None:
            return self._scroll_root
        doc = self.element.owner_document
        return doc.window if doc is not None else self._detached_window

    @scroll_root.setter
    def scroll_root(self, value: Any) -> None:
        self._scroll_root = value

    def scroll_to_anchor(self, anchor: str | None) -> None:
        element = self.snapshot.get_element_for_anchor(anchor)
        if element is not None:
            self.focus_element(element)
            self.scroll_to_element(element)
        else:
            self.scroll_to_position(ScrollPosition(x=0, y=0))

    def scroll_to_anchor_from_location(self, location: Locatable) -> None:
        self.scroll_to_anchor(get_anchor(location))

    def scroll_to_element(self, element: Element) -> None:
        element.scroll_into_view()

    def focus_element(self, element: Any) -> None:
        if not isinstance(element, Element):
            return
        if element.has_attribute("tabindex"):
            element.focus()
        else:
            element.set_attribute("tabindex", self.config.temporary_tabindex)
            element.focus()
            element.remove_attribute("tabindex")

    def scroll_to_position(self, position: ScrollPosition) -> None:
        self.scroll_root.scroll_to(position.x, position.y)

    def scroll_to_top(self) -> None:
        self.scroll_to_position(ScrollPosition(x=0, y=0))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    async def render(self, renderer: Renderer) -> None:
        """
        Run one render cycle.

        Exceptions from the renderer propagate after the finalize sequence
        has run; render_task is cleared on every exit path.
        """
        if not renderer.should_render:
            if renderer.will_render:
                logger.debug("Renderer declined; invalidating (%r)", renderer.reload_reason)
                self.invalidate(renderer.reload_reason)
            return

        task = asyncio.ensure_future(self._render_cycle(renderer))
        self.renderer = renderer
        self.render_task = task
        try:
            await task
        finally:
            if self.render_task is task:
                self.render_task = None
                self.renderer = None

    async def _render_cycle(self, renderer: Renderer) -> None:
        await self._wait_for_interception(renderer)
        try:
            await self.prepare_to_render_snapshot(renderer)
            await self.render_snapshot(renderer)
        finally:
            self._finalize(renderer)
        logger.debug("Rendered snapshot (method=%s, preview=%s)", renderer.render_method, renderer.is_preview)

    def _finalize(self, renderer: Renderer) -> None:
        # Each step runs even if an earlier delegate callback raises
        try:
            self.delegate.view_rendered_snapshot(
                self.snapshot, renderer.is_preview, renderer.render_method
            )
        finally:
            try:
                self.delegate.preload_on_load_links_for_view(self.element)
            finally:
                self.finish_rendering_snapshot(renderer)

    async def _wait_for_interception(self, renderer: Renderer) -> None:
        resume = ResumeSignal()
        options = RenderInterception(
            resume=resume,
            render=renderer.render,
            render_method=renderer.render_method,
        )
        if self.delegate.allows_immediate_render(self.snapshot, options):
            return

        logger.debug("Render intercepted; waiting for resume")
        timeout = self.config.interception_timeout
        try:
            await resume.wait(timeout)
        except TimeoutError:
            logger.warning("Intercepted render not resumed after %ss", timeout)
            raise
        logger.debug("Render resumed")

    async def prepare_to_render_snapshot(self, renderer: Renderer) -> None:
        self.mark_as_preview(renderer.is_preview)
        await renderer.prepare_to_render()

    async def render_snapshot(self, renderer: Renderer) -> None:
        await renderer.render()

    def finish_rendering_snapshot(self, renderer: Renderer) -> None:
        renderer.finish_rendering()

    def invalidate(self, reason: Any) -> None:
        self.delegate.view_invalidated(reason)

    # ------------------------------------------------------------------
    # Presentation markers
    # ------------------------------------------------------------------

    def mark_as_preview(self, is_preview: bool) -> None:
        if is_preview:
            self.element.set_attribute(self.config.preview_attribute, "")
        else:
            self.element.remove_attribute(self.config.preview_attribute)

    def mark_visit_direction(self, direction: VisitDirection | str) -> None:
        value = direction.value if isinstance(direction, VisitDirection) else direction
        self.element.set_attribute(self.config.visit_direction_attribute, value)

    def unmark_visit_direction(self) -> None:
        self.element.remove_attribute(self.config.visit_direction_attribute)
