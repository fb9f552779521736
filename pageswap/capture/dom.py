"""DOM capture — mirrors a live Playwright page subtree into a Snapshot."""

from __future__ import annotations

import logging

from playwright.async_api import Page

from pageswap.core.config import DEFAULT_CONFIG, PageSwapConfig
from pageswap.core.types import Document, Element
from pageswap.snapshot.snapshot import Snapshot

logger = logging.getLogger(__name__)

# Returns {tag, attributes, focused, children} for the subtree at `selector`,
# plus the window scroll offsets and the document URL.
_DOM_CAPTURE_JS = """(selector) => {
    function serializeNode(el, depth) {
        if (depth > 64) return null;
        const attributes = {};
        for (const attr of el.attributes) {
            attributes[attr.name] = attr.value;
        }
        const children = [];
        for (const child of el.children) {
            const s = serializeNode(child, depth + 1);
            if (s) children.push(s);
        }
        return {
            tag: el.tagName.toLowerCase(),
            attributes,
            focused: document.activeElement === el,
            children,
        };
    }

    const root = document.querySelector(selector);
    return {
        url: document.baseURI,
        scrollX: window.scrollX,
        scrollY: window.scrollY,
        root: root ? serializeNode(root, 0) : null,
    };
}"""


class DOMCapture:
    """
    Captures the subtree under a CSS selector of a live page.

    The captured tree lives in a fresh Document so it is connected, keeps
    the focused element and carries the page's scroll offsets.
    """

    def __init__(self, config: PageSwapConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    async def capture(self, page: Page, selector: str = "body") -> Snapshot:
        raw = await page.evaluate(_DOM_CAPTURE_JS, selector) or {}
        document = Document(base_url=raw.get("url") or page.url)
        document.window.scroll_to(raw.get("scrollX", 0) or 0, raw.get("scrollY", 0) or 0)

        raw_root = raw.get("root")
        if raw_root is None:
            logger.debug("Selector %r matched nothing on %s", selector, page.url)
            return Snapshot(document.create_element("div"), self.config)

        root = self._attach_root(document, raw_root)
        focused = self._build_children(document, root, raw_root)
        if focused is not None:
            focused.focus()

        logger.debug(
            "Captured %d element(s) under %r from %s",
            sum(1 for _ in root.iter_descendants()) + 1, selector, page.url,
        )
        return Snapshot(root, self.config)

    def _attach_root(self, document: Document, raw: dict) -> Element:
        tag = raw.get("tag", "div")
        attributes = raw.get("attributes") or {}
        if tag == "body":
            document.body.attributes.update(attributes)
            return document.body
        if tag == "html":
            document.document_element.attributes.update(attributes)
            return document.document_element
        return document.body.append_child(document.create_element(tag, attributes))

    def _build_children(self, document: Document, parent: Element, raw: dict) -> Element | None:
        """Append raw children under `parent`; return the focused node, if any."""
        focused = parent if raw.get("focused") else None
        if parent is document.document_element:
            # the captured <head>/<body> replace the empty defaults
            for stale in list(parent.children):
                parent.remove_child(stale)
        for child_raw in raw.get("children", []):
            child = parent.append_child(
                document.create_element(child_raw.get("tag", "div"), child_raw.get("attributes") or {})
            )
            if child.tag == "body" and parent is document.document_element:
                document.body = child
            elif child.tag == "head" and parent is document.document_element:
                document.head = child
            found = self._build_children(document, child, child_raw)
            if focused is None:
                focused = found
        return focused
