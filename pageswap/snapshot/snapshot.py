"""Snapshot — an immutable view of a subtree at one instant."""

from __future__ import annotations

from pageswap.core.config import DEFAULT_CONFIG, PageSwapConfig
from pageswap.core.types import Element

# (current permanent element, incoming permanent element)
PermanentElementPair = tuple[Element, Element]


class Snapshot:
    """
    Wraps a subtree root and answers questions about it.

    Nothing is cached: every property walks the live subtree on access, and
    the Snapshot never mutates the element it aliases.
    """

    def __init__(self, element: Element, config: PageSwapConfig = DEFAULT_CONFIG) -> None:
        self.element = element
        self.config = config

    def __repr__(self) -> str:
        return f"Snapshot(element={self.element.tag!r}, id={self.element.id!r})"

    @property
    def active_element(self) -> Element | None:
        doc = self.element.owner_document
        return doc.active_element if doc is not None else None

    @property
    def children(self) -> list[Element]:
        """Direct children, copied so later DOM mutation leaves the list alone."""
        return list(self.element.children)

    @property
    def is_connected(self) -> bool:
        return self.element.is_connected

    def has_anchor(self, anchor: str | None) -> bool:
        if anchor is None or anchor == "":
            return False
        return self.get_element_for_anchor(anchor) is not None

    def get_element_for_anchor(self, anchor: str | None) -> Element | None:
        """
        Resolve an anchor to the first element with that id, falling back to
        the first <a> with that name. Values are compared as plain strings.
        """
        if not anchor:
            return None

        named: Element | None = None
        for node in self.element.iter_descendants():
            if node.get_attribute("id") == anchor:
                return node
            if named is None and node.tag == "a" and node.get_attribute("name") == anchor:
                named = node
        return named

    @property
    def first_autofocusable_element(self) -> Element | None:
        return query_autofocusable_element(self.element)

    @property
    def permanent_elements(self) -> list[Element]:
        return query_permanent_elements_all(self.element, self.config)

    def get_permanent_element_by_id(self, id: str) -> Element | None:
        return get_permanent_element_by_id(self.element, id, self.config)

    def get_permanent_element_map_for_snapshot(
        self, snapshot: Snapshot
    ) -> dict[str, PermanentElementPair]:
        """
        Pair up permanent elements that exist in both snapshots, keyed by id.
        Ids present on one side only are left out.
        """
        permanent_element_map: dict[str, PermanentElementPair] = {}

        for current in self.permanent_elements:
            new = snapshot.get_permanent_element_by_id(current.id)
            if new is not None:
                permanent_element_map[current.id] = (current, new)

        return permanent_element_map


def _is_permanent(node: Element, config: PageSwapConfig) -> bool:
    return bool(node.id) and node.has_attribute(config.permanent_attribute)


def get_permanent_element_by_id(
    node: Element, id: str, config: PageSwapConfig = DEFAULT_CONFIG
) -> Element | None:
    for candidate in node.iter_descendants():
        if candidate.id == id and _is_permanent(candidate, config):
            return candidate
    return None


def query_permanent_elements_all(
    node: Element, config: PageSwapConfig = DEFAULT_CONFIG
) -> list[Element]:
    return [n for n in node.iter_descendants() if _is_permanent(n, config)]


def _is_inert_disabled_or_hidden(node: Element) -> bool:
    if node.has_attribute("inert") or node.has_attribute("hidden") or node.disabled:
        return True
    if node.tag in ("details", "dialog"):
        return not node.has_attribute("open")
    return False


def query_autofocusable_element(node: Element) -> Element | None:
    """First descendant marked `autofocus` that is visible, enabled and focusable."""
    for candidate in node.iter_descendants():
        if not candidate.has_attribute("autofocus"):
            continue
        if candidate.closest(_is_inert_disabled_or_hidden) is not None:
            continue
        if candidate.is_focusable:
            return candidate
    return None
