"""Keeps permanent elements alive across a content swap."""

from __future__ import annotations

import logging
from typing import Callable

from pageswap.core.config import DEFAULT_CONFIG, PageSwapConfig
from pageswap.core.types import Element
from pageswap.snapshot.snapshot import PermanentElementPair

logger = logging.getLogger(__name__)


class PermanentElementPreserver:
    """
    Moves the live permanent elements of the current page into the incoming
    page.

    enter() swaps each incoming permanent element for a placeholder <meta>.
    The renderer then replaces the page content. leave() leaves a clone
    behind in the outgoing tree and drops the live current element into its
    placeholder, so the node (and its state) survives the transition.

    Usable as an async context manager around the swap.
    """

    def __init__(
        self,
        permanent_element_map: dict[str, PermanentElementPair],
        *,
        config: PageSwapConfig = DEFAULT_CONFIG,
        on_enter: Callable[[Element, Element], None] | None = None,
        on_leave: Callable[[Element], None] | None = None,
    ) -> None:
        self.permanent_element_map = permanent_element_map
        self.config = config
        self._on_enter = on_enter
        self._on_leave = on_leave
        self._placeholders: dict[str, Element] = {}

    async def __aenter__(self) -> PermanentElementPreserver:
        self.enter()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.leave()

    def enter(self) -> None:
        for id, (current, new) in self.permanent_element_map.items():
            if self._on_enter is not None:
                self._on_enter(current, new)
            self._replace_new_permanent_element_with_placeholder(id, new)

    def leave(self) -> None:
        for id, (current, _new) in self.permanent_element_map.items():
            self._replace_current_permanent_element_with_clone(current)
            self._replace_placeholder_with_permanent_element(id, current)
            if self._on_leave is not None:
                self._on_leave(current)
        logger.debug("Preserved %d permanent element(s)", len(self.permanent_element_map))

    def _create_placeholder(self, permanent_element: Element) -> Element:
        attributes = {"name": self.config.placeholder_name, "content": permanent_element.id}
        doc = permanent_element.owner_document
        if doc is not None:
            return doc.create_element("meta", attributes)
        return Element(tag="meta", attributes=attributes)

    def _replace_new_permanent_element_with_placeholder(self, id: str, new: Element) -> None:
        placeholder = self._create_placeholder(new)
        new.replace_with(placeholder)
        self._placeholders[id] = placeholder

    def _replace_current_permanent_element_with_clone(self, current: Element) -> None:
        current.replace_with(current.clone_node(deep=True))

    def _replace_placeholder_with_permanent_element(self, id: str, current: Element) -> None:
        placeholder = self._placeholders.pop(id, None)
        if placeholder is not None:
            placeholder.replace_with(current)
