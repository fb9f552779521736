"""ViewDelegate — the navigation controller a View reports to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pageswap.core.types import Element
from pageswap.snapshot.snapshot import Snapshot
from pageswap.view.interception import RenderInterception


class ViewDelegate(ABC):
    @abstractmethod
    def allows_immediate_render(self, snapshot: Snapshot, options: RenderInterception) -> bool:
        """Return False to hold the render until `options.resume()` is called."""

    @abstractmethod
    def view_rendered_snapshot(
        self, snapshot: Snapshot, is_preview: bool, render_method: str | None
    ) -> None: ...

    @abstractmethod
    def preload_on_load_links_for_view(self, element: Element) -> None: ...

    @abstractmethod
    def view_invalidated(self, reason: Any) -> None: ...
