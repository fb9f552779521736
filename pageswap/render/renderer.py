"""Abstract base renderer — the strategy a View drives for one render cycle."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pageswap.core.config import DEFAULT_CONFIG, PageSwapConfig
from pageswap.core.types import Element
from pageswap.render.permanent import PermanentElementPreserver
from pageswap.snapshot.snapshot import Snapshot


class Renderer(ABC):
    """
    Performs the content swap from `current_snapshot` to `new_snapshot`.

    A View reads the flags, awaits prepare_to_render() then render(), and
    calls finish_rendering() exactly once after render() settles.
    """

    should_render: bool = True
    will_render: bool = True
    reload_reason: Any = None
    render_method: str | None = None

    def __init__(
        self,
        current_snapshot: Snapshot,
        new_snapshot: Snapshot,
        *,
        is_preview: bool = False,
        will_render: bool = True,
        config: PageSwapConfig = DEFAULT_CONFIG,
    ) -> None:
        self.current_snapshot = current_snapshot
        self.new_snapshot = new_snapshot
        self.is_preview = is_preview
        self.will_render = will_render
        self.config = config
        self._active_element: Element | None = None

    async def prepare_to_render(self) -> None:
        return None

    @abstractmethod
    async def render(self) -> None: ...

    def finish_rendering(self) -> None:
        return None

    @property
    def permanent_element_map(self) -> dict[str, tuple[Element, Element]]:
        return self.current_snapshot.get_permanent_element_map_for_snapshot(self.new_snapshot)

    def preserving_permanent_elements(self) -> PermanentElementPreserver:
        """
        Context manager that carries permanent elements over the swap and
        restores focus to one of them if it held focus before.
        """
        return PermanentElementPreserver(
            self.permanent_element_map,
            config=self.config,
            on_enter=self._entering_preserver,
            on_leave=self._leaving_preserver,
        )

    def _entering_preserver(self, current: Element, _new: Element) -> None:
        if self._active_element is not None:
            return
        active = self.current_snapshot.active_element
        if active is not None and current.contains(active):
            self._active_element = active

    def _leaving_preserver(self, current: Element) -> None:
        active = self._active_element
        if active is not None and current.contains(active):
            active.focus()
            self._active_element = None
