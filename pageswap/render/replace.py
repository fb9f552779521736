"""ReplaceRenderer — swaps the children of the current root wholesale."""

from __future__ import annotations

from pageswap.render.renderer import Renderer


class ReplaceRenderer(Renderer):
    """
    Moves every child of the new root under the current root, dropping the
    old children. Permanent elements present on both pages are kept live.
    """

    render_method = "replace"

    @property
    def should_render(self) -> bool:  # type: ignore[override]
        return bool(self.new_snapshot.children)

    @property
    def reload_reason(self) -> str | None:  # type: ignore[override]
        return None if self.should_render else "empty_page"

    async def render(self) -> None:
        async with self.preserving_permanent_elements():
            self._replace_children()

    def finish_rendering(self) -> None:
        # Focus left the page with the old content: hand it to autofocus
        current = self.current_snapshot
        doc = current.element.owner_document
        if doc is not None and current.active_element is doc.body:
            element = current.first_autofocusable_element
            if element is not None:
                element.focus()

    def _replace_children(self) -> None:
        root = self.current_snapshot.element
        for child in self.current_snapshot.children:
            root.remove_child(child)
        for child in self.new_snapshot.children:
            root.append_child(child)
