"""Shared types and dataclasses for pageswap: a small in-process DOM."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator

# Tags that take focus without an explicit tabindex
_FOCUSABLE_TAGS = {"button", "select", "textarea", "iframe", "summary"}

# Form controls that honour the `disabled` attribute
_DISABLEABLE_TAGS = {"button", "input", "select", "textarea", "optgroup", "option", "fieldset"}


class VisitDirection(str, Enum):
    FORWARD = "forward"
    BACK = "back"
    NONE = "none"


@dataclass
class ScrollPosition:
    x: float = 0
    y: float = 0


@dataclass
class Window:
    """The page viewport; default scroll root of a View."""

    scroll_x: float = 0
    scroll_y: float = 0
    scrolled_into_view: Element | None = None  # last element brought into view

    def scroll_to(self, x: float, y: float) -> None:
        self.scroll_x = x
        self.scroll_y = y


@dataclass(eq=False)
class Element:
    """A single node in the element tree. Equality is identity."""

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Element] = field(default_factory=list)
    parent: Element | None = field(default=None, repr=False)
    owner_document: Document | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.tag = self.tag.lower()
        for child in self.children:
            child.parent = self

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    @property
    def id(self) -> str:
        return self.attributes.get("id", "")

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = str(value)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def remove_attribute(self, name: str) -> None:
        self.attributes.pop(name, None)

    # ------------------------------------------------------------------
    # Tree
    # ------------------------------------------------------------------

    def append_child(self, child: Element) -> Element:
        if child.contains(self):
            raise ValueError("Cannot append an element into its own subtree")
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        child._adopt(self.owner_document)
        return child

    def remove_child(self, child: Element) -> Element:
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                child.parent = None
                return child
        raise ValueError(f"{child!r} is not a child of {self!r}")

    def replace_with(self, other: Element) -> None:
        """Put `other` where this element is. No-op for a detached element."""
        parent = self.parent
        if parent is None or other is self:
            return
        if other.contains(parent):
            raise ValueError("Cannot replace an element with one of its ancestors")
        if other.parent is not None:
            other.parent.remove_child(other)
        index = next(i for i, c in enumerate(parent.children) if c is self)
        parent.children[index] = other
        other.parent = parent
        other._adopt(parent.owner_document)
        self.parent = None

    def _adopt(self, document: Document | None) -> None:
        # Moving a subtree between documents re-homes every node in it
        if document is None or self.owner_document is document:
            return
        self.owner_document = document
        for node in self.iter_descendants():
            node.owner_document = document

    def clone_node(self, deep: bool = True) -> Element:
        clone = Element(
            tag=self.tag,
            attributes=dict(self.attributes),
            owner_document=self.owner_document,
        )
        if deep:
            for child in self.children:
                clone.append_child(child.clone_node(deep=True))
        return clone

    def contains(self, other: Element | None) -> bool:
        """Inclusive descendant check, like Node.contains()."""
        node = other
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    def closest(self, predicate: Callable[[Element], bool]) -> Element | None:
        node: Element | None = self
        while node is not None:
            if predicate(node):
                return node
            node = node.parent
        return None

    def iter_descendants(self) -> Iterator[Element]:
        """All descendants in document order (depth-first, self excluded)."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    @property
    def root(self) -> Element:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def is_connected(self) -> bool:
        doc = self.owner_document
        return doc is not None and self.root is doc.document_element

    # ------------------------------------------------------------------
    # Focus / scroll
    # ------------------------------------------------------------------

    @property
    def disabled(self) -> bool:
        return self.tag in _DISABLEABLE_TAGS and self.has_attribute("disabled")

    @property
    def is_focusable(self) -> bool:
        if self.disabled:
            return False
        if self.has_attribute("tabindex") or self.has_attribute("contenteditable"):
            return True
        if self.tag in ("a", "area"):
            return self.has_attribute("href")
        if self.tag == "input":
            return (self.get_attribute("type") or "").lower() != "hidden"
        return self.tag in _FOCUSABLE_TAGS

    def focus(self) -> None:
        doc = self.owner_document
        if doc is not None and self.is_focusable and self.is_connected:
            doc.focused_element = self

    def blur(self) -> None:
        doc = self.owner_document
        if doc is not None and doc.focused_element is self:
            doc.focused_element = None

    def scroll_into_view(self) -> None:
        doc = self.owner_document
        if doc is not None:
            doc.window.scrolled_into_view = self


class Document:
    """
    Owns the root <html> element, the window and the focus state.

    Elements are created through create_element() so they know their
    owner document; an element is connected once it hangs off
    document_element.
    """

    def __init__(self, base_url: str = "about:blank") -> None:
        self.base_url = base_url
        self.window = Window()
        self.focused_element: Element | None = None
        self.document_element = self.create_element("html")
        self.head = self.document_element.append_child(self.create_element("head"))
        self.body = self.document_element.append_child(self.create_element("body"))

    def create_element(
        self,
        tag: str,
        attributes: dict[str, str] | None = None,
        children: list[Element] | None = None,
    ) -> Element:
        element = Element(tag=tag, attributes=dict(attributes or {}), owner_document=self)
        for child in children or []:
            element.append_child(child)
        return element

    @property
    def active_element(self) -> Element:
        focused = self.focused_element
        if focused is not None and focused.is_connected:
            return focused
        return self.body
