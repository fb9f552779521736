"""Tests for the in-process DOM model: Element, Document, Window."""

import pytest

from pageswap.core.types import Document, Element, Window


def make_doc() -> Document:
    return Document(base_url="https://example.com/")


class TestDocument:
    def test_has_html_head_and_body(self):
        doc = make_doc()
        assert doc.document_element.tag == "html"
        assert [c.tag for c in doc.document_element.children] == ["head", "body"]
        assert doc.body.is_connected

    def test_active_element_defaults_to_body(self):
        doc = make_doc()
        assert doc.active_element is doc.body

    def test_active_element_falls_back_when_focused_is_detached(self):
        doc = make_doc()
        button = doc.body.append_child(doc.create_element("button"))
        button.focus()
        assert doc.active_element is button
        doc.body.remove_child(button)
        assert doc.active_element is doc.body


class TestElementTree:
    def test_tag_is_lowercased(self):
        assert Element(tag="DIV").tag == "div"

    def test_constructor_children_get_parent(self):
        child = Element(tag="span")
        parent = Element(tag="div", children=[child])
        assert child.parent is parent

    def test_append_moves_child_between_parents(self):
        doc = make_doc()
        a = doc.create_element("div")
        b = doc.create_element("div")
        child = a.append_child(doc.create_element("span"))
        b.append_child(child)
        assert a.children == []
        assert b.children == [child]
        assert child.parent is b

    def test_append_into_own_subtree_raises(self):
        doc = make_doc()
        outer = doc.create_element("div")
        inner = outer.append_child(doc.create_element("div"))
        with pytest.raises(ValueError):
            inner.append_child(outer)

    def test_replace_with_ancestor_raises(self):
        doc = make_doc()
        outer = doc.body.append_child(doc.create_element("div"))
        inner = outer.append_child(doc.create_element("span"))
        with pytest.raises(ValueError):
            inner.replace_with(outer)
        assert outer.parent is doc.body
        assert inner.parent is outer
        assert outer.is_connected

    def test_remove_non_child_raises(self):
        doc = make_doc()
        with pytest.raises(ValueError):
            doc.body.remove_child(doc.create_element("p"))

    def test_replace_with(self):
        doc = make_doc()
        old = doc.body.append_child(doc.create_element("p"))
        new = doc.create_element("section")
        old.replace_with(new)
        assert doc.body.children == [new]
        assert old.parent is None
        assert new.is_connected

    def test_replace_with_on_detached_element_is_noop(self):
        doc = make_doc()
        old = doc.create_element("p")
        new = doc.create_element("section")
        old.replace_with(new)
        assert new.parent is None

    def test_clone_is_deep_and_independent(self):
        doc = make_doc()
        original = doc.create_element("div", {"id": "a"}, [doc.create_element("span")])
        clone = original.clone_node()
        assert clone is not original
        assert clone.id == "a"
        assert len(clone.children) == 1
        assert clone.children[0] is not original.children[0]
        clone.set_attribute("id", "b")
        assert original.id == "a"

    def test_iter_descendants_document_order(self):
        doc = make_doc()
        root = doc.create_element("div", children=[
            doc.create_element("a", {"id": "1"}, [doc.create_element("b", {"id": "2"})]),
            doc.create_element("c", {"id": "3"}),
        ])
        assert [n.id for n in root.iter_descendants()] == ["1", "2", "3"]

    def test_contains_is_inclusive(self):
        doc = make_doc()
        outer = doc.create_element("div")
        inner = outer.append_child(doc.create_element("span"))
        assert outer.contains(outer)
        assert outer.contains(inner)
        assert not inner.contains(outer)
        assert not outer.contains(None)

    def test_moving_between_documents_adopts_subtree(self):
        source = make_doc()
        target = make_doc()
        section = source.create_element("section", children=[source.create_element("input")])
        target.body.append_child(section)
        assert section.owner_document is target
        assert section.children[0].owner_document is target
        assert section.children[0].is_connected


class TestFocus:
    def test_focus_connected_button(self):
        doc = make_doc()
        button = doc.body.append_child(doc.create_element("button"))
        button.focus()
        assert doc.active_element is button

    def test_focus_ignored_for_plain_div(self):
        doc = make_doc()
        div = doc.body.append_child(doc.create_element("div"))
        div.focus()
        assert doc.active_element is doc.body

    def test_focus_div_with_tabindex(self):
        doc = make_doc()
        div = doc.body.append_child(doc.create_element("div", {"tabindex": "-1"}))
        div.focus()
        assert doc.active_element is div

    def test_focus_ignored_when_disabled(self):
        doc = make_doc()
        button = doc.body.append_child(doc.create_element("button", {"disabled": ""}))
        button.focus()
        assert doc.active_element is doc.body

    def test_focus_ignored_when_disconnected(self):
        doc = make_doc()
        button = doc.create_element("button")
        button.focus()
        assert doc.active_element is doc.body

    def test_link_needs_href(self):
        doc = make_doc()
        assert not doc.create_element("a").is_focusable
        assert doc.create_element("a", {"href": "/"}).is_focusable

    def test_hidden_input_not_focusable(self):
        doc = make_doc()
        assert not doc.create_element("input", {"type": "hidden"}).is_focusable
        assert doc.create_element("input").is_focusable

    def test_blur(self):
        doc = make_doc()
        button = doc.body.append_child(doc.create_element("button"))
        button.focus()
        button.blur()
        assert doc.active_element is doc.body


class TestWindow:
    def test_scroll_to(self):
        window = Window()
        window.scroll_to(10, 20)
        assert (window.scroll_x, window.scroll_y) == (10, 20)

    def test_scroll_into_view_records_element(self):
        doc = make_doc()
        el = doc.body.append_child(doc.create_element("div"))
        el.scroll_into_view()
        assert doc.window.scrolled_into_view is el
