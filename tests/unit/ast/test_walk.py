#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_walk.py
"""Unit tests for the tree walk and the visitor base class."""

import copy

import pytest

from ast2latex.ast import (
    Document,
    Emphasis,
    Heading,
    Link,
    ListItem,
    NodeVisitor,
    Paragraph,
    Text,
    ThematicBreak,
    TreeIndex,
    WalkStatus,
    walk,
)
from ast2latex.exceptions import UnsupportedNodeError


def _record_walk(root, status_for=None):
    """Walk ``root`` and return the (kind, entering) sequence."""
    seen = []

    def callback(node, entering):
        seen.append((type(node).__name__, entering))
        if status_for is not None:
            return status_for(node, entering)
        return WalkStatus.GO_TO_NEXT

    walk(root, callback)
    return seen


@pytest.mark.unit
class TestWalkOrder:
    """Tests for visit order and directions."""

    def test_containers_visited_twice_leaves_once(self) -> None:
        """Test entering/leaving calls for containers and single calls for leaves."""
        doc = Document(
            children=[
                Paragraph(children=[Text(content="a"), Emphasis(children=[Text(content="b")])]),
                ThematicBreak(),
            ]
        )
        assert _record_walk(doc) == [
            ("Document", True),
            ("Paragraph", True),
            ("Text", True),
            ("Emphasis", True),
            ("Text", True),
            ("Emphasis", False),
            ("Paragraph", False),
            ("ThematicBreak", True),
            ("Document", False),
        ]

    def test_empty_container(self) -> None:
        """Test that an empty container still gets both calls."""
        assert _record_walk(Paragraph()) == [("Paragraph", True), ("Paragraph", False)]

    def test_leaf_root(self) -> None:
        """Test walking a leaf as the root."""
        assert _record_walk(Text(content="x")) == [("Text", True)]

    def test_deep_tree_does_not_recurse(self) -> None:
        """Test that very deep nesting is walked without hitting the recursion limit."""
        node = Text(content="deep")
        for _ in range(5000):
            node = Emphasis(children=[node])
        root = Paragraph(children=[node])
        seen = _record_walk(root)
        assert len(seen) == 2 + 2 * 5000 + 1


@pytest.mark.unit
class TestWalkStatus:
    """Tests for traversal control."""

    def test_skip_children_skips_children_and_leaving(self) -> None:
        """Test that SKIP_CHILDREN skips the subtree and the leaving call."""
        doc = Document(
            children=[
                Heading(level=1, children=[Text(content="skipped")]),
                Paragraph(children=[Text(content="kept")]),
            ]
        )

        def skip_headings(node, entering):
            return WalkStatus.SKIP_CHILDREN if isinstance(node, Heading) else WalkStatus.GO_TO_NEXT

        assert _record_walk(doc, skip_headings) == [
            ("Document", True),
            ("Heading", True),
            ("Paragraph", True),
            ("Text", True),
            ("Paragraph", False),
            ("Document", False),
        ]

    def test_terminate_stops_walk(self) -> None:
        """Test that TERMINATE stops the whole walk immediately."""
        doc = Document(
            children=[
                Paragraph(children=[Text(content="stop"), Text(content="never")]),
                Paragraph(children=[Text(content="never")]),
            ]
        )

        def stop_at_text(node, entering):
            return WalkStatus.TERMINATE if isinstance(node, Text) else WalkStatus.GO_TO_NEXT

        assert _record_walk(doc, stop_at_text) == [("Document", True), ("Paragraph", True), ("Text", True)]

    def test_terminate_on_leaving(self) -> None:
        """Test that TERMINATE returned from a leaving call stops the walk."""
        doc = Document(children=[Paragraph(), Paragraph()])

        def stop_after_first(node, entering):
            if isinstance(node, Paragraph) and not entering:
                return WalkStatus.TERMINATE
            return WalkStatus.GO_TO_NEXT

        assert _record_walk(doc, stop_after_first) == [
            ("Document", True),
            ("Paragraph", True),
            ("Paragraph", False),
        ]

    def test_skip_children_on_root(self) -> None:
        """Test that skipping the root yields a single call."""
        doc = Document(children=[Paragraph()])
        assert _record_walk(doc, lambda n, e: WalkStatus.SKIP_CHILDREN) == [("Document", True)]


@pytest.mark.unit
class TestNodeVisitor:
    """Tests for the NodeVisitor base class."""

    def test_incomplete_visitor_cannot_be_instantiated(self) -> None:
        """Test that a visitor missing visit methods is abstract."""

        class PartialVisitor(NodeVisitor):
            def visit_text(self, node, entering):
                return None

        with pytest.raises(TypeError):
            PartialVisitor()

    def test_generic_visit_raises(self) -> None:
        """Test that generic_visit reports the node kind as unsupported."""

        class Unknown:
            pass

        with pytest.raises(UnsupportedNodeError, match="Unknown node type: Unknown"):
            NodeVisitor.generic_visit(None, Unknown(), True)  # type: ignore[arg-type]


@pytest.mark.unit
class TestTreeIndex:
    """Tests for parent and sibling lookup through TreeIndex."""

    def test_parent_position_and_sibling(self) -> None:
        """Test lookups for nodes at several depths."""
        first = Text(content="a")
        second = Emphasis(children=[Text(content="b")])
        paragraph = Paragraph(children=[first, second])
        doc = Document(children=[paragraph])
        index = TreeIndex(doc)
        assert index.parent(first) is paragraph
        assert index.parent(paragraph) is doc
        assert index.position(second) == 1
        assert index.next_sibling(first) is second
        assert index.next_sibling(second) is None

    def test_root_and_unknown_nodes(self) -> None:
        """Test that the root and foreign nodes have no parent or sibling."""
        doc = Document(children=[Paragraph()])
        index = TreeIndex(doc)
        stranger = Paragraph()
        assert index.parent(doc) is None
        assert index.parent(stranger) is None
        assert index.position(stranger) == -1
        assert index.next_sibling(stranger) is None

    def test_appended_children(self) -> None:
        """Test a tree whose children were appended after construction."""
        doc = Document()
        first, second = Paragraph(), Paragraph()
        doc.children.append(first)
        doc.children.append(second)
        index = TreeIndex(doc)
        assert index.parent(second) is doc
        assert index.next_sibling(first) is second

    def test_deep_copy(self) -> None:
        """Test that an index over a deep copy points at the copied nodes."""
        doc = Document(children=[Paragraph(), Paragraph()])
        clone = copy.deepcopy(doc)
        index = TreeIndex(clone)
        assert index.next_sibling(clone.children[0]) is clone.children[1]
        assert index.next_sibling(doc.children[0]) is None

    def test_footnote_bodies_are_indexed(self) -> None:
        """Test that footnote bodies owned by links are reachable."""
        note_text = Paragraph(children=[Text(content="n")])
        body = ListItem(children=[note_text, Paragraph()])
        link = Link(note_id=1, footnote=body)
        index = TreeIndex(Document(children=[Paragraph(children=[link])]))
        assert index.parent(note_text) is body
        assert index.next_sibling(note_text) is body.children[1]

    def test_index_reflects_construction_time(self) -> None:
        """Test that later mutations are not seen by an existing index."""
        doc = Document(children=[Paragraph()])
        index = TreeIndex(doc)
        added = Paragraph()
        doc.children.append(added)
        assert index.next_sibling(doc.children[0]) is None
        assert index.parent(added) is None
