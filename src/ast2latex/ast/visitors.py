#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ast2latex/ast/visitors.py
"""Visitor pattern and tree walking for AST traversal.

This module provides the traversal primitives used by renderers:

- ``walk()`` performs a depth-first walk that reports each container twice
  (entering and leaving) and each leaf once, steered by the ``WalkStatus``
  returned from the callback.
- ``NodeVisitor`` declares one abstract ``visit_*`` method per node kind, so a
  visitor that forgets a kind cannot be instantiated.
- ``TreeIndex`` maps every node to its parent and position, the lookup
  renderers use for sibling and parent questions during a walk.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Iterator

from ast2latex.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableBody,
    TableCell,
    TableHead,
    TableRow,
    Text,
    ThematicBreak,
)
from ast2latex.exceptions import UnsupportedNodeError


class WalkStatus(Enum):
    """Traversal instruction returned by walk callbacks.

    Attributes
    ----------
    GO_TO_NEXT
        Continue into the children (or on to the next node)
    SKIP_CHILDREN
        Do not visit the children of the node being entered, nor its leaving call
    TERMINATE
        Stop the whole walk immediately

    """

    GO_TO_NEXT = "go_to_next"
    SKIP_CHILDREN = "skip_children"
    TERMINATE = "terminate"


WalkCallback = Callable[[Node, bool], WalkStatus]

_EXHAUSTED: Any = object()


def walk(root: Node, callback: WalkCallback) -> None:
    """Walk the tree rooted at ``root`` depth-first.

    Containers receive ``callback(node, True)`` before their children and
    ``callback(node, False)`` after them. Leaves receive a single
    ``callback(node, True)``. The walk is iterative and handles trees of
    any depth.

    Parameters
    ----------
    root : Node
        Node to start from; it is visited like any other node
    callback : callable
        Function ``(node, entering) -> WalkStatus``

    Examples
    --------
        >>> from ast2latex.ast import Paragraph, Text
        >>> seen = []
        >>> def record(node, entering):
        ...     seen.append((type(node).__name__, entering))
        ...     return WalkStatus.GO_TO_NEXT
        >>> walk(Paragraph(children=[Text(content="hi")]), record)
        >>> seen
        [('Paragraph', True), ('Text', True), ('Paragraph', False)]

    """
    status = callback(root, True)
    if status is WalkStatus.TERMINATE:
        return
    if not root.is_container or status is WalkStatus.SKIP_CHILDREN:
        return

    stack: list[tuple[Node, Iterator[Node]]] = [(root, iter(_children(root)))]
    while stack:
        parent, pending = stack[-1]
        child = next(pending, _EXHAUSTED)
        if child is _EXHAUSTED:
            stack.pop()
            if callback(parent, False) is WalkStatus.TERMINATE:
                return
            continue

        status = callback(child, True)
        if status is WalkStatus.TERMINATE:
            return
        if child.is_container and status is not WalkStatus.SKIP_CHILDREN:
            stack.append((child, iter(_children(child))))


def _children(node: Node) -> list[Node]:
    return getattr(node, "children", [])


class TreeIndex:
    """Parent and position lookup for every node reachable from a root.

    The index is built from the ``children`` lists as they are at
    construction time, so it stays correct for trees that were deep-copied
    or assembled by appending to ``children`` directly, where the weak
    parent links stored on the nodes are stale or missing. Footnote bodies
    owned by links are indexed too. Lookups are O(1).

    Parameters
    ----------
    root : Node
        Root of the tree to index; the root itself has no parent

    Examples
    --------
        >>> from ast2latex.ast import Document, Paragraph
        >>> first, second = Paragraph(), Paragraph()
        >>> index = TreeIndex(Document(children=[first, second]))
        >>> index.next_sibling(first) is second
        True

    """

    def __init__(self, root: Node) -> None:
        """Index ``root`` and all of its descendants."""
        self._entries: dict[int, tuple[Node, int]] = {}
        seen: set[int] = set()
        pending: list[Node] = [root]
        while pending:
            node = pending.pop()
            if id(node) in seen:
                continue
            seen.add(id(node))
            for position, child in enumerate(_children(node)):
                self._entries[id(child)] = (node, position)
                if isinstance(child, Node):
                    pending.append(child)
            footnote = getattr(node, "footnote", None)
            if isinstance(footnote, Node):
                pending.append(footnote)

    def parent(self, node: Node) -> Node | None:
        """Return the container holding ``node``, or None for the root or unknown nodes."""
        entry = self._entries.get(id(node))
        return entry[0] if entry is not None else None

    def position(self, node: Node) -> int:
        """Return the index of ``node`` in its parent's children, or -1 if it has no parent."""
        entry = self._entries.get(id(node))
        return entry[1] if entry is not None else -1

    def next_sibling(self, node: Node) -> Node | None:
        """Return the node following ``node`` under the same parent."""
        entry = self._entries.get(id(node))
        if entry is None:
            return None
        parent, position = entry
        siblings = _children(parent)
        return siblings[position + 1] if position + 1 < len(siblings) else None


class NodeVisitor(ABC):
    """Abstract base class for direction-aware AST visitors.

    Each ``visit_*`` method receives the node and the traversal direction
    and returns a ``WalkStatus``. Leaf nodes are only ever visited with
    ``entering=True``.

    Examples
    --------
    Visitors are usually driven by ``walk()``:

        >>> walk(document, lambda node, entering: node.accept(visitor, entering))

    """

    def generic_visit(self, node: Node, entering: bool) -> Any:
        """Handle a node whose kind has no dedicated visit method.

        Raises
        ------
        UnsupportedNodeError
            Always; the node set is closed

        """
        raise UnsupportedNodeError(type(node).__name__)

    @abstractmethod
    def visit_document(self, node: Document, entering: bool) -> Any:
        """Visit a Document node."""

    @abstractmethod
    def visit_heading(self, node: Heading, entering: bool) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph, entering: bool) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock, entering: bool) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote, entering: bool) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_list(self, node: List, entering: bool) -> Any:
        """Visit a List node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem, entering: bool) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_table(self, node: Table, entering: bool) -> Any:
        """Visit a Table node."""

    @abstractmethod
    def visit_table_head(self, node: TableHead, entering: bool) -> Any:
        """Visit a TableHead node."""

    @abstractmethod
    def visit_table_body(self, node: TableBody, entering: bool) -> Any:
        """Visit a TableBody node."""

    @abstractmethod
    def visit_table_row(self, node: TableRow, entering: bool) -> Any:
        """Visit a TableRow node."""

    @abstractmethod
    def visit_table_cell(self, node: TableCell, entering: bool) -> Any:
        """Visit a TableCell node."""

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak, entering: bool) -> Any:
        """Visit a ThematicBreak node."""

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock, entering: bool) -> Any:
        """Visit an HTMLBlock node."""

    @abstractmethod
    def visit_text(self, node: Text, entering: bool) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_emphasis(self, node: Emphasis, entering: bool) -> Any:
        """Visit an Emphasis node."""

    @abstractmethod
    def visit_strong(self, node: Strong, entering: bool) -> Any:
        """Visit a Strong node."""

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough, entering: bool) -> Any:
        """Visit a Strikethrough node."""

    @abstractmethod
    def visit_code(self, node: Code, entering: bool) -> Any:
        """Visit a Code node."""

    @abstractmethod
    def visit_link(self, node: Link, entering: bool) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_image(self, node: Image, entering: bool) -> Any:
        """Visit an Image node."""

    @abstractmethod
    def visit_line_break(self, node: LineBreak, entering: bool) -> Any:
        """Visit a LineBreak node."""

    @abstractmethod
    def visit_html_inline(self, node: HTMLInline, entering: bool) -> Any:
        """Visit an HTMLInline node."""


__all__ = ["WalkStatus", "WalkCallback", "walk", "TreeIndex", "NodeVisitor"]
