#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ast2latex/ast/nodes.py
"""AST node classes for parsed Markdown documents.

This module defines the closed node hierarchy a Markdown parser hands to the
renderer. Each node represents a structural or inline element of the document.

The node hierarchy is designed to:
- Mirror the node kinds produced by common Markdown parsers (CommonMark plus
  tables, strikethrough, definition lists, footnotes and title blocks)
- Support read-only navigation through parent and next-sibling references
- Enable rendering via the visitor pattern, one visitor method per node kind

Node Hierarchy
--------------
Container nodes hold an ordered ``children`` list:
    - Document, Heading, Paragraph, BlockQuote, List, ListItem
    - Emphasis, Strong, Strikethrough, Link, Image
    - Table, TableHead, TableBody, TableRow, TableCell

Leaf nodes hold a literal ``content`` string (or nothing):
    - Text, Code, CodeBlock, HTMLBlock, HTMLInline
    - ThematicBreak, LineBreak

Back-references
---------------
Containers link their children when constructed. ``node.parent`` resolves a
weak reference, so a child never keeps its parent alive, and
``node.next_sibling`` is looked up in the parent's child list by identity.
These links are set only by the constructors: children appended to
``children`` later have no parent, and a ``copy.deepcopy`` keeps links to the
original tree. Code that walks a whole tree should use
:class:`ast2latex.ast.visitors.TreeIndex` instead.

"""

from __future__ import annotations

import weakref
from abc import ABC
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from ast2latex.constants import Alignment


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]
    is_container: ClassVar[bool] = False
    _parent_ref: Optional[weakref.ReferenceType[Node]] = None

    @property
    def parent(self) -> Optional[Node]:
        """Return the containing node, or None for a root or detached node."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def next_sibling(self) -> Optional[Node]:
        """Return the node following this one under the same parent."""
        parent = self.parent
        if parent is None:
            return None
        siblings: list[Node] = getattr(parent, "children", [])
        for index, sibling in enumerate(siblings):
            if sibling is self:
                return siblings[index + 1] if index + 1 < len(siblings) else None
        return None

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Accept a visitor for processing this node.

        Node kinds outside the known set are routed to ``generic_visit``.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods
        entering : bool, default = True
            True when the node is first reached, False after its children

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        return visitor.generic_visit(self, entering)


class ContainerMixin:
    """Mixin linking ``children`` back to their parent container."""

    children: list[Node]
    is_container: ClassVar[bool] = True

    def __post_init__(self) -> None:
        """Link children to this container."""
        self._link_children()

    def _link_children(self) -> None:
        parent_ref = weakref.ref(self)
        for child in self.children:
            child._parent_ref = parent_ref  # type: ignore[assignment]

    def append(self, child: Node) -> None:
        """Append a child node and link it to this container.

        Parameters
        ----------
        child : Node
            Node to append

        """
        self.children.append(child)
        child._parent_ref = weakref.ref(self)  # type: ignore[assignment]


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(ContainerMixin, Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self, entering)


@dataclass
class Heading(ContainerMixin, Node):
    """Heading node (h1-h6).

    A heading flagged as a title block carries document-level title
    metadata instead of in-body section content.

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    children : list of Node, default = empty list
        Inline nodes representing heading text
    is_title_block : bool, default = False
        Whether this heading is the document title block
    metadata : dict, default = empty dict
        Heading metadata

    """

    level: int
    children: list[Node] = field(default_factory=list)
    is_title_block: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")
        self._link_children()

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self, entering)


@dataclass
class Paragraph(ContainerMixin, Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline nodes representing paragraph content
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self, entering)


@dataclass
class CodeBlock(Node):
    """Fenced or indented code block.

    Parameters
    ----------
    content : str
        Code content, verbatim
    language : str or None, default = None
        Info string of the fence; only its first word is used as the language
    metadata : dict, default = empty dict
        Code block metadata

    """

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self, entering)


@dataclass
class BlockQuote(ContainerMixin, Node):
    """Block quote containing block-level children.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes inside the quote
    metadata : dict, default = empty dict
        Block quote metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_block_quote``."""
        return visitor.visit_block_quote(self, entering)


@dataclass
class List(ContainerMixin, Node):
    """List node (bulleted, ordered or definition list).

    Parameters
    ----------
    children : list of ListItem, default = empty list
        Items of the list
    ordered : bool, default = False
        True for numbered lists
    definition : bool, default = False
        True for definition lists (term/description items)
    is_footnotes_list : bool, default = False
        True for the synthetic list collecting all footnote bodies
    metadata : dict, default = empty dict
        List metadata

    """

    children: list[Node] = field(default_factory=list)
    ordered: bool = False
    definition: bool = False
    is_footnotes_list: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self, entering)


@dataclass
class ListItem(ContainerMixin, Node):
    """Item of a List.

    Inside a definition list, an item is either a term (``term=True``) or a
    description (``definition=True``).

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level content of the item
    term : bool, default = False
        True for the term of a definition list entry
    definition : bool, default = False
        True for the description of a definition list entry
    metadata : dict, default = empty dict
        List item metadata

    """

    children: list[Node] = field(default_factory=list)
    term: bool = False
    definition: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self, entering)


@dataclass
class Table(ContainerMixin, Node):
    """Table node holding a TableHead and a TableBody.

    Parameters
    ----------
    children : list of Node, default = empty list
        TableHead and TableBody nodes
    metadata : dict, default = empty dict
        Table metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_table``."""
        return visitor.visit_table(self, entering)


@dataclass
class TableHead(ContainerMixin, Node):
    """Header section of a table, containing TableRow nodes."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_table_head``."""
        return visitor.visit_table_head(self, entering)


@dataclass
class TableBody(ContainerMixin, Node):
    """Body section of a table, containing TableRow nodes."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_table_body``."""
        return visitor.visit_table_body(self, entering)


@dataclass
class TableRow(ContainerMixin, Node):
    """Row of a table, containing TableCell nodes."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_table_row``."""
        return visitor.visit_table_row(self, entering)


@dataclass
class TableCell(ContainerMixin, Node):
    """Table cell with inline content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline nodes in the cell
    alignment : {"left", "center", "right"} or None, default = None
        Column alignment declared for this cell; unset renders as left
    is_header : bool, default = False
        True for cells of the header row
    metadata : dict, default = empty dict
        Cell metadata

    """

    children: list[Node] = field(default_factory=list)
    alignment: Optional[Alignment] = None
    is_header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_table_cell``."""
        return visitor.visit_table_cell(self, entering)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_thematic_break``."""
        return visitor.visit_thematic_break(self, entering)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block.

    Parameters
    ----------
    content : str
        Raw HTML source
    metadata : dict, default = empty dict
        HTML block metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_html_block``."""
        return visitor.visit_html_block(self, entering)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text run.

    Parameters
    ----------
    content : str
        Raw, unescaped text
    metadata : dict, default = empty dict
        Text metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self, entering)


@dataclass
class Emphasis(ContainerMixin, Node):
    """Emphasized (italic) inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_emphasis``."""
        return visitor.visit_emphasis(self, entering)


@dataclass
class Strong(ContainerMixin, Node):
    """Strong (bold) inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_strong``."""
        return visitor.visit_strong(self, entering)


@dataclass
class Strikethrough(ContainerMixin, Node):
    """Struck-through inline content."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_strikethrough``."""
        return visitor.visit_strikethrough(self, entering)


@dataclass
class Code(Node):
    """Inline code span.

    Parameters
    ----------
    content : str
        Code literal, verbatim
    metadata : dict, default = empty dict
        Code metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_code``."""
        return visitor.visit_code(self, entering)


@dataclass
class Link(ContainerMixin, Node):
    """Hyperlink or footnote reference.

    A link with a nonzero ``note_id`` is a footnote reference; its
    ``footnote`` node owns the footnote body and is not one of the link's
    children.

    Parameters
    ----------
    url : str
        Link destination
    children : list of Node, default = empty list
        Inline nodes for the link text
    title : str or None, default = None
        Optional link title
    note_id : int, default = 0
        Footnote number, 0 for ordinary links
    footnote : Node or None, default = None
        Footnote body (typically a ListItem) for footnote references
    metadata : dict, default = empty dict
        Link metadata

    """

    url: str = ""
    children: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    note_id: int = 0
    footnote: Optional[Node] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def is_footnote_reference(self) -> bool:
        """Return True when this link references a footnote."""
        return self.note_id != 0

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self, entering)


@dataclass
class Image(ContainerMixin, Node):
    """Image reference.

    Parameters
    ----------
    url : str
        Image path or URL
    children : list of Node, default = empty list
        Alternative text nodes (never rendered)
    title : str or None, default = None
        Image title, rendered as the figure caption
    metadata : dict, default = empty dict
        Image metadata

    """

    url: str = ""
    children: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self, entering)


@dataclass
class LineBreak(Node):
    """Line break node.

    Parameters
    ----------
    soft : bool, default = False
        True for soft breaks (newline in source), False for hard breaks
    metadata : dict, default = empty dict
        Line break metadata

    """

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_line_break``."""
        return visitor.visit_line_break(self, entering)


@dataclass
class HTMLInline(Node):
    """Raw inline HTML span."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, entering: bool = True) -> Any:
        """Dispatch to ``visitor.visit_html_inline``."""
        return visitor.visit_html_inline(self, entering)


__all__ = [
    "Node",
    "ContainerMixin",
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "List",
    "ListItem",
    "Table",
    "TableHead",
    "TableBody",
    "TableRow",
    "TableCell",
    "ThematicBreak",
    "HTMLBlock",
    "Text",
    "Emphasis",
    "Strong",
    "Strikethrough",
    "Code",
    "Link",
    "Image",
    "LineBreak",
    "HTMLInline",
]
