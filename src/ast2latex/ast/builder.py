#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ast2latex/ast/builder.py
"""Builder helper classes for constructing AST structures.

Parsers and tests rarely want to spell out the full node structure of a
table, a definition list or a footnote by hand. These builders handle the
bookkeeping (head/body sections, header and alignment flags, term/description
flags, footnote numbering and the synthetic footnote list) so that callers
only provide content.

"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from ast2latex.ast.nodes import (
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    HTMLBlock,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Table,
    TableBody,
    TableCell,
    TableHead,
    TableRow,
    Text,
    ThematicBreak,
)
from ast2latex.constants import Alignment

CellContent = Union[str, Sequence[Node]]


def _inline(content: CellContent) -> list[Node]:
    if isinstance(content, str):
        return [Text(content=content)]
    return list(content)


class TableBuilder:
    """Helper for building tables with a header row and body rows.

    Parameters
    ----------
    alignments : sequence of {"left", "center", "right", None}, optional
        Per-column alignment, applied to every cell of that column

    Examples
    --------
        >>> table = (TableBuilder(alignments=["left", "right"])
        ...     .set_header(["Name", "Qty"])
        ...     .add_row(["Apples", "3"])
        ...     .get_table())

    """

    def __init__(self, alignments: Optional[Sequence[Optional[Alignment]]] = None) -> None:
        """Initialize the builder with optional column alignments."""
        self.alignments: list[Optional[Alignment]] = list(alignments or [])
        self.header: Optional[TableRow] = None
        self.rows: list[TableRow] = []

    def _alignment_for(self, column: int) -> Optional[Alignment]:
        if column < len(self.alignments):
            return self.alignments[column]
        return None

    def _build_row(self, cells: Sequence[CellContent], is_header: bool) -> TableRow:
        return TableRow(
            children=[
                TableCell(children=_inline(cell), alignment=self._alignment_for(index), is_header=is_header)
                for index, cell in enumerate(cells)
            ]
        )

    def set_header(self, cells: Sequence[CellContent]) -> TableBuilder:
        """Set the header row.

        Parameters
        ----------
        cells : sequence of str or sequence of Node lists
            Header cell contents

        Returns
        -------
        TableBuilder
            Self for method chaining

        """
        self.header = self._build_row(cells, is_header=True)
        return self

    def add_row(self, cells: Sequence[CellContent]) -> TableBuilder:
        """Append a body row.

        Parameters
        ----------
        cells : sequence of str or sequence of Node lists
            Body cell contents

        Returns
        -------
        TableBuilder
            Self for method chaining

        """
        self.rows.append(self._build_row(cells, is_header=False))
        return self

    def get_table(self) -> Table:
        """Build the Table node.

        Returns
        -------
        Table
            Table with a TableHead (when a header was set) and a TableBody

        """
        sections: list[Node] = []
        if self.header is not None:
            sections.append(TableHead(children=[self.header]))
        sections.append(TableBody(children=list(self.rows)))
        return Table(children=sections)


class DefinitionListBuilder:
    """Helper for building definition lists.

    Each term becomes a ``ListItem(term=True)`` holding one paragraph, each
    description a ``ListItem(definition=True)`` holding block content.

    Examples
    --------
        >>> dl = (DefinitionListBuilder()
        ...     .add_term([Text(content="Term")])
        ...     .add_description([Paragraph(children=[Text(content="Desc")])])
        ...     .get_list())

    """

    def __init__(self) -> None:
        """Initialize an empty definition list."""
        self.items: list[Node] = []

    def add_term(self, content: CellContent) -> DefinitionListBuilder:
        """Append a term.

        Returns
        -------
        DefinitionListBuilder
            Self for method chaining

        """
        self.items.append(ListItem(children=[Paragraph(children=_inline(content))], term=True))
        return self

    def add_description(self, children: Union[str, Sequence[Node]]) -> DefinitionListBuilder:
        """Append a description for the preceding term.

        Parameters
        ----------
        children : str or sequence of Node
            Block-level content; a string becomes a single paragraph

        Returns
        -------
        DefinitionListBuilder
            Self for method chaining

        """
        if isinstance(children, str):
            blocks: list[Node] = [Paragraph(children=[Text(content=children)])]
        else:
            blocks = list(children)
        self.items.append(ListItem(children=blocks, definition=True))
        return self

    def get_list(self) -> List:
        """Build the definition List node."""
        return List(children=list(self.items), definition=True)


class DocumentBuilder:
    """Helper for building complete documents.

    This class provides a fluent interface for constructing documents with
    multiple block-level elements. Footnotes created with ``footnote()`` are
    collected into the synthetic footnote list appended by ``get_document()``.

    Examples
    --------
    Basic usage:

        >>> doc = (DocumentBuilder()
        ...     .add_title_block([Text(content="My Document")])
        ...     .add_heading(1, [Text(content="Introduction")])
        ...     .add_paragraph([Text(content="Hello")])
        ...     .get_document())

    Footnotes:

        >>> builder = DocumentBuilder()
        >>> ref = builder.footnote([Text(content="A note.")])
        >>> builder.add_paragraph([Text(content="Claim"), ref])
        >>> doc = builder.get_document()

    """

    def __init__(self) -> None:
        """Initialize the document builder with an empty children list."""
        self.children: list[Node] = []
        self.footnotes: list[ListItem] = []

    def add_node(self, node: Node) -> DocumentBuilder:
        """Add a block-level node to the document.

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        """
        self.children.append(node)
        return self

    def add_nodes(self, nodes: Sequence[Node]) -> DocumentBuilder:
        """Add several block-level nodes in order."""
        self.children.extend(nodes)
        return self

    def add_title_block(self, content: CellContent, level: int = 1) -> DocumentBuilder:
        """Add the document title block.

        Parameters
        ----------
        content : str or sequence of Node
            Inline title content
        level : int, default = 1
            Heading level recorded on the title block

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        """
        self.children.append(Heading(level=level, children=_inline(content), is_title_block=True))
        return self

    def add_heading(self, level: int, content: CellContent) -> DocumentBuilder:
        """Add a heading.

        Parameters
        ----------
        level : int
            Heading level (1-6)
        content : str or sequence of Node
            Inline content

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        """
        self.children.append(Heading(level=level, children=_inline(content)))
        return self

    def add_paragraph(self, content: CellContent) -> DocumentBuilder:
        """Add a paragraph of inline content."""
        self.children.append(Paragraph(children=_inline(content)))
        return self

    def add_code_block(self, content: str, language: str | None = None) -> DocumentBuilder:
        """Add a code block.

        Parameters
        ----------
        content : str
            Code content
        language : str or None, default = None
            Info string of the fence

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        """
        self.children.append(CodeBlock(content=content, language=language))
        return self

    def add_thematic_break(self) -> DocumentBuilder:
        """Add a horizontal rule."""
        self.children.append(ThematicBreak())
        return self

    def add_block_quote(self, children: Sequence[Node]) -> DocumentBuilder:
        """Add a block quote around block-level children."""
        self.children.append(BlockQuote(children=list(children)))
        return self

    def add_html_block(self, content: str) -> DocumentBuilder:
        """Add a raw HTML block."""
        self.children.append(HTMLBlock(content=content))
        return self

    def add_list(self, items: Sequence[Union[ListItem, CellContent]], ordered: bool = False) -> DocumentBuilder:
        """Add a bulleted or ordered list.

        Parameters
        ----------
        items : sequence of ListItem, str or Node sequences
            List items; plain content is wrapped into a single paragraph
        ordered : bool, default = False
            True for a numbered list

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        """
        list_items: list[Node] = []
        for item in items:
            if isinstance(item, ListItem):
                list_items.append(item)
            else:
                list_items.append(ListItem(children=[Paragraph(children=_inline(item))]))
        self.children.append(List(children=list_items, ordered=ordered))
        return self

    def add_definition_list(self, entries: Sequence[tuple[CellContent, Union[str, Sequence[Node]]]]) -> DocumentBuilder:
        """Add a definition list from (term, description) pairs.

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        """
        builder = DefinitionListBuilder()
        for term, description in entries:
            builder.add_term(term).add_description(description)
        self.children.append(builder.get_list())
        return self

    def add_table(self, table: Union[Table, TableBuilder]) -> DocumentBuilder:
        """Add a table, built or still in a TableBuilder."""
        if isinstance(table, TableBuilder):
            table = table.get_table()
        self.children.append(table)
        return self

    def footnote(self, content: Union[str, Sequence[Node]]) -> Link:
        """Create a footnote and return the reference link to place inline.

        Parameters
        ----------
        content : str or sequence of Node
            Inline content of the footnote body

        Returns
        -------
        Link
            Footnote reference carrying the next note number

        """
        note_id = len(self.footnotes) + 1
        body = ListItem(children=[Paragraph(children=_inline(content))])
        self.footnotes.append(body)
        return Link(
            url=f"#fn:{note_id}",
            children=[Text(content=str(note_id))],
            note_id=note_id,
            footnote=body,
        )

    def get_document(self) -> Document:
        """Build the Document node.

        Returns
        -------
        Document
            Document with all added nodes, followed by the footnote list
            when footnotes were created

        """
        children = list(self.children)
        if self.footnotes:
            children.append(List(children=list(self.footnotes), ordered=True, is_footnotes_list=True))
        return Document(children=children)


__all__ = ["TableBuilder", "DefinitionListBuilder", "DocumentBuilder"]
