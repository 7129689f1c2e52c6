#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ast2latex/renderers/latex.py
"""LaTeX rendering from AST.

This module provides the LatexRenderer class which converts a parsed
Markdown document tree to LaTeX text. Rendering is driven by ``walk()``:
every container node is dispatched once when entered and once when left,
every leaf once, and each ``visit_*`` method appends its LaTeX fragment to
the output buffer and may steer the walk with a ``WalkStatus``.

Before the main walk two read-only pre-passes run: one renders the title
block (if any) and one checks whether any image carries a caption, which
decides whether a list of figures is added after the table of contents.

"""

from __future__ import annotations

import logging
import posixpath
from pathlib import Path
from typing import IO, Optional, Union

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
from ast2latex.ast.visitors import NodeVisitor, TreeIndex, WalkStatus, walk
from ast2latex.constants import (
    CELL_ALIGNMENT_LETTERS,
    DELIMITER_ERROR_TOKEN,
    HEADING_COMMANDS,
    HEADING_LINE_BREAK_LEVELS,
    INCLUDEGRAPHICS_OPTIONS,
    REMOTE_IMAGE_PREFIXES,
)
from ast2latex.exceptions import DelimiterError, UnsupportedNodeError
from ast2latex.options.latex import LatexRendererOptions
from ast2latex.renderers.base import BaseRenderer, CapturedOutputMixin
from ast2latex.renderers.latex_preamble import build_chapter_title, build_document_footer, build_document_header
from ast2latex.utils.escape import LatexEscaper, escape_latex, select_inline_delimiter

logger = logging.getLogger(__name__)

_SOFT_BREAK_OUTPUT = {"ignore": "", "space": " ", "newline": "\n"}


def has_figures(document: Node) -> bool:
    """Return True if any image in the tree carries a caption.

    The walk stops at the first captioned image.

    Parameters
    ----------
    document : Node
        Root of the tree to scan

    Returns
    -------
    bool
        Whether a list of figures would have entries

    """
    found = False

    def _scan(node: Node, entering: bool) -> WalkStatus:
        nonlocal found
        if isinstance(node, Image) and node.title:
            found = True
            return WalkStatus.TERMINATE
        return WalkStatus.GO_TO_NEXT

    walk(document, _scan)
    return found


def find_title_block(document: Node) -> Optional[Heading]:
    """Return the first heading flagged as the title block, if any."""
    title_block: Optional[Heading] = None

    def _scan(node: Node, entering: bool) -> WalkStatus:
        nonlocal title_block
        if entering and isinstance(node, Heading) and node.is_title_block:
            title_block = node
            return WalkStatus.TERMINATE
        return WalkStatus.GO_TO_NEXT

    walk(document, _scan)
    return title_block


class LatexRenderer(NodeVisitor, CapturedOutputMixin, BaseRenderer):
    r"""Render AST nodes to LaTeX text.

    One renderer instance holds one output buffer, one quote state and one
    parent index of the tree being rendered, so an instance must not be
    shared between concurrent renders. All of them are reset at the start of
    ``render_to_string``. Parent and sibling questions go through the index
    rather than the weak parent links on the nodes.

    Parameters
    ----------
    options : LatexRendererOptions or None, default = None
        LaTeX rendering options

    Examples
    --------
    Basic usage:

        >>> from ast2latex.ast import Document, Heading, Paragraph, Text
        >>> from ast2latex.renderers.latex import LatexRenderer
        >>> doc = Document(children=[
        ...     Heading(level=1, children=[Text(content="Title")]),
        ...     Paragraph(children=[Text(content="Body")]),
        ... ])
        >>> print(LatexRenderer().render_to_string(doc))
        \section{Title}
        Body
        <BLANKLINE>

    Complete document:

        >>> options = LatexRendererOptions(document_mode="full", author="Jane Doe")
        >>> latex = LatexRenderer(options).render_to_string(doc)

    """

    def __init__(self, options: LatexRendererOptions | None = None):
        """Initialize the LaTeX renderer with options."""
        BaseRenderer._validate_options_type(options, LatexRendererOptions, "latex")
        options = options or LatexRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: LatexRendererOptions = options
        self._output: list[str] = []
        self._escaper = LatexEscaper(options.escape_mode)
        self._index = TreeIndex(Document())

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to a LaTeX string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            LaTeX text

        Raises
        ------
        UnsupportedNodeError
            If the tree contains a node kind the renderer does not know
        DelimiterError
            In strict mode, if an inline code span cannot be delimited

        """
        self._output = []
        self._escaper.reset()
        self._index = TreeIndex(document)

        mode = self.options.document_mode
        logger.debug("Rendering %s to LaTeX (mode=%s)", type(document).__name__, mode)

        title = ""
        if self.options.has_extension("title_block"):
            title = self.extract_title(document)
            if title:
                logger.debug("Found title block: %r", title)

        if mode == "full":
            self._output.append(build_document_header(self.options, title, has_figures(document)))
        elif mode == "chapter":
            self._output.append(build_chapter_title(title))

        walk(document, self._render_body_node)

        if mode == "full":
            self._output.append(build_document_footer())

        return "".join(self._output)

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render AST to LaTeX and write to output.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        """
        latex_text = self.render_to_string(doc)
        self.write_text_output(latex_text, output)

    def extract_title(self, document: Node) -> str:
        """Render the content of the document's title block.

        The title block subtree is rendered by a separate renderer with the
        same options, so inline formatting in the title is kept as LaTeX.

        Parameters
        ----------
        document : Node
            Root of the tree to search

        Returns
        -------
        str
            The rendered title, or an empty string if there is no title block

        """
        title_block = find_title_block(document)
        if title_block is None:
            return ""
        title_renderer = LatexRenderer(self.options)
        title_renderer._index = TreeIndex(title_block)
        walk(title_block, title_renderer.render_node)
        return "".join(title_renderer._output)

    def render_node(self, node: Node, entering: bool) -> WalkStatus:
        """Dispatch one node in one traversal direction.

        Parameters
        ----------
        node : Node
            Node being visited
        entering : bool
            True on the way down, False after the node's children

        Returns
        -------
        WalkStatus
            How the walk continues

        Raises
        ------
        UnsupportedNodeError
            If ``node`` is not a known node kind

        """
        if not isinstance(node, Node):
            raise UnsupportedNodeError(type(node).__name__)
        status = node.accept(self, entering)
        return WalkStatus.GO_TO_NEXT if status is None else status

    def _render_body_node(self, node: Node, entering: bool) -> WalkStatus:
        # The title block is rendered by the title pre-pass only
        if isinstance(node, Heading) and node.is_title_block:
            return WalkStatus.SKIP_CHILDREN
        return self.render_node(node, entering)

    def _environment(self, name: str, entering: bool) -> None:
        if entering:
            self._output.append(f"\\begin{{{name}}}\n")
        else:
            self._output.append(f"\\end{{{name}}}\n\n")

    def _command(self, name: str, entering: bool) -> None:
        self._output.append(f"\\{name}{{" if entering else "}")

    def _column_spec(self, table: Table) -> str:
        """Build the tabular column spec from the cells of the first row."""
        letters: list[str] = []

        def _scan(node: Node, entering: bool) -> WalkStatus:
            if entering and isinstance(node, TableCell):
                row = self._index.parent(node)
                cells = getattr(row, "children", [node])[max(self._index.position(node), 0):]
                for cell in cells:
                    letters.append(CELL_ALIGNMENT_LETTERS.get(getattr(cell, "alignment", None), "l"))
                return WalkStatus.TERMINATE
            return WalkStatus.GO_TO_NEXT

        walk(table, _scan)
        return "".join(letters)

    def _render_footnote(self, link: Link) -> str:
        """Render the body owned by a footnote reference into a string."""
        footnote = link.footnote
        if footnote is None:
            return ""

        def _dispatch(node: Node, entering: bool) -> WalkStatus:
            # The footnote container itself produces no output
            if node is footnote:
                return WalkStatus.GO_TO_NEXT
            return self.render_node(node, entering)

        return self._render_captured(footnote, _dispatch)

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document, entering: bool) -> None:
        """Render a Document node (no output of its own)."""

    def visit_heading(self, node: Heading, entering: bool) -> None:
        r"""Render a Heading node as a sectioning command.

        Levels 1-5 map to ``\section`` ... ``\subparagraph`` and level 6 to
        ``\textbf``. Levels 1-3 end with a line break, deeper levels with a
        space. A title block emits nothing here; its children are still
        walked.

        """
        if node.is_title_block:
            return
        command = HEADING_COMMANDS[node.level]
        if entering:
            self._output.append(f"\\{command}{{")
        else:
            self._output.append("}\n" if node.level in HEADING_LINE_BREAK_LEVELS else "} ")

    def visit_paragraph(self, node: Paragraph, entering: bool) -> None:
        """Render a Paragraph node.

        Paragraphs only emit on leaving: one line break, plus a blank line
        unless the paragraph is the last child of its parent. The term of a
        definition list entry gets no line break at all.

        """
        if entering:
            return
        parent = self._index.parent(node)
        if isinstance(parent, ListItem) and parent.term:
            return
        self._output.append("\n")
        if self._index.next_sibling(node) is not None:
            self._output.append("\n")

    def visit_code_block(self, node: CodeBlock, entering: bool) -> None:
        """Render a CodeBlock node as a listing, or as display math for ``math``.

        Parameters
        ----------
        node : CodeBlock
            Code block to render
        entering : bool
            Always True for leaf nodes

        """
        words = (node.language or "").split()
        language = words[0] if words else ""

        content = node.content
        if content and not content.endswith("\n"):
            content += "\n"

        if language == "math":
            self._output.append(f"\\[\n{content}\\]\n\n")
            return

        options = f"[language={language}]" if language else ""
        self._output.append(f"\\begin{{lstlisting}}{options}\n{content}\\end{{lstlisting}}\n\n")

    def visit_block_quote(self, node: BlockQuote, entering: bool) -> None:
        """Render a BlockQuote node as a quotation environment."""
        self._environment("quotation", entering)

    def visit_list(self, node: List, entering: bool) -> Optional[WalkStatus]:
        """Render a List node as a description, enumerate or itemize environment.

        The synthetic footnote list is skipped entirely since footnote bodies
        are rendered at their reference.

        """
        if node.is_footnotes_list:
            logger.debug("Skipping footnote list with %d entries", len(node.children))
            return WalkStatus.SKIP_CHILDREN
        if node.definition:
            environment = "description"
        elif node.ordered:
            environment = "enumerate"
        else:
            environment = "itemize"
        self._environment(environment, entering)
        return None

    def visit_list_item(self, node: ListItem, entering: bool) -> None:
        """Render a ListItem node.

        Terms open ``\\item [`` and close with ``] ``; descriptions emit
        nothing; other items open with ``\\item ``.

        """
        if entering:
            if node.term:
                self._output.append("\\item [")
            elif not node.definition:
                self._output.append("\\item ")
        elif node.term:
            self._output.append("] ")

    def visit_table(self, node: Table, entering: bool) -> None:
        """Render a Table node as a centered tabular environment."""
        if entering:
            self._output.append(f"\\begin{{center}}\n\\begin{{tabular}}{{{self._column_spec(node)}}}\n")
        else:
            self._output.append("\\end{tabular}\n\\end{center}\n\n")

    def visit_table_head(self, node: TableHead, entering: bool) -> None:
        """Render a TableHead node; a rule separates it from the body."""
        if not entering:
            self._output.append("\\hline\n")

    def visit_table_body(self, node: TableBody, entering: bool) -> None:
        """Render a TableBody node (no output of its own)."""

    def visit_table_row(self, node: TableRow, entering: bool) -> None:
        """Render a TableRow node."""
        if not entering:
            self._output.append(" \\\\\n")

    def visit_table_cell(self, node: TableCell, entering: bool) -> None:
        """Render a TableCell node, bold for header cells."""
        if node.is_header:
            self._command("textbf", entering)
        if not entering and self._index.next_sibling(node) is not None:
            self._output.append(" & ")

    def visit_thematic_break(self, node: ThematicBreak, entering: bool) -> None:
        """Render a ThematicBreak node."""
        self._output.append("\\HRule{}\n")

    def visit_html_block(self, node: HTMLBlock, entering: bool) -> None:
        """Skip raw HTML, which has no LaTeX equivalent."""

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text, entering: bool) -> None:
        """Render a Text node through the escaper."""
        self._output.append(self._escaper.escape(node.content))

    def visit_emphasis(self, node: Emphasis, entering: bool) -> None:
        """Render an Emphasis node."""
        self._command("emph", entering)

    def visit_strong(self, node: Strong, entering: bool) -> None:
        """Render a Strong node."""
        self._command("textbf", entering)

    def visit_strikethrough(self, node: Strikethrough, entering: bool) -> None:
        """Render a Strikethrough node (ulem's ``\\sout``)."""
        self._command("sout", entering)

    def visit_code(self, node: Code, entering: bool) -> None:
        r"""Render a Code node.

        Code starting with the inline math marker becomes ``$...$``.
        Anything else becomes ``\lstinline`` bounded by the first character
        absent from the code. When every candidate character is present, a
        visible error token is written instead (or DelimiterError is raised
        in strict mode).

        Raises
        ------
        DelimiterError
            In strict mode, if no delimiter is available

        """
        content = node.content
        marker = self.options.inline_math_marker
        if marker and content.startswith(marker):
            self._output.append(f"${content[len(marker):]}$")
            return

        delimiter = select_inline_delimiter(content)
        if delimiter is None:
            if self.options.strict_mode:
                raise DelimiterError(content)
            logger.warning("No delimiter available for inline code of length %d", len(content))
            self._output.append(f"\\lstinline@{DELIMITER_ERROR_TOKEN}@")
            return
        self._output.append(f"\\lstinline{delimiter}{content}{delimiter}")

    def visit_link(self, node: Link, entering: bool) -> Optional[WalkStatus]:
        """Render a Link node as ``\\href``, or a footnote reference as ``\\footnote``.

        Footnote bodies are rendered in place; the link's own children are
        never visited. Without the footnotes extension, references emit
        nothing.

        """
        if node.is_footnote_reference:
            if entering and self.options.has_extension("footnotes"):
                self._output.append(f"\\footnote{{{self._render_footnote(node)}}}")
            else:
                logger.debug("Footnotes extension inactive, dropping reference %d", node.note_id)
            return WalkStatus.SKIP_CHILDREN

        if entering:
            self._output.append(f"\\href{{{node.url}}}{{")
        else:
            self._output.append("}")
        return None

    def visit_image(self, node: Image, entering: bool) -> WalkStatus:
        """Render an Image node.

        Remote images become ``\\url``. Local images are embedded centered,
        with the file extension dropped so LaTeX picks the best available
        format; a title turns the image into a captioned figure. Alternative
        text is never rendered.

        """
        url = node.url
        if url.lower().startswith(REMOTE_IMAGE_PREFIXES):
            self._output.append(f"\\url{{{url}}}")
            return WalkStatus.SKIP_CHILDREN

        if node.title:
            self._output.append("\\begin{figure}[!ht]\n")
        graphics_path = posixpath.splitext(url)[0]
        self._output.append(
            f"\\begin{{center}}\n\\includegraphics[{INCLUDEGRAPHICS_OPTIONS}]{{{graphics_path}}}\n\\end{{center}}\n"
        )
        if node.title:
            caption = escape_latex(node.title, self.options.escape_mode)
            self._output.append(f"\\caption{{{caption}}}\n\\end{{figure}}\n")
        return WalkStatus.SKIP_CHILDREN

    def visit_line_break(self, node: LineBreak, entering: bool) -> None:
        """Render a LineBreak node; soft breaks follow the ``soft_break`` option."""
        if node.soft:
            self._output.append(_SOFT_BREAK_OUTPUT[self.options.soft_break])
        else:
            self._output.append("~\\\\\n")

    def visit_html_inline(self, node: HTMLInline, entering: bool) -> None:
        """Skip inline HTML."""


__all__ = ["LatexRenderer", "has_figures", "find_title_block"]
