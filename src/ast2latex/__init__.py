"""ast2latex - Render parsed Markdown document trees as LaTeX.

ast2latex takes the abstract syntax tree produced by a Markdown parser and
emits LaTeX source: either a fragment for inclusion in a larger document, a
complete document with preamble, title page and table of contents, or a
fragment headed by a ``\\chapter`` title.

Key Features
------------
- Headings, emphasis, strikethrough, lists, definition lists, tables,
  block quotes, images and links mapped to standard LaTeX constructs
- Smart ``\\enquote`` quoting and escaping of LaTeX special characters
- Inline code via ``\\lstinline`` with automatic delimiter selection
- Footnotes rendered in place at their reference
- Inline and display math passthrough
- AST JSON input for the ``ast2latex`` command-line tool

Requirements
------------
- Python 3.10+

Examples
--------
Render a document tree:

    >>> from ast2latex import render_latex
    >>> from ast2latex.ast import DocumentBuilder, Emphasis, Text
    >>> doc = (DocumentBuilder()
    ...     .add_heading(1, "Section")
    ...     .add_paragraph([Text(content="Some "), Emphasis(children=[Text(content="Markdown")]), Text(content=" text.")])
    ...     .get_document())
    >>> print(render_latex(doc), end="")
    \\section{Section}
    Some \\emph{Markdown} text.

Complete document with options:

    >>> latex = render_latex(doc, document_mode="full", author="Jane Doe", babel_languages="english")

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

from typing import Any

from ast2latex.ast.nodes import Document
from ast2latex.exceptions import (
    Ast2LatexError,
    DelimiterError,
    InvalidOptionsError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    UnsupportedNodeError,
    ValidationError,
)
from ast2latex.options.latex import LatexRendererOptions
from ast2latex.renderers.latex import LatexRenderer

__version__ = "1.0.0"


def render_latex(document: Document, options: LatexRendererOptions | None = None, **kwargs: Any) -> str:
    """Render a document tree to LaTeX.

    Parameters
    ----------
    document : Document
        Root of the parsed Markdown tree
    options : LatexRendererOptions, optional
        Pre-configured options; defaults are used when omitted
    **kwargs : Any
        Individual option overrides applied on top of ``options``

    Returns
    -------
    str
        The LaTeX text

    Raises
    ------
    ValueError
        If an override produces invalid options
    RenderingError
        If the tree cannot be rendered

    """
    options = options or LatexRendererOptions()
    if kwargs:
        options = options.create_updated(**kwargs)
    return LatexRenderer(options).render_to_string(document)


__all__ = [
    "__version__",
    "render_latex",
    "LatexRenderer",
    "LatexRendererOptions",
    "Ast2LatexError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "UnsupportedNodeError",
    "DelimiterError",
    "OutputWriteError",
]
