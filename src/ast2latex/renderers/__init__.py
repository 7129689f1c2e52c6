#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/ast2latex/renderers/__init__.py
"""AST renderers for converting Markdown document trees to LaTeX.

Available renderers:
- LatexRenderer: Render to LaTeX as a fragment, a complete document, or a
  fragment headed by a chapter title

Examples
--------
Render a tree to a LaTeX fragment:

    >>> from ast2latex.ast import Document, Paragraph, Text
    >>> from ast2latex.renderers import LatexRenderer
    >>> doc = Document(children=[Paragraph(children=[Text(content="Hello")])])
    >>> LatexRenderer().render_to_string(doc)
    'Hello\\n'

"""

from ast2latex.renderers.base import BaseRenderer, CapturedOutputMixin
from ast2latex.renderers.latex import LatexRenderer, find_title_block, has_figures
from ast2latex.renderers.latex_preamble import build_chapter_title, build_document_footer, build_document_header

__all__ = [
    "BaseRenderer",
    "CapturedOutputMixin",
    "LatexRenderer",
    "find_title_block",
    "has_figures",
    "build_document_header",
    "build_document_footer",
    "build_chapter_title",
]
