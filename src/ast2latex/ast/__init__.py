#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ast2latex/ast/__init__.py
"""Abstract Syntax Tree (AST) module for parsed Markdown documents.

This module provides the document tree consumed by the LaTeX renderer. A
Markdown parser (outside this package) produces the tree; the renderer only
reads it. The module consists of several components:

- nodes: AST node classes representing document structure
- visitors: Tree walking with entering/leaving visits and the visitor base class
- serialization: JSON serialization and deserialization of AST structures
- builder: Helper classes for constructing tables, definition lists and footnotes

Examples
--------
Basic usage:

    >>> from ast2latex.ast import Document, Heading, Paragraph, Text
    >>> from ast2latex.renderers.latex import LatexRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, children=[Text(content="Title")]),
    ...     Paragraph(children=[Text(content="Hello world")])
    ... ])
    >>> latex = LatexRenderer().render_to_string(doc)

"""

from __future__ import annotations

from ast2latex.ast.builder import DefinitionListBuilder, DocumentBuilder, TableBuilder
from ast2latex.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    ContainerMixin,
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
from ast2latex.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from ast2latex.ast.visitors import NodeVisitor, TreeIndex, WalkCallback, WalkStatus, walk

__all__ = [
    # Nodes
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
    # Traversal
    "WalkStatus",
    "WalkCallback",
    "walk",
    "TreeIndex",
    "NodeVisitor",
    # Builders
    "TableBuilder",
    "DefinitionListBuilder",
    "DocumentBuilder",
    # Serialization
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
