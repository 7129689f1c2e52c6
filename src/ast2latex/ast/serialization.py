#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ast2latex/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

This module converts AST structures to and from JSON so that trees produced
by an external Markdown parser can be persisted and fed to the renderer
(the command-line interface reads this format).

The JSON format preserves:
- All node types and their attributes
- Node metadata
- Document structure and nesting, including footnote bodies owned by links

Examples
--------
Serialize AST to JSON:

    >>> from ast2latex.ast import Document, Heading, Text
    >>> from ast2latex.ast.serialization import ast_to_json
    >>> doc = Document(children=[
    ...     Heading(level=1, children=[Text(content="Title")])
    ... ])
    >>> json_str = ast_to_json(doc, indent=2)

Deserialize JSON back to AST:

    >>> from ast2latex.ast.serialization import json_to_ast
    >>> doc = json_to_ast(json_str)
    >>> doc.children[0].level
    1

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

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
from ast2latex.exceptions import ParsingError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

# Node types whose only structural field is ``children``
_CHILDREN_ONLY_TYPES: dict[str, type[Node]] = {
    "Document": Document,
    "Paragraph": Paragraph,
    "BlockQuote": BlockQuote,
    "Table": Table,
    "TableHead": TableHead,
    "TableBody": TableBody,
    "TableRow": TableRow,
    "Emphasis": Emphasis,
    "Strong": Strong,
    "Strikethrough": Strikethrough,
}

# Node types whose only structural field is a literal ``content`` string
_TEXT_CONTENT_TYPES: dict[str, type[Node]] = {
    "Text": Text,
    "Code": Code,
    "HTMLBlock": HTMLBlock,
    "HTMLInline": HTMLInline,
}


# ============================================================================
# Serialization
# ============================================================================


def _base_dict(node: Node) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": type(node).__name__}
    if node.metadata:
        result["metadata"] = node.metadata
    return result


def _serialize_children(node: Node) -> list[dict[str, Any]]:
    return [ast_to_dict(child) for child in getattr(node, "children", [])]


def _serialize_heading(node: Heading) -> dict[str, Any]:
    """Serialize a Heading node."""
    result = _base_dict(node)
    result["level"] = node.level
    if node.is_title_block:
        result["is_title_block"] = True
    result["children"] = _serialize_children(node)
    return result


def _serialize_code_block(node: CodeBlock) -> dict[str, Any]:
    """Serialize a CodeBlock node."""
    result = _base_dict(node)
    result["content"] = node.content
    if node.language is not None:
        result["language"] = node.language
    return result


def _serialize_list(node: List) -> dict[str, Any]:
    """Serialize a List node."""
    result = _base_dict(node)
    result.update(ordered=node.ordered, definition=node.definition, is_footnotes_list=node.is_footnotes_list)
    result["children"] = _serialize_children(node)
    return result


def _serialize_list_item(node: ListItem) -> dict[str, Any]:
    """Serialize a ListItem node."""
    result = _base_dict(node)
    result.update(term=node.term, definition=node.definition)
    result["children"] = _serialize_children(node)
    return result


def _serialize_table_cell(node: TableCell) -> dict[str, Any]:
    """Serialize a TableCell node."""
    result = _base_dict(node)
    result.update(alignment=node.alignment, is_header=node.is_header)
    result["children"] = _serialize_children(node)
    return result


def _serialize_link(node: Link) -> dict[str, Any]:
    """Serialize a Link node, including an owned footnote body."""
    result = _base_dict(node)
    result["url"] = node.url
    if node.title is not None:
        result["title"] = node.title
    if node.note_id:
        result["note_id"] = node.note_id
    if node.footnote is not None:
        result["footnote"] = ast_to_dict(node.footnote)
    result["children"] = _serialize_children(node)
    return result


def _serialize_image(node: Image) -> dict[str, Any]:
    """Serialize an Image node."""
    result = _base_dict(node)
    result["url"] = node.url
    if node.title is not None:
        result["title"] = node.title
    result["children"] = _serialize_children(node)
    return result


def _serialize_line_break(node: LineBreak) -> dict[str, Any]:
    """Serialize a LineBreak node."""
    result = _base_dict(node)
    result["soft"] = node.soft
    return result


_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Heading: _serialize_heading,
    CodeBlock: _serialize_code_block,
    List: _serialize_list,
    ListItem: _serialize_list_item,
    TableCell: _serialize_table_cell,
    Link: _serialize_link,
    Image: _serialize_image,
    LineBreak: _serialize_line_break,
    ThematicBreak: _base_dict,
}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Parameters
    ----------
    node : Node
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node type is not part of the AST node set

    """
    node_class = type(node)
    serializer = _SERIALIZATION_DISPATCH.get(node_class)
    if serializer:
        return serializer(node)

    node_type = node_class.__name__
    if _CHILDREN_ONLY_TYPES.get(node_type) is node_class:
        result = _base_dict(node)
        result["children"] = _serialize_children(node)
        return result
    if _TEXT_CONTENT_TYPES.get(node_type) is node_class:
        result = _base_dict(node)
        result["content"] = node.content  # type: ignore[attr-defined]
        return result

    raise ValueError(f"Unknown node type for serialization: {node_type}")


# ============================================================================
# Deserialization
# ============================================================================


_MISSING: Any = object()

_TYPE_NAMES = {str: "string", int: "integer", bool: "boolean", list: "array", dict: "object", type(None): "null"}


def _field(data: dict[str, Any], key: str, expected: tuple[type, ...], default: Any = _MISSING) -> Any:
    """Return ``data[key]`` after checking it against the JSON types in ``expected``.

    Parameters
    ----------
    data : dict
        Node dictionary
    key : str
        Field name
    expected : tuple of type
        Accepted Python types; ``type(None)`` allows null
    default : Any, optional
        Value used when the field is absent; without it the field is required

    Returns
    -------
    Any
        The field value or the default

    Raises
    ------
    ParsingError
        If a required field is missing or the value has the wrong type

    """
    if key not in data:
        if default is _MISSING:
            raise ParsingError(
                f"{data.get('node_type')} node is missing required field '{key}'",
                parsing_stage="deserialize",
            )
        return default

    value = data[key]
    # bool is a subclass of int; integer fields must not accept true/false
    type_ok = isinstance(value, expected) and not (isinstance(value, bool) and bool not in expected)
    if not type_ok:
        expected_names = " or ".join(_TYPE_NAMES.get(t, t.__name__) for t in expected)
        actual_name = _TYPE_NAMES.get(type(value), type(value).__name__)
        raise ParsingError(
            f"{data.get('node_type')} field '{key}' must be {expected_names}, got {actual_name}",
            parsing_stage="deserialize",
        )
    return value


def _metadata(data: dict[str, Any]) -> dict[str, Any]:
    return _field(data, "metadata", (dict,), {})


def _deserialize_children(data: dict[str, Any]) -> list[Node]:
    return [dict_to_ast(child) for child in _field(data, "children", (list,), [])]


def _deserialize_heading(data: dict[str, Any]) -> Heading:
    """Deserialize Heading node."""
    level = _field(data, "level", (int,))
    try:
        return Heading(
            level=level,
            children=_deserialize_children(data),
            is_title_block=_field(data, "is_title_block", (bool,), False),
            metadata=_metadata(data),
        )
    except ValueError as e:
        raise ParsingError(str(e), parsing_stage="deserialize", original_error=e) from e


def _deserialize_code_block(data: dict[str, Any]) -> CodeBlock:
    """Deserialize CodeBlock node."""
    return CodeBlock(
        content=_field(data, "content", (str,)),
        language=_field(data, "language", (str, type(None)), None),
        metadata=_metadata(data),
    )


def _deserialize_list(data: dict[str, Any]) -> List:
    """Deserialize List node."""
    return List(
        children=_deserialize_children(data),
        ordered=_field(data, "ordered", (bool,), False),
        definition=_field(data, "definition", (bool,), False),
        is_footnotes_list=_field(data, "is_footnotes_list", (bool,), False),
        metadata=_metadata(data),
    )


def _deserialize_list_item(data: dict[str, Any]) -> ListItem:
    """Deserialize ListItem node."""
    return ListItem(
        children=_deserialize_children(data),
        term=_field(data, "term", (bool,), False),
        definition=_field(data, "definition", (bool,), False),
        metadata=_metadata(data),
    )


def _deserialize_table_cell(data: dict[str, Any]) -> TableCell:
    """Deserialize TableCell node."""
    alignment = data.get("alignment")
    if alignment not in (None, "left", "center", "right"):
        raise ParsingError(f"Invalid table cell alignment: {alignment!r}", parsing_stage="deserialize")
    return TableCell(
        children=_deserialize_children(data),
        alignment=alignment,
        is_header=_field(data, "is_header", (bool,), False),
        metadata=_metadata(data),
    )


def _deserialize_link(data: dict[str, Any]) -> Link:
    """Deserialize Link node."""
    footnote_data = _field(data, "footnote", (dict, type(None)), None)
    return Link(
        url=_field(data, "url", (str,), ""),
        children=_deserialize_children(data),
        title=_field(data, "title", (str, type(None)), None),
        note_id=_field(data, "note_id", (int,), 0),
        footnote=dict_to_ast(footnote_data) if footnote_data else None,
        metadata=_metadata(data),
    )


def _deserialize_image(data: dict[str, Any]) -> Image:
    """Deserialize Image node."""
    return Image(
        url=_field(data, "url", (str,)),
        children=_deserialize_children(data),
        title=_field(data, "title", (str, type(None)), None),
        metadata=_metadata(data),
    )


def _deserialize_line_break(data: dict[str, Any]) -> LineBreak:
    """Deserialize LineBreak node."""
    return LineBreak(soft=_field(data, "soft", (bool,), False), metadata=_metadata(data))


def _deserialize_thematic_break(data: dict[str, Any]) -> ThematicBreak:
    """Deserialize ThematicBreak node."""
    return ThematicBreak(metadata=_metadata(data))


_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any]], Node]] = {
    "Heading": _deserialize_heading,
    "CodeBlock": _deserialize_code_block,
    "List": _deserialize_list,
    "ListItem": _deserialize_list_item,
    "TableCell": _deserialize_table_cell,
    "Link": _deserialize_link,
    "Image": _deserialize_image,
    "LineBreak": _deserialize_line_break,
    "ThematicBreak": _deserialize_thematic_break,
}


def dict_to_ast(data: dict[str, Any]) -> Node:
    """Convert a dictionary representation back to an AST node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ParsingError
        If the dictionary has no or an unknown ``node_type``, or misses a
        required field

    Examples
    --------
    >>> node = dict_to_ast({"node_type": "Text", "content": "Hello"})
    >>> node.content
    'Hello'

    """
    if not isinstance(data, dict):
        raise ParsingError(f"Expected a node object, got {type(data).__name__}", parsing_stage="deserialize")

    node_type = data.get("node_type")
    if not node_type or not isinstance(node_type, str):
        raise ParsingError("Dictionary must contain a string 'node_type' field", parsing_stage="deserialize")

    deserializer = _DESERIALIZATION_DISPATCH.get(node_type)
    if deserializer:
        return deserializer(data)

    if node_type in _CHILDREN_ONLY_TYPES:
        return _CHILDREN_ONLY_TYPES[node_type](  # type: ignore[call-arg]
            children=_deserialize_children(data), metadata=_metadata(data)
        )
    if node_type in _TEXT_CONTENT_TYPES:
        return _TEXT_CONTENT_TYPES[node_type](  # type: ignore[call-arg]
            content=_field(data, "content", (str,)), metadata=_metadata(data)
        )

    raise ParsingError(f"Unknown node type: {node_type}", parsing_stage="deserialize")


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string of the form ``{"schema_version": 1, "node_type": ...}``

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str) -> Node:
    """Deserialize a JSON string to an AST node.

    A missing ``schema_version`` is treated as version 1.

    Parameters
    ----------
    json_str : str
        JSON string representation

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ParsingError
        If the JSON is malformed, has an unsupported schema version or
        describes an invalid tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid AST JSON: {e}", parsing_stage="json", original_error=e) from e

    if not isinstance(data, dict):
        raise ParsingError("AST JSON must contain an object at the top level", parsing_stage="json")

    schema_version = data.pop("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        raise ParsingError(
            f"Unsupported schema version: {schema_version}. "
            f"This version of ast2latex supports schema version {SCHEMA_VERSION} only.",
            parsing_stage="json",
        )

    node = dict_to_ast(data)
    logger.debug("Loaded %s tree from JSON", type(node).__name__)
    return node


__all__ = [
    "SCHEMA_VERSION",
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
