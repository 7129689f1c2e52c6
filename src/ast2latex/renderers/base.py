#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ast2latex/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that all AST renderers must
inherit from, and the output-capture mixin used by text renderers that need
to render part of a tree into a separate buffer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from ast2latex.ast.nodes import Document, Node
from ast2latex.ast.visitors import WalkCallback, walk
from ast2latex.exceptions import InvalidOptionsError, OutputWriteError
from ast2latex.options.base import BaseRendererOptions
from ast2latex.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class PlainRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "rendered output"
        ...
        ...     def render(self, doc, output):
        ...         self.write_text_output(self.render_to_string(doc), output)

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration.

        Parameters
        ----------
        options : BaseRendererOptions or None, default = None
            Format-specific rendering options. If None, default options will be used.

        """
        self.options = options

    @abstractmethod
    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST to the specified output.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination. Can be:
            - File path (str or Path)
            - File-like object in binary or text mode

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If output cannot be written

        """

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document as a string

        """

    def render_to_bytes(self, doc: Document) -> bytes:
        """Render the AST to UTF-8 encoded bytes.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        bytes
            Rendered document as bytes

        """
        return self.render_to_string(doc).encode("utf-8")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If a file path cannot be written
        TypeError
            If output type is not supported

        Examples
        --------
        Write to StringIO:

            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output(r"\\section{Hello}", buffer)
            >>> print(buffer.getvalue())
            \\section{Hello}

        """
        try:
            write_content(text, output)
        except OSError as e:
            raise OutputWriteError(str(output), original_error=e) from e


class CapturedOutputMixin:
    """Mixin for renderers that render a subtree into a separate buffer.

    The implementing class must have:
    - A ``_output`` attribute (list[str]) for accumulating output
    - A walk callback that appends to ``_output``

    """

    _output: list[str]

    def _render_captured(self, root: Node, callback: WalkCallback) -> str:
        """Walk ``root`` with ``callback`` and return what it appended.

        Parameters
        ----------
        root : Node
            Subtree to walk
        callback : callable
            Walk callback writing to ``self._output``

        Returns
        -------
        str
            Text produced by the walk; the main buffer is left untouched

        """
        saved_output = self._output
        self._output = []
        try:
            walk(root, callback)
            return "".join(self._output)
        finally:
            self._output = saved_output


__all__ = ["BaseRenderer", "CapturedOutputMixin"]
