#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the ast2latex library.

This module defines specialized exception classes for the error conditions
that can occur while loading document trees and rendering them to LaTeX.

Exception Hierarchy
-------------------
- Ast2LatexError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)

  - ParsingError (malformed serialized document trees)

  - RenderingError (output generation failures)
    - UnsupportedNodeError (node kind outside the closed node set)
    - DelimiterError (no usable inline code delimiter, strict mode only)
    - OutputWriteError (file write failures)

"""

from typing import Any


class Ast2LatexError(Exception):
    """Base exception class for all ast2latex-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Ast2LatexError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the renderer."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Ast2LatexError):
    """Exception raised when a serialized document tree cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Ast2LatexError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class UnsupportedNodeError(RenderingError):
    """Exception raised when a node outside the known node set reaches the renderer.

    This is an integration error between the tree producer and the renderer;
    it is never recovered from and the partial output is discarded.

    Parameters
    ----------
    node_type : str
        Name of the offending node type
    message : str, optional
        Custom error message

    """

    def __init__(self, node_type: str, message: str | None = None):
        """Initialize the unsupported node error."""
        if message is None:
            message = f"Unknown node type: {node_type}"
        super().__init__(message, rendering_stage="dispatch")
        self.node_type = node_type


class DelimiterError(RenderingError):
    """Exception raised when inline code uses every candidate delimiter character.

    Only raised in strict mode; otherwise the renderer emits a visible
    error token in place of the code span.

    Parameters
    ----------
    literal : str
        The inline code literal that could not be delimited

    """

    def __init__(self, literal: str, message: str | None = None):
        """Initialize the delimiter error."""
        if message is None:
            message = f"No delimiter available for inline code of length {len(literal)}"
        super().__init__(message, rendering_stage="inline_code")
        self.literal = literal


class OutputWriteError(RenderingError):
    """Exception raised when writing output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


__all__ = [
    "Ast2LatexError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "UnsupportedNodeError",
    "DelimiterError",
    "OutputWriteError",
]
