#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ast2latex/cli.py
"""Command-line interface for ast2latex.

Reads a Markdown document tree serialized as AST JSON (see
``ast2latex.ast.serialization``) and writes the LaTeX rendering to a file
or to standard output.

Examples
--------
Render a fragment to stdout::

    ast2latex document.json

Render a complete document::

    ast2latex document.json -o document.tex --mode full --author "Jane Doe" --languages english,french

Read the tree from standard input::

    cat document.json | ast2latex - --no-footnotes

"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import Any

from ast2latex import __version__
from ast2latex.ast.nodes import Document
from ast2latex.ast.serialization import json_to_ast
from ast2latex.constants import (
    DEFAULT_LATEX_INLINE_MATH_MARKER,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    SUPPORTED_EXTENSIONS,
)
from ast2latex.exceptions import OutputWriteError, ParsingError, RenderingError, ValidationError
from ast2latex.logging_utils import configure_logging
from ast2latex.options.latex import LatexRendererOptions
from ast2latex.renderers.latex import LatexRenderer
from ast2latex.utils.io_utils import read_text_input

logger = logging.getLogger(__name__)

_OPTION_FIELDS = {f.name: f for f in dataclasses.fields(LatexRendererOptions)}


def _field_help(name: str) -> str:
    return _OPTION_FIELDS[name].metadata.get("help", "")


def _field_choices(name: str) -> list[str]:
    return list(_OPTION_FIELDS[name].metadata.get("choices", []))


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Help texts and choices come from the ``LatexRendererOptions`` field
    metadata, so the CLI stays in sync with the options class.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="ast2latex",
        description="Render a Markdown document tree (AST JSON) to LaTeX.",
    )
    parser.add_argument("input", help="AST JSON file to render, or '-' to read from stdin")
    parser.add_argument("-o", "--out", dest="output", help="Output .tex file (default: stdout)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    latex_group = parser.add_argument_group("LaTeX options")
    latex_group.add_argument(
        "--mode",
        dest="document_mode",
        choices=_field_choices("document_mode"),
        default="fragment",
        help=_field_help("document_mode"),
    )
    latex_group.add_argument("--document-class", default="article", help=_field_help("document_class"))
    latex_group.add_argument("--author", default="", help=_field_help("author"))
    latex_group.add_argument(
        "--languages", dest="babel_languages", default="", help=_field_help("babel_languages")
    )
    for extension in sorted(SUPPORTED_EXTENSIONS):
        flag = extension.replace("_", "-")
        latex_group.add_argument(
            f"--no-{flag}",
            dest=f"no_{extension}",
            action="store_true",
            help=f"Treat the {extension} Markdown extension as inactive",
        )
    latex_group.add_argument(
        "--no-paragraph-indent",
        dest="paragraph_indent",
        action="store_false",
        help="Set \\parindent=0pt in the preamble",
    )
    latex_group.add_argument(
        "--escape-mode",
        choices=_field_choices("escape_mode"),
        default="smart_quotes",
        help=_field_help("escape_mode"),
    )
    latex_group.add_argument(
        "--soft-break",
        choices=_field_choices("soft_break"),
        default="ignore",
        help=_field_help("soft_break"),
    )
    latex_group.add_argument(
        "--inline-math-marker",
        default=DEFAULT_LATEX_INLINE_MATH_MARKER,
        help=_field_help("inline_math_marker"),
    )
    latex_group.add_argument("--strict", dest="strict_mode", action="store_true", help=_field_help("strict_mode"))

    log_group = parser.add_argument_group("Logging")
    log_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    log_group.add_argument("--log-file", help="Also write log output to this file")
    log_group.add_argument("--verbose", action="store_true", help="Enable debug logging")
    log_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_options(parsed_args: argparse.Namespace) -> LatexRendererOptions:
    """Build renderer options from parsed arguments.

    Raises
    ------
    ValueError
        If the resulting options are invalid

    """
    extensions = frozenset(ext for ext in SUPPORTED_EXTENSIONS if not getattr(parsed_args, f"no_{ext}"))
    kwargs: dict[str, Any] = {
        "document_mode": parsed_args.document_mode,
        "document_class": parsed_args.document_class,
        "author": parsed_args.author,
        "babel_languages": parsed_args.babel_languages,
        "extensions": extensions,
        "paragraph_indent": parsed_args.paragraph_indent,
        "escape_mode": parsed_args.escape_mode,
        "soft_break": parsed_args.soft_break,
        "inline_math_marker": parsed_args.inline_math_marker,
        "strict_mode": parsed_args.strict_mode,
    }
    return LatexRendererOptions(**kwargs)


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    # Checked before RenderingError, which it subclasses
    if isinstance(exception, (OutputWriteError, OSError)):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def main(args: list[str] | None = None) -> int:
    """Execute the CLI.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments (defaults to ``sys.argv[1:]``)

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        options = build_options(parsed_args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        ast_json = read_text_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        document = json_to_ast(ast_json)
        if not isinstance(document, Document):
            raise ParsingError(
                f"Top-level node must be a Document, got {type(document).__name__}", parsing_stage="json"
            )

        renderer = LatexRenderer(options)
        if parsed_args.output:
            renderer.render(document, parsed_args.output)
            logger.info("Wrote %s", parsed_args.output)
        else:
            sys.stdout.write(renderer.render_to_string(document))
    except (ParsingError, RenderingError, ValidationError, OSError) as e:
        logger.debug("Rendering failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
