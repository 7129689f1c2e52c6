#  Copyright (c) 2025 Tom Villani, Ph.D.

# ast2latex/options/latex.py
"""Configuration options for LaTeX rendering.

This module defines options for rendering Markdown document trees as LaTeX.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ast2latex.constants import (
    DEFAULT_LATEX_AUTHOR,
    DEFAULT_LATEX_BABEL_LANGUAGES,
    DEFAULT_LATEX_DOCUMENT_CLASS,
    DEFAULT_LATEX_DOCUMENT_MODE,
    DEFAULT_LATEX_ESCAPE_MODE,
    DEFAULT_LATEX_EXTENSIONS,
    DEFAULT_LATEX_INLINE_MATH_MARKER,
    DEFAULT_LATEX_PARAGRAPH_INDENT,
    DEFAULT_LATEX_SOFT_BREAK,
    SUPPORTED_EXTENSIONS,
    DocumentMode,
    EscapeMode,
    SoftBreakMode,
)
from ast2latex.options.base import BaseRendererOptions

_DOCUMENT_MODES = ("fragment", "full", "chapter")
_ESCAPE_MODES = ("smart_quotes", "basic")
_SOFT_BREAK_MODES = ("ignore", "space", "newline")


@dataclass(frozen=True)
class LatexRendererOptions(BaseRendererOptions):
    r"""Configuration options for AST-to-LaTeX rendering.

    Parameters
    ----------
    document_mode : {"fragment", "full", "chapter"}, default "fragment"
        What to wrap around the rendered body:
        - "fragment": body only, for inclusion in a larger document
        - "full": complete document with preamble, title page and closing
        - "chapter": body preceded by a \chapter{} heading when a title was found
    document_class : str, default "article"
        LaTeX document class used in "full" mode.
    author : str, default ""
        Author inserted verbatim into the title block.
    babel_languages : str, default ""
        Comma-separated babel languages (e.g. "english,french"). Empty
        disables the babel directive.
    extensions : frozenset of {"footnotes", "title_block", "toc"}
        Markdown extensions considered active. Footnote references are only
        rendered with "footnotes", the title pre-pass only runs with
        "title_block", and the table of contents needs "toc".
    paragraph_indent : bool, default True
        When False, the preamble sets \parindent=0pt.
    escape_mode : {"smart_quotes", "basic"}, default "smart_quotes"
        "smart_quotes" pairs double quotes into \enquote{...}; "basic"
        passes them through.
    soft_break : {"ignore", "space", "newline"}, default "ignore"
        Output for soft line breaks.
    inline_math_marker : str, default "$$ "
        Inline code starting with this prefix is emitted as inline math
        with the prefix removed. Empty disables the detection.

    """

    document_mode: DocumentMode = field(
        default=DEFAULT_LATEX_DOCUMENT_MODE,
        metadata={
            "help": "Output wrapping: fragment (body only), full (complete document), "
            "chapter (body with a \\chapter title)",
            "choices": list(_DOCUMENT_MODES),
            "cli_name": "mode",
            "importance": "core",
        },
    )
    document_class: str = field(
        default=DEFAULT_LATEX_DOCUMENT_CLASS,
        metadata={"help": "LaTeX document class (article, report, book, etc.)", "type": str, "importance": "core"},
    )
    author: str = field(
        default=DEFAULT_LATEX_AUTHOR,
        metadata={"help": "Author for the title block", "type": str, "importance": "core"},
    )
    babel_languages: str = field(
        default=DEFAULT_LATEX_BABEL_LANGUAGES,
        metadata={
            "help": "Comma-separated babel languages, e.g. 'english,french'",
            "type": str,
            "cli_name": "languages",
            "importance": "core",
        },
    )
    extensions: frozenset[str] = field(
        default=DEFAULT_LATEX_EXTENSIONS,
        metadata={
            "help": "Active Markdown extensions (footnotes, title_block, toc)",
            "choices": sorted(SUPPORTED_EXTENSIONS),
            "importance": "advanced",
        },
    )
    paragraph_indent: bool = field(
        default=DEFAULT_LATEX_PARAGRAPH_INDENT,
        metadata={
            "help": "Indent the first line of paragraphs",
            "cli_name": "no-paragraph-indent",
            "importance": "advanced",
        },
    )
    escape_mode: EscapeMode = field(
        default=DEFAULT_LATEX_ESCAPE_MODE,
        metadata={
            "help": "Double quote handling: smart_quotes (\\enquote pairs) or basic (unchanged)",
            "choices": list(_ESCAPE_MODES),
            "importance": "advanced",
        },
    )
    soft_break: SoftBreakMode = field(
        default=DEFAULT_LATEX_SOFT_BREAK,
        metadata={
            "help": "Output for soft line breaks",
            "choices": list(_SOFT_BREAK_MODES),
            "importance": "advanced",
        },
    )
    inline_math_marker: str = field(
        default=DEFAULT_LATEX_INLINE_MATH_MARKER,
        metadata={
            "help": "Prefix marking inline code as inline math (empty disables)",
            "type": str,
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate choices and normalize the extension set.

        Raises
        ------
        ValueError
            If any field value is outside its valid choices.

        """
        super().__post_init__()

        if self.document_mode not in _DOCUMENT_MODES:
            raise ValueError(f"document_mode must be one of {_DOCUMENT_MODES}, got {self.document_mode!r}")
        if self.escape_mode not in _ESCAPE_MODES:
            raise ValueError(f"escape_mode must be one of {_ESCAPE_MODES}, got {self.escape_mode!r}")
        if self.soft_break not in _SOFT_BREAK_MODES:
            raise ValueError(f"soft_break must be one of {_SOFT_BREAK_MODES}, got {self.soft_break!r}")
        if not self.document_class:
            raise ValueError("document_class must not be empty")

        # Accept any iterable of names but store an immutable set
        extensions = frozenset(self.extensions)
        unknown = extensions - SUPPORTED_EXTENSIONS
        if unknown:
            raise ValueError(
                f"Unknown extensions: {', '.join(sorted(unknown))}. "
                f"Supported: {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
            )
        object.__setattr__(self, "extensions", extensions)

    def has_extension(self, name: str) -> bool:
        """Return True when the named Markdown extension is active."""
        return name in self.extensions


__all__ = ["LatexRendererOptions"]
