#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the ast2latex library.

Constants are organized by category:
1. Type Definitions - Literal types shared by options and renderers
2. LaTeX Renderer Defaults - Default option values
3. Escaping and Delimiters - Character tables used by the escaper
4. Node Emission Tables - Heading commands and column alignments
5. CLI Exit Codes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

Alignment = Literal["left", "center", "right"]
DocumentMode = Literal["fragment", "full", "chapter"]
EscapeMode = Literal["smart_quotes", "basic"]
SoftBreakMode = Literal["ignore", "space", "newline"]
MarkdownExtension = Literal["footnotes", "title_block", "toc"]

# =============================================================================
# LaTeX Renderer Defaults
# =============================================================================

DEFAULT_CREATOR = "ast2latex"
DEFAULT_STRICT_MODE = False

DEFAULT_LATEX_DOCUMENT_MODE: DocumentMode = "fragment"
DEFAULT_LATEX_DOCUMENT_CLASS = "article"
DEFAULT_LATEX_AUTHOR = ""
DEFAULT_LATEX_BABEL_LANGUAGES = ""
DEFAULT_LATEX_PARAGRAPH_INDENT = True
DEFAULT_LATEX_ESCAPE_MODE: EscapeMode = "smart_quotes"
DEFAULT_LATEX_SOFT_BREAK: SoftBreakMode = "ignore"
DEFAULT_LATEX_INLINE_MATH_MARKER = "$$ "

SUPPORTED_EXTENSIONS: frozenset[str] = frozenset({"footnotes", "title_block", "toc"})
DEFAULT_LATEX_EXTENSIONS: frozenset[str] = SUPPORTED_EXTENSIONS

# =============================================================================
# Escaping and Delimiters
# =============================================================================

# Double quotes are handled separately by the escaper (open/close toggle).
LATEX_SPECIAL_CHARS: dict[str, str] = {
    "#": r"\#",
    "$": r"\$",
    "%": r"\%",
    "&": r"\&",
    "\\": r"\textbackslash{}",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
}

LATEX_QUOTE_OPEN = r"\enquote{"
LATEX_QUOTE_CLOSE = "}"

# Candidate bands for \lstinline delimiters. Space and '*' are never used.
DELIMITER_BANDS: tuple[tuple[int, int], ...] = ((ord("!"), ord("*")), (ord("+"), 128))
DELIMITER_ERROR_TOKEN = "<RENDERING ERROR: no delimiter found>"

# =============================================================================
# Node Emission Tables
# =============================================================================

HEADING_COMMANDS: dict[int, str] = {
    1: "section",
    2: "subsection",
    3: "subsubsection",
    4: "paragraph",
    5: "subparagraph",
    6: "textbf",
}

# Levels whose closing brace is followed by a line break instead of a space
HEADING_LINE_BREAK_LEVELS = frozenset({1, 2, 3})

CELL_ALIGNMENT_LETTERS: dict[Alignment | None, str] = {
    None: "l",
    "left": "l",
    "right": "r",
    "center": "c",
}

REMOTE_IMAGE_PREFIXES = ("http://", "https://")

INCLUDEGRAPHICS_OPTIONS = r"max width=\textwidth, max height=\textheight"

# =============================================================================
# CLI Exit Codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
