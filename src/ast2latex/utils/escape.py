#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ast2latex/utils/escape.py
"""LaTeX text escaping and inline code delimiter selection.

This module provides the character-level helpers used by the LaTeX renderer:

- ``LatexEscaper`` turns raw text into LaTeX-safe running text. In
  ``smart_quotes`` mode double quotes alternate between opening and closing
  an ``\\enquote{...}`` span, and that state carries over from one call to
  the next.
- ``select_inline_delimiter`` picks a character that can bound an
  ``\\lstinline`` argument without appearing inside it.

"""

from __future__ import annotations

import re
from typing import Optional

from ast2latex.constants import (
    DEFAULT_LATEX_ESCAPE_MODE,
    DELIMITER_BANDS,
    LATEX_QUOTE_CLOSE,
    LATEX_QUOTE_OPEN,
    LATEX_SPECIAL_CHARS,
    EscapeMode,
)

_SPECIAL_CHARS_RE = re.compile("[" + re.escape("".join(LATEX_SPECIAL_CHARS)) + "]")
_SPECIAL_CHARS_WITH_QUOTE_RE = re.compile("[" + re.escape("".join(LATEX_SPECIAL_CHARS) + '"') + "]")


class LatexEscaper:
    r"""Stateful escaper for LaTeX running text.

    Runs of ordinary characters are copied unchanged; each special
    character is replaced from ``LATEX_SPECIAL_CHARS``. Replacement text is
    never re-scanned.

    Parameters
    ----------
    mode : {"smart_quotes", "basic"}, default = "smart_quotes"
        ``smart_quotes`` turns double quotes into ``\enquote{`` / ``}``
        pairs; ``basic`` leaves them untouched

    Attributes
    ----------
    quoted : bool
        True while an ``\enquote`` span is open

    Examples
    --------
        >>> escaper = LatexEscaper()
        >>> escaper.escape('50% of "all" items')
        '50\\% of \\enquote{all} items'
        >>> escaper.escape('"open')
        '\\enquote{open'
        >>> escaper.escape('close"')
        'close}'

    """

    def __init__(self, mode: EscapeMode = DEFAULT_LATEX_ESCAPE_MODE) -> None:
        """Initialize the escaper outside of any quote span."""
        if mode not in ("smart_quotes", "basic"):
            raise ValueError(f"Invalid escape mode: {mode!r}. Must be 'smart_quotes' or 'basic'")
        self.mode = mode
        self.quoted = False
        self._pattern = _SPECIAL_CHARS_WITH_QUOTE_RE if mode == "smart_quotes" else _SPECIAL_CHARS_RE

    def reset(self) -> None:
        """Forget any open quote span."""
        self.quoted = False

    def _substitute(self, match: re.Match[str]) -> str:
        char = match.group(0)
        if char == '"':
            self.quoted = not self.quoted
            return LATEX_QUOTE_OPEN if self.quoted else LATEX_QUOTE_CLOSE
        return LATEX_SPECIAL_CHARS[char]

    def escape(self, text: str) -> str:
        """Escape ``text`` for use in LaTeX running text.

        Parameters
        ----------
        text : str
            Raw text

        Returns
        -------
        str
            LaTeX-safe text

        """
        if not text:
            return text
        return self._pattern.sub(self._substitute, text)


def escape_latex(text: str, mode: EscapeMode = DEFAULT_LATEX_ESCAPE_MODE) -> str:
    r"""Escape a single string with a fresh escaper.

    Quote pairing only spans this one call. Use a ``LatexEscaper`` to carry
    the quote state across several strings.

    Parameters
    ----------
    text : str
        Raw text
    mode : {"smart_quotes", "basic"}, default = "smart_quotes"
        Quote handling mode

    Returns
    -------
    str
        LaTeX-safe text

    Examples
    --------
        >>> escape_latex("C# & F_1")
        'C\\# \\& F\\_1'

    """
    return LatexEscaper(mode).escape(text)


def select_inline_delimiter(literal: str) -> Optional[str]:
    """Return the first ASCII character that does not occur in ``literal``.

    Candidates are ``!`` up to but excluding ``*``, then ``+`` up to DEL.
    Space and ``*`` are never chosen.

    Parameters
    ----------
    literal : str
        Inline code content

    Returns
    -------
    str or None
        The delimiter character, or None when every candidate is used

    Examples
    --------
        >>> select_inline_delimiter("a`b")
        '!'
        >>> select_inline_delimiter("!\\"#")
        '$'

    """
    present = set(literal)
    for start, stop in DELIMITER_BANDS:
        for code in range(start, stop):
            candidate = chr(code)
            if candidate not in present:
                return candidate
    return None


__all__ = ["LatexEscaper", "escape_latex", "select_inline_delimiter"]
