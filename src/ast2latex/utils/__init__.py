#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ast2latex/utils/__init__.py
"""Utility modules for the ast2latex package.

This package contains the LaTeX escaping helpers and the input/output
helpers shared by the renderer and the command-line interface.
"""

from ast2latex.utils.escape import LatexEscaper, escape_latex, select_inline_delimiter
from ast2latex.utils.io_utils import read_text_input, write_content

__all__ = [
    "LatexEscaper",
    "escape_latex",
    "select_inline_delimiter",
    "read_text_input",
    "write_content",
]
