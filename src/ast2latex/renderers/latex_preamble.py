#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ast2latex/renderers/latex_preamble.py
r"""Document header and footer for full-document LaTeX output.

The header loads a fixed package set (fonts, Unicode mappings, listings,
graphics, hyperlinks), configures the listing style, and optionally adds
babel languages, the title block, the table of contents and the list of
figures. The footer closes the ``document`` environment.

A chapter-titled fragment uses ``build_chapter_title`` instead of the
header, emitting only a ``\chapter{...}`` line.
"""

from __future__ import annotations

from ast2latex.options.latex import LatexRendererOptions

_PACKAGES = r"""
\usepackage[utf8]{inputenc}
\usepackage[T1]{fontenc}
\usepackage{lmodern}
\usepackage{marvosym}
\usepackage{textcomp}
\DeclareUnicodeCharacter{20AC}{\EUR{}}
\DeclareUnicodeCharacter{2260}{\neq}
\DeclareUnicodeCharacter{2264}{\leq}
\DeclareUnicodeCharacter{2265}{\geq}
\DeclareUnicodeCharacter{22C5}{\cdot}
\DeclareUnicodeCharacter{A0}{~}
\DeclareUnicodeCharacter{B1}{\pm}
\DeclareUnicodeCharacter{D7}{\times}

\usepackage{amsmath}
\usepackage[export]{adjustbox} % loads also graphicx
\usepackage{listings}
\usepackage{xcolor}
\usepackage[margin=1in]{geometry}
\usepackage{verbatim}
\usepackage[normalem]{ulem}
\usepackage{hyperref}
"""

# Listing style; ``literate`` maps accented letters that listings cannot typeset directly.
_LISTING_STYLE = r"""
\lstset{
    numbers=left,
    breaklines=true,
    xleftmargin=2\baselineskip,
    showstringspaces=false,
    basicstyle=\ttfamily,
    keywordstyle=\bfseries\color{green!40!black},
    commentstyle=\itshape\color{purple!40!black},
    stringstyle=\color{orange},
    numberstyle=\ttfamily,
    literate=
    {á}{{\'a}}1 {é}{{\'e}}1 {í}{{\'i}}1 {ó}{{\'o}}1 {ú}{{\'u}}1
    {Á}{{\'A}}1 {É}{{\'E}}1 {Í}{{\'I}}1 {Ó}{{\'O}}1 {Ú}{{\'U}}1
    {à}{{\`a}}1 {è}{{\`e}}1 {ì}{{\`i}}1 {ò}{{\`o}}1 {ù}{{\`u}}1
    {À}{{\`A}}1 {È}{{\`E}}1 {Ì}{{\`I}}1 {Ò}{{\`O}}1 {Ù}{{\`U}}1
    {ä}{{\"a}}1 {ë}{{\"e}}1 {ï}{{\"i}}1 {ö}{{\"o}}1 {ü}{{\"u}}1
    {Ä}{{\"A}}1 {Ë}{{\"E}}1 {Ï}{{\"I}}1 {Ö}{{\"O}}1 {Ü}{{\"U}}1
    {â}{{\^a}}1 {ê}{{\^e}}1 {î}{{\^i}}1 {ô}{{\^o}}1 {û}{{\^u}}1
    {Â}{{\^A}}1 {Ê}{{\^E}}1 {Î}{{\^I}}1 {Ô}{{\^O}}1 {Û}{{\^U}}1
    {œ}{{\oe}}1 {Œ}{{\OE}}1 {æ}{{\ae}}1 {Æ}{{\AE}}1 {ß}{{\ss}}1
    {ű}{{\H{u}}}1 {Ű}{{\H{U}}}1 {ő}{{\H{o}}}1 {Ő}{{\H{O}}}1
    {ç}{{\c c}}1 {Ç}{{\c C}}1 {ø}{{\o}}1 {å}{{\r a}}1 {Å}{{\r A}}1
    {€}{{\EUR}}1 {£}{{\pounds}}1
}
"""

_HYPERSETUP_OPEN = r"""\usepackage{csquotes}

\hypersetup{colorlinks,
    citecolor=black,
    filecolor=black,
    linkcolor=black,
    linktoc=page,
    urlcolor=black,
    pdfstartview=FitH,
    breaklinks=true,
"""

_LAYOUT_COMMANDS = r"""
\newcommand{\HRule}{\rule{\linewidth}{0.5mm}}
\addtolength{\parskip}{0.5\baselineskip}
"""

_TOC_BLOCK = r"""\vfill
\thispagestyle{empty}

\tableofcontents
"""


def build_document_header(options: LatexRendererOptions, title: str, has_figures: bool) -> str:
    r"""Build the LaTeX preamble and the start of the document body.

    Parameters
    ----------
    options : LatexRendererOptions
        Supplies the document class, author, babel languages, creator,
        paragraph indentation and the ``toc`` extension flag
    title : str
        Rendered title; empty suppresses ``\title``, ``\author``,
        ``\maketitle`` and the table of contents
    has_figures : bool
        Whether a list of figures follows the table of contents

    Returns
    -------
    str
        Everything up to and including ``\begin{document}`` plus the title
        page, followed by a blank line

    """
    parts = [f"\\documentclass{{{options.document_class}}}\n", _PACKAGES, _LISTING_STYLE]

    if options.babel_languages:
        parts.append(f"\n\\usepackage[{options.babel_languages}]{{babel}}\n")

    parts.append(_HYPERSETUP_OPEN)
    parts.append(f"    pdfauthor={{{options.author}}},\n")
    if options.creator:
        parts.append(f"    pdfcreator={{{options.creator}}},\n")
    parts.append("}\n")
    parts.append(_LAYOUT_COMMANDS)

    if not options.paragraph_indent:
        parts.append("\\parindent=0pt\n")

    if title:
        parts.append(f"\n\\title{{{title}}}\n\\author{{{options.author}}}\n")

    parts.append("\n\\begin{document}\n")

    if title:
        parts.append("\n\\maketitle\n")
        if options.has_extension("toc"):
            parts.append(_TOC_BLOCK)
            if has_figures:
                parts.append("\\listoffigures\n")
            parts.append("\\clearpage\n")

    parts.append("\n\n")
    return "".join(parts)


def build_document_footer() -> str:
    """Build the closing of a full document."""
    return "\\end{document}\n"


def build_chapter_title(title: str) -> str:
    r"""Build the ``\chapter`` line for a chapter-titled fragment.

    Returns an empty string when the title is blank.
    """
    if not title.strip():
        return ""
    return f"\\chapter{{{title}}}\n\n"


__all__ = ["build_document_header", "build_document_footer", "build_chapter_title"]
