#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for ast2latex renderers.

Options are frozen dataclasses: validated once on construction and copied
with ``create_updated()`` when a variant is needed.
"""

from __future__ import annotations

from ast2latex.options.base import BaseRendererOptions, CloneFrozenMixin
from ast2latex.options.latex import LatexRendererOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseRendererOptions",
    "LatexRendererOptions",
]
