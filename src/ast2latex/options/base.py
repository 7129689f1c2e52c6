#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ast2latex/options/base.py
"""Base classes for renderer options.

This module defines the foundation classes for the renderer options used
throughout ast2latex.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from ast2latex.constants import DEFAULT_CREATOR, DEFAULT_STRICT_MODE


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    strict_mode : bool, default=False
        Whether to raise RenderingError for degraded conditions (such as an
        inline code span with no usable delimiter). If False (default), a
        warning is logged and a visible error token is written instead.
    creator : str or None, default="ast2latex"
        Creator application name written to document metadata.
        Set to None to disable creator metadata.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    strict_mode: bool = field(
        default=DEFAULT_STRICT_MODE,
        metadata={
            "help": "Raise RenderingError on degraded output (e.g. undelimitable inline code) "
            "instead of logging warnings",
            "cli_name": "strict",
            "importance": "advanced",
        },
    )
    creator: str | None = field(
        default=DEFAULT_CREATOR,
        metadata={
            "help": "Creator application name for document metadata (e.g., 'ast2latex'). "
            "Set to None to disable creator metadata.",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate base renderer options.

        Raises
        ------
        ValueError
            If any field value is invalid.

        """
        if self.creator is not None and not isinstance(self.creator, str):
            raise ValueError(f"creator must be a string or None, got {type(self.creator).__name__}")


__all__ = ["CloneFrozenMixin", "BaseRendererOptions"]
