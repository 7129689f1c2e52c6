#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ast2latex/utils/io_utils.py
"""I/O utilities for reading document trees and writing rendered output.

Renderers write LaTeX to file paths or to text/binary streams; the CLI reads
serialized trees from a path or from standard input.

"""

from __future__ import annotations

import io
import sys
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

OutputDestination = Union[str, Path, IO[bytes], IO[str], None]

STDIN_MARKER = "-"


def _is_binary_stream(output: object) -> bool:
    """Detect whether a writable stream expects bytes."""
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, (StringIO, io.TextIOBase)):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: Union[str, bytes], output: OutputDestination) -> Union[StringIO, BytesIO, None]:
    """Write content to an output destination or return it as a file-like object.

    Parameters
    ----------
    content : str or bytes
        Rendered content
    output : str, Path, IO[bytes], IO[str], or None
        Output destination. Text is encoded as UTF-8 for binary targets and
        bytes are decoded as UTF-8 for text targets.

    Returns
    -------
    StringIO, BytesIO, or None
        A buffer holding the content when ``output`` is None, otherwise None

    Raises
    ------
    TypeError
        If the content or the output type is not supported

    Examples
    --------
        >>> write_content(r"\\emph{hi}", None).read()
        '\\\\emph{hi}'

    """
    if not isinstance(content, (str, bytes)):
        raise TypeError(f"Content must be str or bytes, got {type(content)}")

    if output is None:
        return StringIO(content) if isinstance(content, str) else BytesIO(content)

    if isinstance(output, (str, Path)):
        output_path = Path(output)
        if isinstance(content, str):
            output_path.write_text(content, encoding="utf-8")
        else:
            output_path.write_bytes(content)
        return None

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        data = content.encode("utf-8") if isinstance(content, str) else content
        cast(IO[bytes], output).write(data)
    else:
        text = content.decode("utf-8") if isinstance(content, bytes) else content
        cast(IO[str], output).write(text)
    return None


def read_text_input(source: Union[str, Path]) -> str:
    """Read UTF-8 text from a file path, or from standard input for ``-``.

    Parameters
    ----------
    source : str or Path
        Input path, or ``"-"`` for standard input

    Returns
    -------
    str
        The decoded text

    Raises
    ------
    OSError
        If the file cannot be read

    """
    if str(source) == STDIN_MARKER:
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


__all__ = ["OutputDestination", "STDIN_MARKER", "write_content", "read_text_input"]
