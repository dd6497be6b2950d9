"""Center document lines within a terminal width."""

from typing import Iterator, TextIO

from .constants import LayoutConstants
from .model import Document
from .width import display_width


def compute_padding(line: str, terminal_width: int) -> int:
    """Return the number of leading spaces that center ``line``.

    Lines wider than the terminal get no padding.
    """
    return max(0, (terminal_width - display_width(line)) // 2)


def center_line(line: str, terminal_width: int) -> str:
    return LayoutConstants.PAD_CHAR * compute_padding(line, terminal_width) + line


def render_lines(document: Document, terminal_width: int) -> Iterator[str]:
    """Yield the output lines for ``document``, without newlines.

    An empty line separates consecutive paragraphs; nothing follows the
    last one. Long lines are not wrapped or truncated.
    """
    last = len(document) - 1
    for i, paragraph in enumerate(document):
        for line in paragraph:
            yield center_line(line, terminal_width)
        if i < last:
            yield ""


def render_document(document: Document, terminal_width: int, stream: TextIO) -> None:
    """Write the centered document to ``stream``."""
    for line in render_lines(document, terminal_width):
        stream.write(line + LayoutConstants.LINE_SEPARATOR)
