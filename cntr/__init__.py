"""cntr - print text centered in the terminal."""

from .model import Document, Paragraph
from .parser import parse_document
from .render import center_line, compute_padding, render_document, render_lines
from .width import char_width, display_width

__all__ = [
    'Document',
    'Paragraph',
    'parse_document',
    'center_line',
    'compute_padding',
    'render_document',
    'render_lines',
    'char_width',
    'display_width',
]
