"""Split raw text into paragraphs and lines."""

from .constants import LayoutConstants
from .model import Document, Paragraph


def _split_lines(span: str) -> list[str]:
    """Split a paragraph span at single newlines, keeping lines verbatim.

    A newline that ends the span does not start another line.
    """
    lines = span.split(LayoutConstants.LINE_SEPARATOR)
    if span.endswith(LayoutConstants.LINE_SEPARATOR):
        lines.pop()
    return lines


def parse_document(text: str) -> Document:
    """Parse ``text`` into a Document.

    Paragraphs end at the next double newline or at the end of the text.
    Newlines between paragraphs are skipped, so any run of blank lines
    acts as a single paragraph break. Lines inside a paragraph are kept
    as they appear, with no trimming or re-wrapping.
    """
    doc = Document()
    sep = LayoutConstants.PARAGRAPH_SEPARATOR
    newline = LayoutConstants.LINE_SEPARATOR
    pos = 0
    end = len(text)

    while pos < end:
        # Skip blank lines between paragraphs
        while pos < end and text[pos] == newline:
            pos += 1
        if pos >= end:
            break

        para_end = text.find(sep, pos)
        if para_end == -1:
            para_end = end
            next_pos = end
        else:
            next_pos = para_end + len(sep)

        doc.add_paragraph(Paragraph(_split_lines(text[pos:para_end])))
        pos = next_pos

    return doc
