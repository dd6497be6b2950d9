from dataclasses import dataclass, field
from typing import Iterator

from .constants import LayoutConstants


@dataclass
class Paragraph:
    """An ordered run of lines, each stored without its trailing newline."""

    lines: list[str] = field(default_factory=list)

    def add_line(self, line: str) -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return LayoutConstants.LINE_SEPARATOR.join(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)


@dataclass
class Document:
    """Paragraphs in source order."""

    paragraphs: list[Paragraph] = field(default_factory=list)

    def add_paragraph(self, paragraph: Paragraph) -> None:
        self.paragraphs.append(paragraph)

    def line_count(self) -> int:
        """Count lines across all paragraphs."""
        return sum(len(p) for p in self.paragraphs)

    def flatten(self) -> str:
        """Serialize back to text with one blank line between paragraphs.

        Line content is reproduced exactly; runs of several blank lines in
        the original source collapse to one.
        """
        return LayoutConstants.PARAGRAPH_SEPARATOR.join(p.text for p in self.paragraphs)

    def __len__(self) -> int:
        return len(self.paragraphs)

    def __iter__(self) -> Iterator[Paragraph]:
        return iter(self.paragraphs)
