from dataclasses import dataclass
from typing import Iterator

from .constants import CenterConstants


@dataclass(frozen=True)
class Paragraph:
    """A run of lines between blank lines in the source."""
    lines: tuple[bytes, ...]

    def __post_init__(self):
        if not self.lines:
            raise ValueError("Paragraph must contain at least one line")
        for line in self.lines:
            if CenterConstants.NEWLINE in line:
                raise ValueError(f"Line contains a newline byte: {line!r}")

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> bytes:
        return self.lines[index]

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def to_bytes(self) -> bytes:
        """Join the lines with single newlines, reproducing the source paragraph."""
        return CenterConstants.NEWLINE.join(self.lines)


@dataclass(frozen=True)
class Document:
    paragraphs: tuple[Paragraph, ...] = ()

    def __len__(self) -> int:
        return len(self.paragraphs)

    def __iter__(self) -> Iterator[Paragraph]:
        return iter(self.paragraphs)

    def __getitem__(self, index: int) -> Paragraph:
        return self.paragraphs[index]

    @property
    def line_count(self) -> int:
        return sum(p.line_count for p in self.paragraphs)

    def to_bytes(self) -> bytes:
        """Return the normalized source: paragraphs joined by one blank line."""
        return CenterConstants.PARAGRAPH_SEPARATOR.join(p.to_bytes() for p in self.paragraphs)
