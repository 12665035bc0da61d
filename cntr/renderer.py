"""Write a document to a byte stream with every line centered."""

from __future__ import annotations

from typing import BinaryIO, Optional

from .constants import CenterConstants
from .model import Document
from .terminal import TerminalProbe
from .width import display_width


def compute_padding(width: int, columns: int) -> int:
    """Return the number of spaces that center a line of `width` columns.

    Odd remainders round down, so such lines sit one column left of true
    center. Lines at least as wide as the terminal get no padding.
    """
    return max((columns - width) // 2, 0)


def center_line(line: bytes, columns: int) -> bytes:
    """Return `line` prefixed with its centering padding (no newline)."""
    pad = compute_padding(display_width(line), columns)
    return CenterConstants.PAD_BYTE * pad + line


class CenteredRenderer:
    """Renders documents centered against the width reported by a probe."""

    def __init__(self, out: BinaryIO, probe: Optional[TerminalProbe] = None):
        self.out = out
        self.probe = probe or TerminalProbe()

    def render(self, document: Document, columns: Optional[int] = None) -> None:
        """Write each line centered, with one blank line between paragraphs.

        The terminal is probed once per call unless `columns` is given.
        """
        if columns is None:
            columns = self.probe.columns()
        out = self.out
        last = len(document) - 1
        for i, paragraph in enumerate(document):
            for line in paragraph:
                out.write(center_line(line, columns) + CenterConstants.NEWLINE)
            if i < last:
                out.write(CenterConstants.NEWLINE)


def render_document(document: Document, out: BinaryIO, columns: Optional[int] = None) -> None:
    """Render `document` to `out`, probing the terminal if `columns` is None."""
    CenteredRenderer(out).render(document, columns=columns)
