"""Split raw input bytes into paragraphs and lines.

A paragraph ends at the first run of two or more newline bytes; a single
newline inside a paragraph is a line break and is kept as a line boundary.
Newlines before the first paragraph and after the last one are dropped, so
no paragraph is ever empty. All other bytes pass through untouched; their
encoding only matters when the renderer measures width.
"""

import logging

from .constants import CenterConstants
from .errors import DocumentError
from .model import Document, Paragraph

logger = logging.getLogger(__name__)

NEWLINE = CenterConstants.NEWLINE[0]


def _split_lines(buffer: bytes, start: int, end: int) -> tuple[bytes, ...]:
    """Return the lines of buffer[start:end], split at single newlines."""
    lines: list[bytes] = []
    line_start = start
    while line_start < end:
        line_end = buffer.find(CenterConstants.NEWLINE, line_start, end)
        if line_end == -1:
            line_end = end
        lines.append(bytes(buffer[line_start:line_end]))
        # Skip the newline, or stop at the paragraph end
        line_start = line_end + 1 if line_end < end else line_end
    return tuple(lines)


def parse_document(buffer: bytes) -> Document:
    """Parse a byte buffer into a Document.

    The buffer is treated as NUL-terminated: anything after the first NUL
    byte is ignored.

    Raises:
        DocumentError: If memory runs out while building the document.
    """
    end = buffer.find(CenterConstants.TERMINATOR)
    if end == -1:
        end = len(buffer)

    paragraphs: list[Paragraph] = []
    pos = 0
    try:
        while True:
            # Blank lines before and between paragraphs
            while pos < end and buffer[pos] == NEWLINE:
                pos += 1
            if pos >= end:
                break

            para_start = pos
            para_end = buffer.find(CenterConstants.PARAGRAPH_SEPARATOR, para_start, end)
            if para_end == -1:
                para_end = end
                next_para = end
            else:
                next_para = para_end + len(CenterConstants.PARAGRAPH_SEPARATOR)

            paragraphs.append(Paragraph(_split_lines(buffer, para_start, para_end)))
            pos = next_para
    except MemoryError as e:
        raise DocumentError(CenterConstants.PARSE_ERROR_MESSAGE) from e

    logger.debug(f"Parsed {len(paragraphs)} paragraphs from {end} bytes")
    return Document(tuple(paragraphs))
