"""cntr - center plain text in the terminal."""

from .model import Document, Paragraph
from .parser import parse_document
from .renderer import CenteredRenderer, center_line, compute_padding, render_document
from .terminal import TerminalProbe
from .width import code_point_width, display_width

__all__ = [
    'Document',
    'Paragraph',
    'parse_document',
    'CenteredRenderer',
    'center_line',
    'compute_padding',
    'render_document',
    'TerminalProbe',
    'code_point_width',
    'display_width',
]
