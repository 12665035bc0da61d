"""Terminal width probe using Blessed."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

import blessed

from .constants import CenterConstants

logger = logging.getLogger(__name__)


class TerminalProbe:
    """Queries the column count of the terminal behind standard output."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None,
                 fallback: int = CenterConstants.FALLBACK_WIDTH):
        """Initialize with a terminal instance (or create one lazily).

        Args:
            terminal: Terminal to query. Defaults to one bound to stdout.
            fallback: Width returned whenever the query fails.
        """
        self._term = terminal
        self.fallback = fallback

    @property
    def term(self) -> blessed.Terminal:
        if self._term is None:
            self._term = blessed.Terminal(stream=sys.stdout)
        return self._term

    def columns(self) -> int:
        """Return the terminal width in columns, or the fallback.

        Pipes and regular files have no window size, so output that is
        redirected always gets the fallback width.
        """
        try:
            term = self.term
            if not term.is_a_tty:
                logger.debug(f"stdout is not a terminal, using {self.fallback} columns")
                return self.fallback
            # Blessed reads COLUMNS when the ioctl fails; only trust it after
            # the window size query itself has succeeded.
            os.get_terminal_size(term.stream.fileno())
            width = term.width
        except (OSError, ValueError) as e:
            logger.debug(f"Window size query failed ({e}), using {self.fallback} columns")
            return self.fallback
        if not isinstance(width, int) or width <= 0:
            logger.debug(f"Terminal reported width {width!r}, using {self.fallback} columns")
            return self.fallback
        return width
