"""Terminal size queries using Blessed."""

import logging
from typing import Optional

import blessed

from .constants import LayoutConstants

logger = logging.getLogger(__name__)


class TerminalWidthProbe:
    """Reports the width of the controlling terminal."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()

    def width(self) -> int:
        """Terminal width in columns.

        Falls back to the default width when output is not a terminal or
        the size cannot be determined. Never raises.

        On a terminal whose size ioctl fails, Blessed itself answers from
        $COLUMNS before this fallback applies.
        """
        default = LayoutConstants.DEFAULT_TERMINAL_WIDTH
        try:
            if not self.term.is_a_tty:
                logger.debug("Output is not a terminal, using width %d", default)
                return default
            columns = self.term.width
        except (OSError, ValueError) as e:
            logger.debug("Terminal size query failed (%s), using width %d", e, default)
            return default
        if not isinstance(columns, int) or columns < 1:
            logger.debug("Terminal reported width %r, using width %d", columns, default)
            return default
        return columns
