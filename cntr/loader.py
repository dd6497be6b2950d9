"""Read the whole input document from a file or standard input."""

import logging
import sys
from typing import BinaryIO, Optional

from .constants import LayoutConstants

logger = logging.getLogger(__name__)


class InputError(OSError):
    """Input could not be read."""


def _decode(data: bytes) -> str:
    """Decode raw input, dropping everything after the first NUL."""
    text = data.decode(LayoutConstants.ENCODING, LayoutConstants.DECODE_ERRORS)
    return text.partition("\0")[0]


def load_file(path: str) -> str:
    """Read a file fully into a string.

    Raises:
        InputError: If the file cannot be opened or read.
    """
    try:
        f = open(path, 'rb')
    except OSError as e:
        raise InputError(f"Error opening file: {e.strerror or e}") from e
    with f:
        try:
            data = f.read()
        except OSError as e:
            raise InputError(f"Error reading file: {e.strerror or e}") from e
    logger.debug("Read %d bytes from %s", len(data), path)
    return _decode(data)


def load_stdin(stream: Optional[BinaryIO] = None) -> str:
    """Read standard input until end of stream.

    Args:
        stream: Binary stream to read instead of ``sys.stdin.buffer``

    Raises:
        InputError: If reading fails.
    """
    if stream is None:
        stream = sys.stdin.buffer
    try:
        data = stream.read()
    except OSError as e:
        raise InputError(f"Error reading from stdin: {e.strerror or e}") from e
    logger.debug("Read %d bytes from stdin", len(data))
    return _decode(data)
