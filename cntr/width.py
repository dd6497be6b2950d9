"""Display width of text as it appears on a terminal."""

from typing import Union

from wcwidth import wcwidth

from .constants import LayoutConstants

# Range used by the surrogateescape error handler for undecodable bytes
_ESCAPED_BYTE_FIRST = 0xDC80
_ESCAPED_BYTE_LAST = 0xDCFF


def _is_escaped_byte(ch: str) -> bool:
    return _ESCAPED_BYTE_FIRST <= ord(ch) <= _ESCAPED_BYTE_LAST


def char_width(ch: str) -> int:
    """Return the number of columns a single code point occupies.

    Combining and zero-width characters are 0, wide East Asian characters
    are 2. Control characters and undecodable bytes count as 1.
    """
    if _is_escaped_byte(ch):
        return 1
    width = wcwidth(ch)
    if width < 0:
        return 1
    return width


def display_width(text: Union[str, bytes]) -> int:
    """Return the total display width of ``text``.

    Bytes are decoded first; each invalid byte counts as one column and
    decoding resumes at the following byte. A NUL character ends the
    measurement.
    """
    if isinstance(text, bytes):
        text = text.decode(LayoutConstants.ENCODING, LayoutConstants.DECODE_ERRORS)
    width = 0
    for ch in text:
        if ch == "\0":
            break
        width += char_width(ch)
    return width
