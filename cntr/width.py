"""Display width of UTF-8 encoded lines.

Column widths come from the East Asian Width and combining-mark tables
shipped with ``wcwidth``. Decoding is deliberately lenient: a centering
filter must always produce some indent, so bytes that do not decode are
charged one column each instead of raising.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Optional, Union

import wcwidth


class Decoded(NamedTuple):
    """One step of the decoder.

    ``code_point`` is None when the bytes at the cursor were malformed or
    truncated; ``length`` is then always 1.
    """
    code_point: Optional[int]
    length: int


def _sequence_length(lead: int) -> int:
    """Return the encoded length announced by a lead byte, or 0 if invalid."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    # Continuation bytes, overlong leads C0/C1 and leads past U+10FFFF
    return 0


class Utf8Decoder:
    """Decode code points one at a time from a byte buffer."""

    def __init__(self, data: bytes):
        self._data = data
        self.position = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self._data)

    def decode(self) -> Decoded:
        """Decode the code point at the cursor and advance past it.

        Malformed input advances the cursor by a single byte so the
        next call starts over on the following byte.
        """
        if self.exhausted:
            raise EOFError("decoder is exhausted")
        pos = self.position
        length = _sequence_length(self._data[pos])
        if length == 0:
            return self._malformed()
        chunk = self._data[pos:pos + length]
        if len(chunk) < length:
            # Incomplete sequence at end of buffer
            return self._malformed()
        try:
            # Strict decoding rejects overlongs, surrogates and stray bytes
            char = chunk.decode("utf-8")
        except UnicodeDecodeError:
            return self._malformed()
        self.position = pos + length
        return Decoded(ord(char), length)

    def _malformed(self) -> Decoded:
        self.position += 1
        return Decoded(None, 1)

    def __iter__(self) -> Iterator[Decoded]:
        while not self.exhausted:
            yield self.decode()


def code_point_width(cp: int) -> int:
    """Return the column width (0, 1 or 2) of a single code point.

    Control and other non-printable code points count as one column.
    """
    width = wcwidth.wcwidth(chr(cp))
    if width < 0:
        return 1
    return width


def display_width(data: Union[bytes, str]) -> int:
    """Return the number of terminal columns a line occupies.

    Each malformed or truncated byte counts as one column. Measuring stops
    at the first NUL byte.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    width = 0
    for decoded in Utf8Decoder(data):
        if decoded.code_point is None:
            width += 1
        elif decoded.code_point == 0:
            break
        else:
            width += code_point_width(decoded.code_point)
    return width
