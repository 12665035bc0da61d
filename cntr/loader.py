"""Read the whole input document into memory.

Two modes are supported: a named file, which is sized up front and read
in one call, and a stream (normally stdin), which is read into a buffer
that doubles in capacity whenever it fills up.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import BinaryIO, Optional, TextIO, Union

from .constants import CenterConstants
from .errors import InputError

logger = logging.getLogger(__name__)


def read_file(path: str) -> bytes:
    """Read the file at `path` as raw bytes.

    Raises:
        InputError: If the file cannot be opened, sized or read.
    """
    try:
        f = open(path, 'rb')
    except OSError as e:
        raise InputError(f"Error opening file: {path}: {e.strerror or e}") from e

    with f:
        try:
            size = os.fstat(f.fileno()).st_size
        except OSError as e:
            raise InputError(f"Error determining file size: {path}: {e.strerror or e}") from e
        try:
            # Files that grow or report size 0 (e.g. /proc) are read to EOF
            data = f.read(size) + f.read()
        except OSError as e:
            raise InputError(f"Error reading file: {path}: {e.strerror or e}") from e

    logger.debug(f"Read {len(data)} bytes from {path}")
    return data


def _grow(capacity: int) -> int:
    """Return the doubled capacity, refusing sizes Python cannot index."""
    if capacity > sys.maxsize // 2:
        raise InputError("Buffer capacity overflow for stdin")
    return capacity * 2


def read_stream(stream: Union[BinaryIO, TextIO],
                initial_capacity: int = CenterConstants.STDIN_INITIAL_CAPACITY) -> bytes:
    """Read `stream` to end-of-file.

    Text streams are read through their underlying binary buffer so the
    bytes reach the parser undecoded.

    Raises:
        InputError: If reading fails or the buffer cannot grow any further.
    """
    raw = getattr(stream, 'buffer', stream)
    capacity = initial_capacity
    buffer = bytearray(capacity)
    size = 0
    try:
        while True:
            if size == capacity:
                capacity = _grow(capacity)
                buffer.extend(bytes(capacity - size))
                logger.debug(f"Grew stdin buffer to {capacity} bytes")
            # Views must be released before the bytearray can be resized
            with memoryview(buffer) as view, view[size:] as free:
                count = raw.readinto(free)
            if not count:
                break
            size += count
    except OSError as e:
        raise InputError(f"Error reading from stdin: {e.strerror or e}") from e
    except MemoryError as e:
        raise InputError("Memory reallocation error for stdin buffer") from e

    logger.debug(f"Read {size} bytes from stdin")
    return bytes(buffer[:size])


def load_input(path: Optional[str] = None, stdin: Optional[Union[BinaryIO, TextIO]] = None) -> bytes:
    """Read the document from `path`, or from `stdin` when no path is given."""
    if path is not None:
        return read_file(path)
    return read_stream(stdin if stdin is not None else sys.stdin)
