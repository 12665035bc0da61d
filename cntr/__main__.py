"""cntr CLI entry point.

Allows running via `python -m cntr` and provides the console script
defined in `pyproject.toml`.

Usage:
    cntr [filename]

Reads the document from the file, or from standard input when no file is
given, and writes it to standard output with every line centered.
"""

from __future__ import annotations

import os
import sys
from typing import BinaryIO, Optional, Sequence, TextIO

from .constants import CenterConstants
from .errors import CntrError, UsageError
from .loader import load_input
from .parser import parse_document
from .renderer import CenteredRenderer
from .terminal import TerminalProbe

PROG = "cntr"


def usage() -> str:
    return "\n".join([
        CenterConstants.USAGE_MESSAGE.format(PROG),
        CenterConstants.USAGE_DETAIL,
    ])


def main(argv: Optional[Sequence[str]] = None,
         stdin: Optional[BinaryIO] = None,
         stdout: Optional[BinaryIO] = None,
         stderr: Optional[TextIO] = None,
         probe: Optional[TerminalProbe] = None) -> int:
    """Run the filter and return the process exit status."""
    # Very small arg parsing: an optional filename
    args = list(sys.argv[1:] if argv is None else argv)
    stderr = stderr if stderr is not None else sys.stderr
    out = stdout if stdout is not None else sys.stdout.buffer

    try:
        if len(args) > 1:
            raise UsageError(usage())
        data = load_input(args[0] if args else None, stdin=stdin)
        document = parse_document(data)
        CenteredRenderer(out, probe=probe).render(document)
        out.flush()
    except CntrError as e:
        print(e, file=stderr)
        return 1
    except MemoryError:
        print(CenterConstants.PARSE_ERROR_MESSAGE, file=stderr)
        return 1
    except BrokenPipeError:
        # Reader went away (e.g. `cntr file | head`); silence the flush at exit
        if stdout is None:
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
        return 1
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
