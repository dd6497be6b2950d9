"""cntr CLI entry point.

Allows running via `python -m cntr` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Sequence

from .constants import LayoutConstants
from .loader import InputError, load_file, load_stdin
from .parser import parse_document
from .render import render_document
from .terminal import TerminalWidthProbe

logger = logging.getLogger(__name__)


class UsageError(Exception):
    """Wrong number of command-line arguments."""


def parse_args(args: Sequence[str]) -> Optional[str]:
    """Return the input filename, or None to read standard input."""
    if len(args) > 1:
        raise UsageError(f"expected at most one argument, got {len(args)}")
    return args[0] if args else None


def _print_usage() -> None:
    print(LayoutConstants.USAGE.format(LayoutConstants.PROGRAM_NAME), file=sys.stderr)
    print(LayoutConstants.USAGE_DETAIL, file=sys.stderr)


def _configure_stdout() -> None:
    # Undecodable input bytes must be written back out unchanged
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding=LayoutConstants.ENCODING, errors=LayoutConstants.DECODE_ERRORS)


def _silence_stdout() -> None:
    # Keep the interpreter from failing again when it flushes stdout at exit
    try:
        fd = sys.stdout.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(argv: Optional[Sequence[str]] = None, probe: Optional[TerminalWidthProbe] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        filename = parse_args(args)
    except UsageError as e:
        logger.debug("Usage error: %s", e)
        _print_usage()
        return 1

    try:
        content = load_file(filename) if filename is not None else load_stdin()
    except InputError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        doc = parse_document(content)
    except MemoryError:
        print("Error parsing document.", file=sys.stderr)
        return 1
    logger.debug("Parsed %d paragraphs, %d lines", len(doc), doc.line_count())

    if probe is None:
        probe = TerminalWidthProbe()
    width = probe.width()

    _configure_stdout()
    try:
        render_document(doc, width, sys.stdout)
        sys.stdout.flush()
    except BrokenPipeError:
        logger.debug("Output closed before rendering finished")
        _silence_stdout()
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
