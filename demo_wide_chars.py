#!/usr/bin/env python3
"""Demo of centering text that mixes narrow, wide and combining characters."""

import sys

from cntr import parse_document, render_document
from cntr.terminal import TerminalWidthProbe

SAMPLE = """Centered text
================

ASCII line
日本語のテキスト
Cafe\u0301 with a combining accent

A line with a wide emoji: \U0001F600
"""


def main():
    width = TerminalWidthProbe().width()
    print(f"Terminal width: {width} columns")
    print()
    render_document(parse_document(SAMPLE), width, sys.stdout)


if __name__ == "__main__":
    main()
