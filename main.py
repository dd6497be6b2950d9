#!/usr/bin/env python3
"""cntr - print text centered in the terminal.

Usage:
    python main.py [filename]
    some-command | python main.py

Each line is centered within the current terminal width. Paragraphs
(separated by blank lines) are printed with one blank line between them.
"""

import sys
from cntr.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
