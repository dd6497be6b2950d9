"""Constants and configuration for cntr."""

class LayoutConstants:
    """Central configuration constants for parsing and centering."""

    # Terminal
    DEFAULT_TERMINAL_WIDTH = 80  # Used when stdout is not a terminal or the query fails

    # Document structure
    PARAGRAPH_SEPARATOR = "\n\n"
    LINE_SEPARATOR = "\n"

    # Text decoding; invalid bytes round-trip as lone surrogates
    ENCODING = "utf-8"
    DECODE_ERRORS = "surrogateescape"

    # Rendering
    PAD_CHAR = " "

    # Command line
    PROGRAM_NAME = "cntr"
    USAGE = "Usage: {} [<filename>]"
    USAGE_DETAIL = "  Reads from <filename> or from standard input if no file is specified."
