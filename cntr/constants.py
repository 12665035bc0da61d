"""Constants and configuration for the cntr filter."""


class CenterConstants:
    """Central configuration constants for centering."""

    # Terminal
    FALLBACK_WIDTH = 80  # Columns used when the window size cannot be queried

    # Input buffering
    STDIN_INITIAL_CAPACITY = 1024  # Starting buffer size for stream reads (bytes)

    # Document structure
    NEWLINE = b"\n"
    PARAGRAPH_SEPARATOR = b"\n\n"  # Two or more newlines end a paragraph
    TERMINATOR = b"\x00"  # Input is treated as ending at the first NUL
    PAD_BYTE = b" "

    # Messages
    USAGE_MESSAGE = "Usage: {} [<filename>]"
    USAGE_DETAIL = "  Reads from <filename> or from standard input if no file is specified."
    PARSE_ERROR_MESSAGE = "Error parsing document."
