from releasegate.cli.formatters.check_formatter import (
    HEADER_WIDTH,
    format_complete,
    format_complete_line,
    format_error,
    format_header,
    format_start,
)

__all__ = [
    "HEADER_WIDTH",
    "format_complete",
    "format_complete_line",
    "format_error",
    "format_header",
    "format_start",
]
