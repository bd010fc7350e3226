from pldf.cli.formatters.hint_formatter import (
    format_hint,
    format_hint_error,
    format_hint_json,
    format_hint_table,
)

__all__ = [
    "format_hint",
    "format_hint_error",
    "format_hint_json",
    "format_hint_table",
]
