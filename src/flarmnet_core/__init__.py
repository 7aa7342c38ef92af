"""FlarmNet Core - Shared layout and field conversions."""
from .ids import (
    format_flarm_id,
    format_frequency,
    parse_flarm_id,
    parse_frequency,
    read_text,
    truncate_text,
)

__all__ = [
    "format_flarm_id",
    "format_frequency",
    "parse_flarm_id",
    "parse_frequency",
    "read_text",
    "truncate_text",
]
