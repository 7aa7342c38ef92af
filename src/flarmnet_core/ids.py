"""FlarmNet TDB - Field Conversion Functions."""
from __future__ import annotations

import math
import re

from .protocol import MAX_FLARM_ID, MAX_U32, STRING_CONTENT_MAX

_HEX_RE = re.compile(r"\+?[0-9A-Fa-f]+")
_DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|[+-]?(inf|infinity|nan)", re.IGNORECASE)


def parse_flarm_id(text: str) -> int:
    """Parse a hex FLARM id into its 24-bit integer value."""
    if not _HEX_RE.fullmatch(text):
        raise ValueError(f"not a hex FLARM id: {text!r}")
    value = int(text.lstrip("+"), 16)
    if value > MAX_FLARM_ID:
        raise ValueError(f"FLARM id out of range: {text!r}")
    return value


def format_flarm_id(value: int) -> str:
    """Canonical form: 6 uppercase hex digits."""
    return f"{value:06X}"


def parse_frequency(text: str) -> int:
    """Parse a frequency in MHz into thousandths of MHz.

    Empty means no frequency and maps to 0. Rounds half away from zero and
    saturates into the u32 range: negatives and NaN give 0, overly large
    values give 0xFFFFFFFF. Only text that is not a number raises.
    """
    if not text:
        return 0
    if not _DECIMAL_RE.fullmatch(text):
        raise ValueError(f"not a decimal frequency: {text!r}")
    scaled = float(text) * 1000
    if math.isnan(scaled) or scaled <= 0:
        return 0
    if scaled >= MAX_U32:
        return MAX_U32
    return min(math.floor(scaled + 0.5), MAX_U32)


def format_frequency(value: int) -> str:
    if value == 0:
        return ""
    return f"{value // 1000}.{value % 1000:03}"


def truncate_text(text: str, limit: int = STRING_CONTENT_MAX) -> bytes:
    """UTF-8 encode `text`, cut to at most `limit` bytes on a code point boundary."""
    data = text.encode("utf-8")
    if len(data) <= limit:
        return data
    end = limit
    # back off over continuation bytes (0b10xxxxxx)
    while end > 0 and (data[end] & 0xC0) == 0x80:
        end -= 1
    return data[:end]


def read_text(field: bytes) -> str:
    """Decode a zero-terminated text field; no terminator means the field is full."""
    end = field.find(b"\x00")
    if end == -1:
        end = len(field)
    return field[:end].decode("utf-8")
