"""TDB decoder: byte buffer to header plus per-record outcomes."""
from __future__ import annotations

import struct
from pathlib import Path

from flarmnet_core.ids import format_flarm_id, format_frequency, read_text
from flarmnet_core.protocol import (
    MAGIC,
    HEADER_FMT,
    HEADER_SIZE,
    RECORD_FMT,
    RECORD_SIZE,
    MAX_FLARM_ID,
    TEXT_FIELDS,
    expected_size,
    records_offset,
)

from .errors import InvalidMagicError, InvalidRecordFlarmIdError, InvalidTextEncodingError, TruncatedInputError
from .models import DecodedFile, Record, RecordOutcome


def decode_file(data: bytes | bytearray | memoryview) -> DecodedFile:
    """Decode a whole TDB file.

    Raises a ``DecodeError`` when the header is unusable or the buffer is too
    short for the declared record count. Problems inside a single record are
    returned in that record's slot instead.
    """
    data = memoryview(data).cast("B")

    if len(data) < HEADER_SIZE:
        raise TruncatedInputError(HEADER_SIZE, len(data))

    magic, version, count = struct.unpack_from(HEADER_FMT, data, 0)
    if magic != MAGIC:
        raise InvalidMagicError(magic)

    need = expected_size(count)
    if len(data) < need:
        raise TruncatedInputError(need, len(data))

    # The index and padding sections are not consulted.
    base = records_offset(count)
    records = [
        decode_record(data[base + i * RECORD_SIZE : base + (i + 1) * RECORD_SIZE])
        for i in range(count)
    ]
    return DecodedFile(version=version, records=records)


def decode_record(block: bytes | memoryview) -> RecordOutcome:
    """Decode one 96-byte record block into a Record or a RecordError."""
    flarm_id, frequency, _reserved, *texts = struct.unpack(RECORD_FMT, block)

    if flarm_id > MAX_FLARM_ID:
        return InvalidRecordFlarmIdError(flarm_id)

    fields = {}
    for (name, offset), raw in zip(TEXT_FIELDS, texts):
        try:
            fields[name] = read_text(raw)
        except UnicodeDecodeError:
            return InvalidTextEncodingError(name, offset)

    return Record(
        flarm_id=format_flarm_id(flarm_id),
        frequency=format_frequency(frequency),
        **fields,
    )


def read_tdb(path: Path | str) -> DecodedFile:
    return decode_file(Path(path).read_bytes())
