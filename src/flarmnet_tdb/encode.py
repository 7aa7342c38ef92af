"""TDB encoder: header plus records to a byte buffer.

Every FLARM id and frequency is resolved before the first byte is written, so
an ``EncodeError`` never leaves partial output in the sink.
"""
from __future__ import annotations

import io
import struct
from pathlib import Path
from typing import BinaryIO

from flarmnet_core.ids import parse_flarm_id, parse_frequency, truncate_text
from flarmnet_core.protocol import (
    MAGIC,
    HEADER_FMT,
    INDEX_ENTRY_FMT,
    PADDING_SIZE,
    RECORD_FMT,
    MAX_U32,
    TEXT_FIELDS,
)

from .errors import InvalidFlarmIdError, InvalidFrequencyError, InvalidTextError, InvalidVersionError
from .models import Record, TdbFile


class TdbWriter:
    """Serializes a TdbFile into a binary sink."""

    def __init__(self, sink: BinaryIO):
        self.sink = sink

    def write(self, tdb: TdbFile) -> None:
        if not 0 <= tdb.version <= MAX_U32:
            raise InvalidVersionError(tdb.version)

        entries = [(_flarm_id(record), record) for record in tdb.records]
        # Stable: duplicate ids keep input order.
        entries.sort(key=lambda entry: entry[0])
        blocks = [pack_record(fid, record) for fid, record in entries]

        # header
        self.sink.write(struct.pack(HEADER_FMT, MAGIC, tdb.version, len(entries)))

        # index
        for fid, _ in entries:
            self.sink.write(struct.pack(INDEX_ENTRY_FMT, fid))

        # padding
        self.sink.write(bytes(PADDING_SIZE))

        # records
        for block in blocks:
            self.sink.write(block)


def _flarm_id(record: Record) -> int:
    try:
        return parse_flarm_id(record.flarm_id)
    except ValueError:
        raise InvalidFlarmIdError(record.flarm_id) from None


def pack_record(flarm_id: int, record: Record) -> bytes:
    """Pack a record into its fixed 96-byte block; struct zero-pads the text fields."""
    try:
        frequency = parse_frequency(record.frequency)
    except ValueError:
        raise InvalidFrequencyError(record.frequency) from None

    texts = [_text(record, name) for name, _ in TEXT_FIELDS]
    return struct.pack(RECORD_FMT, flarm_id, frequency, b"", *texts)


def _text(record: Record, name: str) -> bytes:
    value = getattr(record, name)
    try:
        return truncate_text(value)
    except UnicodeEncodeError:
        raise InvalidTextError(name, value) from None


def encode_file(tdb: TdbFile) -> bytes:
    buf = io.BytesIO()
    TdbWriter(buf).write(tdb)
    return buf.getvalue()


def write_tdb(path: Path | str, tdb: TdbFile) -> None:
    Path(path).write_bytes(encode_file(tdb))
