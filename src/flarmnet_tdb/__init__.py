"""FlarmNet TDB - Decoder/Encoder for the Air Avionics TDB file format."""
from .decode import decode_file, decode_record, read_tdb
from .encode import TdbWriter, encode_file, write_tdb
from .errors import (
    DecodeError,
    EncodeError,
    InvalidFlarmIdError,
    InvalidFrequencyError,
    InvalidMagicError,
    InvalidRecordFlarmIdError,
    InvalidTextEncodingError,
    InvalidTextError,
    InvalidVersionError,
    RecordError,
    TdbError,
    TruncatedInputError,
)
from .models import DecodedFile, Record, TdbFile

__all__ = [
    "decode_file",
    "decode_record",
    "read_tdb",
    "TdbWriter",
    "encode_file",
    "write_tdb",
    "DecodeError",
    "EncodeError",
    "InvalidFlarmIdError",
    "InvalidFrequencyError",
    "InvalidMagicError",
    "InvalidRecordFlarmIdError",
    "InvalidTextEncodingError",
    "InvalidTextError",
    "InvalidVersionError",
    "RecordError",
    "TdbError",
    "TruncatedInputError",
    "DecodedFile",
    "Record",
    "TdbFile",
]
