"""FlarmNet TDB protocol constants.

Single source of truth for the on-disk magic value and record layout.
Keep this file stable. Decoder and encoder must remain synchronized.
"""

# File magic
MAGIC = b"\x08\xd5\x19\x87"

# Header: [Magic(4) | Version(4) | RecordCount(4)] = 12 bytes
HEADER_FMT = "<4sII"
HEADER_SIZE = 12

# Index: one FLARM id per record, same order as the records
INDEX_ENTRY_FMT = "<I"
INDEX_ENTRY_SIZE = 4

# Reserved block between index and records, zero on write
PADDING_SIZE = 8

# Record: [FlarmId(4) | Frequency(4) | Reserved(8) | 5 x Text(16)] = 96 bytes
RECORD_FMT = "<II8s16s16s16s16s16s"
RECORD_SIZE = 96

FLARM_ID_OFFSET = 0
FREQUENCY_OFFSET = 4
RESERVED_OFFSET = 8
CALL_SIGN_OFFSET = 16
PILOT_NAME_OFFSET = 32
AIRFIELD_OFFSET = 48
PLANE_TYPE_OFFSET = 64
REGISTRATION_OFFSET = 80

STRING_FIELD_SIZE = 16
STRING_CONTENT_MAX = STRING_FIELD_SIZE - 1  # one byte kept for the terminator

# Text fields in on-disk order
TEXT_FIELDS = (
    ("call_sign", CALL_SIGN_OFFSET),
    ("pilot_name", PILOT_NAME_OFFSET),
    ("airfield", AIRFIELD_OFFSET),
    ("plane_type", PLANE_TYPE_OFFSET),
    ("registration", REGISTRATION_OFFSET),
)

# Value bounds
MAX_FLARM_ID = 0xFFFFFF
MAX_U32 = 0xFFFFFFFF

# Defaults
DEFAULT_VERSION = 1
DEFAULT_PREVIEW_RECORDS = 5


def expected_size(record_count: int) -> int:
    """Total byte length of a file holding `record_count` records."""
    return HEADER_SIZE + record_count * INDEX_ENTRY_SIZE + PADDING_SIZE + record_count * RECORD_SIZE


def records_offset(record_count: int) -> int:
    return HEADER_SIZE + record_count * INDEX_ENTRY_SIZE + PADDING_SIZE
