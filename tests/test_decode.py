import struct

import pytest

from flarmnet_core.protocol import (
    MAGIC,
    PADDING_SIZE,
    RECORD_SIZE,
    CALL_SIGN_OFFSET,
    PILOT_NAME_OFFSET,
    AIRFIELD_OFFSET,
    PLANE_TYPE_OFFSET,
    REGISTRATION_OFFSET,
)
from flarmnet_tdb import (
    InvalidMagicError,
    InvalidRecordFlarmIdError,
    InvalidTextEncodingError,
    Record,
    TruncatedInputError,
    decode_file,
    read_tdb,
)


def make_record(flarm_id, frequency=0, call_sign=b"", airfield=b"", plane_type=b"", registration=b"", pilot_name=b""):
    rec = bytearray(RECORD_SIZE)
    struct.pack_into("<II", rec, 0, flarm_id, frequency)
    for value, offset in [
        (call_sign, CALL_SIGN_OFFSET),
        (pilot_name, PILOT_NAME_OFFSET),
        (airfield, AIRFIELD_OFFSET),
        (plane_type, PLANE_TYPE_OFFSET),
        (registration, REGISTRATION_OFFSET),
    ]:
        rec[offset:offset + len(value)] = value
    return bytes(rec)


def make_file(records, version=1):
    data = bytearray(MAGIC)
    data += struct.pack("<II", version, len(records))
    for rec in records:
        data += rec[0:4]
    data += bytes(PADDING_SIZE)
    for rec in records:
        data += rec
    return bytes(data)


def test_empty_input_is_truncated():
    with pytest.raises(TruncatedInputError):
        decode_file(b"")


def test_partial_header_is_truncated():
    with pytest.raises(TruncatedInputError) as exc:
        decode_file(b"\x08\xd5\x19")
    assert exc.value.expected == 12
    assert exc.value.actual == 3


def test_invalid_magic_carries_observed_bytes():
    with pytest.raises(InvalidMagicError) as exc:
        decode_file(bytes(12))
    assert exc.value.magic == b"\x00\x00\x00\x00"
    assert exc.value.code == "E_MAGIC"


def test_header_without_records_is_truncated():
    data = MAGIC + struct.pack("<II", 1, 1)
    with pytest.raises(TruncatedInputError) as exc:
        decode_file(data)
    assert exc.value.expected == 12 + 4 + 8 + 96
    assert exc.value.actual == 12


@pytest.mark.parametrize("padding", range(8))
def test_empty_database_with_short_padding_is_truncated(padding):
    data = MAGIC + struct.pack("<II", 1, 0) + bytes(padding)
    with pytest.raises(TruncatedInputError) as exc:
        decode_file(data)
    assert exc.value.expected == 20
    assert exc.value.actual == 12 + padding


def test_huge_record_count_is_truncated():
    data = MAGIC + struct.pack("<II", 1, 0xFFFFFFFF) + bytes(200)
    with pytest.raises(TruncatedInputError):
        decode_file(data)


def test_one_byte_short_is_truncated():
    data = make_file([make_record(1)])
    with pytest.raises(TruncatedInputError):
        decode_file(data[:-1])


def test_empty_database():
    decoded = decode_file(make_file([], version=7))
    assert decoded.version == 7
    assert decoded.records == []


def test_single_record():
    rec = make_record(0x3EE3C7, 123500, b"SG", b"EDKA", b"LS6a", b"D-0816")
    decoded = decode_file(make_file([rec]))
    assert decoded.version == 1
    assert decoded.records == [
        Record(
            flarm_id="3EE3C7",
            frequency="123.500",
            call_sign="SG",
            pilot_name="",
            airfield="EDKA",
            plane_type="LS6a",
            registration="D-0816",
        )
    ]


def test_zero_frequency_is_empty():
    decoded = decode_file(make_file([make_record(1, 0, plane_type=b"Paraglider")]))
    assert decoded.records[0].frequency == ""
    assert decoded.records[0].plane_type == "Paraglider"


def test_max_flarm_id_decodes():
    decoded = decode_file(make_file([make_record(0xFFFFFF)]))
    assert decoded.records[0].flarm_id == "FFFFFF"


def test_invalid_flarm_id_is_a_record_error():
    decoded = decode_file(make_file([make_record(0x01000000)]))
    err = decoded.records[0]
    assert isinstance(err, InvalidRecordFlarmIdError)
    assert err.value == 16777216


def test_invalid_utf8_names_field_and_offset():
    rec = bytearray(make_record(1))
    rec[CALL_SIGN_OFFSET] = 0xFF
    rec[CALL_SIGN_OFFSET + 1] = 0xFE
    decoded = decode_file(make_file([bytes(rec)]))
    assert decoded.records[0] == InvalidTextEncodingError("call_sign", 16)


def test_first_failing_text_field_decides():
    rec = bytearray(make_record(1))
    rec[AIRFIELD_OFFSET] = 0xC3
    rec[REGISTRATION_OFFSET] = 0xFF
    decoded = decode_file(make_file([bytes(rec)]))
    err = decoded.records[0]
    assert err.field == "airfield"
    assert err.offset == AIRFIELD_OFFSET


def test_record_errors_are_isolated_and_positional():
    good_a = make_record(0x000001, registration=b"D-1111")
    bad = make_record(0x02000000)
    good_b = make_record(0x000003, registration=b"D-3333")
    decoded = decode_file(make_file([good_a, bad, good_b]))

    assert len(decoded.records) == 3
    assert decoded.records[0].registration == "D-1111"
    assert isinstance(decoded.records[1], InvalidRecordFlarmIdError)
    assert decoded.records[2].registration == "D-3333"
    assert decoded.ok_count == 2
    assert decoded.error_count == 1
    assert [i for i, _ in decoded.errors] == [1]


def test_full_text_field_without_terminator():
    rec = make_record(1, call_sign=b"ABCDEFGHIJKLMNOP")
    decoded = decode_file(make_file([rec]))
    assert decoded.records[0].call_sign == "ABCDEFGHIJKLMNOP"


def test_index_is_not_consulted():
    data = bytearray(make_file([make_record(0x000010)]))
    data[12:16] = b"\xff\xff\xff\xff"
    decoded = decode_file(bytes(data))
    assert decoded.records[0].flarm_id == "000010"


def test_on_disk_order_is_preserved():
    decoded = decode_file(make_file([make_record(5), make_record(2)]))
    assert [r.flarm_id for r in decoded.records] == ["000005", "000002"]


def test_accepts_bytearray_and_memoryview():
    data = make_file([make_record(1)])
    assert decode_file(bytearray(data)) == decode_file(data)
    assert decode_file(memoryview(data)) == decode_file(data)


def test_trailing_bytes_are_ignored():
    data = make_file([make_record(1)]) + b"\x00\x01\x02"
    assert len(decode_file(data).records) == 1


def test_read_tdb(tmp_path):
    path = tmp_path / "db.tdb"
    path.write_bytes(make_file([make_record(0x3EE3C7, call_sign=b"SG")]))
    decoded = read_tdb(path)
    assert decoded.records[0].call_sign == "SG"
