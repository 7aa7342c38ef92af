"""Error types for the TDB codec.

File-level errors (``DecodeError``, ``EncodeError``) are raised and abort the
whole operation. Record-level errors (``RecordError``) are returned by the
decoder in place of the record they describe.
"""
from __future__ import annotations

from .const import ERRORS


class TdbError(ValueError):
    code = ""

    def __init__(self, detail: str = ""):
        self.detail = detail
        message = ERRORS[self.code]
        super().__init__(f"{message}: {detail}" if detail else message)

    def details(self) -> dict:
        return {}

    def to_dict(self) -> dict:
        out = {"code": self.code, "message": ERRORS[self.code]}
        out.update(self.details())
        return out

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash((self.code, tuple(sorted(self.details().items()))))


class DecodeError(TdbError):
    pass


class EncodeError(TdbError):
    pass


class RecordError(TdbError):
    pass


class TruncatedInputError(DecodeError):
    code = "E_TRUNCATED"

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"need {expected} bytes, got {actual}")

    def details(self) -> dict:
        return {"expected": self.expected, "actual": self.actual}


class InvalidMagicError(DecodeError):
    code = "E_MAGIC"

    def __init__(self, magic: bytes):
        self.magic = bytes(magic)
        super().__init__(self.magic.hex(" "))

    def details(self) -> dict:
        return {"magic": self.magic.hex()}


class InvalidFlarmIdError(EncodeError):
    code = "E_FLARM_ID"

    def __init__(self, flarm_id: str):
        self.flarm_id = flarm_id
        super().__init__(repr(flarm_id))

    def details(self) -> dict:
        return {"flarm_id": self.flarm_id}


class InvalidFrequencyError(EncodeError):
    code = "E_FREQUENCY"

    def __init__(self, frequency: str):
        self.frequency = frequency
        super().__init__(repr(frequency))

    def details(self) -> dict:
        return {"frequency": self.frequency}


class InvalidVersionError(EncodeError):
    code = "E_VERSION"

    def __init__(self, version: int):
        self.version = version
        super().__init__(str(version))

    def details(self) -> dict:
        return {"version": self.version}


class InvalidRecordFlarmIdError(RecordError):
    code = "E_FLARM_ID"

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"0x{value:08X}")

    def details(self) -> dict:
        return {"value": self.value}


class InvalidTextEncodingError(RecordError):
    code = "E_TEXT_ENCODING"

    def __init__(self, field: str, offset: int):
        self.field = field
        self.offset = offset
        super().__init__(f"{field} field at record offset {offset}")

    def details(self) -> dict:
        return {"field": self.field, "offset": self.offset}


class InvalidTextError(EncodeError):
    code = "E_TEXT_VALUE"

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"{field}={value!r}")

    def details(self) -> dict:
        return {"field": self.field}
