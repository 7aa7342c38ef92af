from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Union

from .errors import RecordError


@dataclass
class Record:
    """One FlarmNet entry. `flarm_id` is the identity and sort key."""
    flarm_id: str
    frequency: str = ""
    call_sign: str = ""
    pilot_name: str = ""
    airfield: str = ""
    plane_type: str = ""
    registration: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class TdbFile:
    version: int
    records: list[Record] = field(default_factory=list)


RecordOutcome = Union[Record, RecordError]


@dataclass
class DecodedFile:
    """Decoder output: one outcome per on-disk slot, in file order."""
    version: int
    records: list[RecordOutcome] = field(default_factory=list)

    @property
    def ok_records(self) -> list[Record]:
        return [r for r in self.records if isinstance(r, Record)]

    @property
    def errors(self) -> list[tuple[int, RecordError]]:
        return [(i, r) for i, r in enumerate(self.records) if isinstance(r, RecordError)]

    @property
    def ok_count(self) -> int:
        return len(self.ok_records)

    @property
    def error_count(self) -> int:
        return len(self.records) - self.ok_count
