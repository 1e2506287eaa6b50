"""Codec for the camera's indexed allow-list text format.

The `action=list` body is a flat sequence of lines such as::

    Number111=X111XX777
    Begin111=2023-11-02
    End111=2023-11-02
    Notify111=on

The numeric suffix (slot index) is the only link between the lines of one
record. Slots are sparse and may appear in any order.
"""
import re
from collections.abc import Iterable, Mapping

from core.entities import PlateRecord
from core.errors import MalformedResponse

FIELD_NUMBER = "Number"
FIELD_BEGIN = "Begin"
FIELD_END = "End"
FIELD_NOTIFY = "Notify"

_SLOT_RE = re.compile(r"\d+")

IndexedRecords = list[tuple[int, PlateRecord]]


def _field_kind(key: str) -> str | None:
    for kind in (FIELD_NUMBER, FIELD_BEGIN, FIELD_END):
        if kind in key:
            return kind
    return None


def _slot_index(key: str) -> int:
    match = _SLOT_RE.search(key)
    if match is None:
        raise MalformedResponse(f"no slot index in key {key!r}")
    return int(match.group())


def decode(raw_body: str) -> IndexedRecords:
    """Decode a list body into `(slot, PlateRecord)` pairs sorted by slot.

    Raises MalformedResponse when a key has no slot index or when a Begin/End
    line refers to a slot that has no Number line before it.
    """
    records: dict[int, PlateRecord] = {}

    for line in raw_body.split("\n"):
        parts = line.rstrip("\r").split("=")
        if len(parts) != 2:
            continue
        key, value = parts

        kind = _field_kind(key)
        if kind is None:
            # Notify<N> and anything unknown carry nothing we store
            continue

        slot = _slot_index(key)
        if kind == FIELD_NUMBER:
            records[slot] = PlateRecord(plate_number=value)
            continue

        record = records.get(slot)
        if record is None:
            raise MalformedResponse(f"{key} refers to slot {slot} with no {FIELD_NUMBER}{slot} line")
        if kind == FIELD_BEGIN:
            record.valid_from = value
        else:
            record.valid_until = value

    return sorted(records.items())


def encode(records: Mapping[int, PlateRecord] | Iterable[tuple[int, PlateRecord]]) -> str:
    """Render records in the device's list format, one block per slot."""
    items = records.items() if isinstance(records, Mapping) else records
    lines = []
    for slot, record in items:
        lines.append(f"{FIELD_NUMBER}{slot}={record.plate_number}")
        lines.append(f"{FIELD_BEGIN}{slot}={record.valid_from}")
        lines.append(f"{FIELD_END}{slot}={record.valid_until}")
        lines.append(f"{FIELD_NOTIFY}{slot}=off")
    return "".join(f"{line}\n" for line in lines)
