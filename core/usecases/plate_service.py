"""Use-case layer for allow-list entries.

Plate numbers and dates are validated here, by the caller of the camera
client; the device rejects bad input on its own but with unhelpful replies.
"""
import re
from datetime import date
from typing import Iterable, List

from core.entities import PlateRecord

ALLOWED_PLATE_RE = re.compile(r"^[ABCEHKMOPTXY0-9]+$")
DATE_FORMAT = "%Y-%m-%d"

# Cyrillic letters the recognizer treats as their Latin twins
CYRILLIC_TO_LATIN = str.maketrans("АВСЕНКМОРТХУ", "ABCEHKMOPTXY")


def today_iso() -> str:
    return date.today().strftime(DATE_FORMAT)


def normalize_plate_number(plate: str) -> str:
    cleaned = "".join(str(plate).split()).upper()
    return cleaned.translate(CYRILLIC_TO_LATIN)


def validate_plate_number(plate: str) -> str:
    pn = normalize_plate_number(plate)
    if not ALLOWED_PLATE_RE.match(pn):
        raise ValueError("invalid_plate_number")
    return pn


def validate_date(value: str) -> str:
    value = str(value).strip()
    if not re.fullmatch(r"\d{4}-\d{2}-\d{2}", value):
        raise ValueError("invalid_date")
    try:
        date.fromisoformat(value)
    except ValueError as exc:
        raise ValueError("invalid_date") from exc
    return value


def build_record(plate: str, begin: str = "", end: str = "", require_dates: bool = False) -> PlateRecord:
    pn = validate_plate_number(plate)
    if require_dates and not (begin and end):
        raise ValueError("missing_dates")
    return PlateRecord(
        plate_number=pn,
        valid_from=validate_date(begin) if begin else "",
        valid_until=validate_date(end) if end else "",
    )


def select_expiring(records: Iterable[PlateRecord], target_date: str) -> List[PlateRecord]:
    return [record for record in records if record.valid_until == target_date]
