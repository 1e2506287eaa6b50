from dataclasses import dataclass, field
from typing import List


@dataclass
class PlateRecord:
    plate_number: str = ""
    valid_from: str = ""
    valid_until: str = ""


@dataclass
class RemovalOutcome:
    record: PlateRecord
    response: str = ""

    @property
    def ok(self) -> bool:
        return self.response == "OK"


@dataclass
class ClearReport:
    target_date: str
    outcomes: List[RemovalOutcome] = field(default_factory=list)
    cancelled: bool = False
    matched: int = 0

    @property
    def removed(self) -> List[PlateRecord]:
        return [outcome.record for outcome in self.outcomes if outcome.ok]
