from pydantic import BaseModel

from core.entities import ClearReport, PlateRecord

TABLE_HEADER = "|#     | Plate           | Begin      | End        |"


class PlateRowVM(BaseModel):
    position: int
    plate_number: str
    valid_from: str
    valid_until: str

    @classmethod
    def from_record(cls, position: int, record: PlateRecord) -> "PlateRowVM":
        return cls(
            position=position,
            plate_number=record.plate_number,
            valid_from=record.valid_from,
            valid_until=record.valid_until,
        )

    def render(self) -> str:
        return f"|{self.position:<5} | {self.plate_number:<15} | {self.valid_from:^10} | {self.valid_until:^10} |"


class CommandResultVM(BaseModel):
    success: bool
    message: str


class ClearResultVM(BaseModel):
    success: bool
    message: str
    target_date: str
    removed: list[str]
    cancelled: bool = False

    @classmethod
    def from_report(cls, report: ClearReport) -> "ClearResultVM":
        removed = [record.plate_number for record in report.removed]
        if report.cancelled:
            message = f"Clearing {report.target_date} cancelled: {len(removed)} of {report.matched} plate(s) removed"
        else:
            message = f"Removal finished: {len(removed)} plate(s) expiring on {report.target_date} removed"
        return cls(
            success=not report.cancelled,
            message=message,
            target_date=report.target_date,
            removed=removed,
            cancelled=report.cancelled,
        )
