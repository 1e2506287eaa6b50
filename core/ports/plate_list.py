from abc import ABC, abstractmethod
from threading import Event
from typing import List, Optional

from core.entities import ClearReport, PlateRecord


class PlateListPort(ABC):
    @abstractmethod
    def list(self) -> List[PlateRecord]:
        raise NotImplementedError

    @abstractmethod
    def add(self, record: PlateRecord) -> str:
        raise NotImplementedError

    @abstractmethod
    def edit(self, record: PlateRecord) -> str:
        raise NotImplementedError

    @abstractmethod
    def remove(self, record: PlateRecord) -> str:
        raise NotImplementedError

    @abstractmethod
    def clear_by_date(self, target_date: str = "", cancel_event: Optional[Event] = None) -> ClearReport:
        """Remove every record whose valid_until equals target_date."""
        raise NotImplementedError
