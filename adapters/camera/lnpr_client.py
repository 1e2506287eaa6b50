"""HTTP implementation of the PlateListPort for the camera's `lnpr_cgi` endpoint.

Every operation is a single GET with Basic auth against
`http://<host>/cgi-bin/lnpr_cgi?action=...`. The adapter owns no state beyond
the injected settings and a requests session.
"""
import logging
from dataclasses import replace
from threading import Event
from typing import List, Optional

import requests
from requests.auth import HTTPBasicAuth

from config import CameraSettings
from core.codec import IndexedRecords, decode
from core.entities import ClearReport, PlateRecord, RemovalOutcome
from core.errors import CameraError, ClearAborted, DeviceError, TransportError, Unauthorized
from core.ports.plate_list import PlateListPort
from core.usecases.plate_service import select_expiring, today_iso

logger = logging.getLogger(__name__)

CGI_PATH = "/cgi-bin/lnpr_cgi"


class CameraClient(PlateListPort):
    def __init__(self, settings: CameraSettings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()
        self.auth = HTTPBasicAuth(settings.username, settings.password)

    @property
    def base_url(self) -> str:
        return f"http://{self.settings.host}{CGI_PATH}"

    def build_url(self, action: str, **params: str) -> str:
        query = {"action": action, **params}
        return requests.Request("GET", self.base_url, params=query).prepare().url

    def _get(self, action: str, **params: str) -> str:
        try:
            url = self.build_url(action, **params)
            logger.debug("GET %s", url)
            resp = self.session.get(url, auth=self.auth, timeout=self.settings.timeout)
        except requests.RequestException as exc:
            raise TransportError(f"{action} request to {self.settings.host} failed: {exc}") from exc

        if resp.status_code == requests.codes.ok:
            return resp.text
        if resp.status_code == requests.codes.unauthorized:
            raise Unauthorized(f"camera {self.settings.host} rejected credentials for user {self.settings.username!r}")
        raise DeviceError(resp.status_code, resp.text)

    def list_indexed(self) -> IndexedRecords:
        return decode(self._get("list"))

    def list(self) -> List[PlateRecord]:
        return [record for _, record in self.list_indexed()]

    def add(self, record: PlateRecord) -> str:
        if not record.valid_from or not record.valid_until:
            today = today_iso()
            record = replace(record, valid_from=today, valid_until=today)
        logger.debug("Adding %s (%s .. %s)", record.plate_number, record.valid_from, record.valid_until)
        return self._get(
            "add",
            Number=record.plate_number,
            Begin=record.valid_from,
            End=record.valid_until,
        ).strip()

    def edit(self, record: PlateRecord) -> str:
        logger.debug("Editing %s (%s .. %s)", record.plate_number, record.valid_from, record.valid_until)
        return self._get(
            "edit",
            Number=record.plate_number,
            Begin=record.valid_from,
            End=record.valid_until,
        ).strip()

    def remove(self, record: PlateRecord) -> str:
        logger.debug("Removing %s", record.plate_number)
        return self._get("remove", Number=record.plate_number).strip()

    def clear_by_date(self, target_date: str = "", cancel_event: Optional[Event] = None) -> ClearReport:
        """Remove every record whose valid_until equals target_date (default: today).

        Removals run one at a time with at least `clear_delay_ms` between them.
        The first failed removal stops the batch with ClearAborted; setting
        cancel_event stops it before the next removal starts.
        """
        target_date = target_date or today_iso()
        if cancel_event is None:
            cancel_event = Event()
        delay = self.settings.clear_delay_ms / 1000.0

        expiring = select_expiring(self.list(), target_date)
        report = ClearReport(target_date=target_date, matched=len(expiring))
        logger.info("Clearing %d plate(s) expiring on %s", len(expiring), target_date)

        for position, record in enumerate(expiring):
            if position:
                cancel_event.wait(delay)
            if cancel_event.is_set():
                logger.info("Clearing %s cancelled after %d removal(s)", target_date, len(report.removed))
                report.cancelled = True
                break

            try:
                response = self.remove(record)
            except CameraError as exc:
                raise ClearAborted(target_date, record, report.removed, error=exc) from exc

            report.outcomes.append(RemovalOutcome(record=record, response=response))
            if response != "OK":
                raise ClearAborted(target_date, record, report.removed, response=response)
            logger.info("Plate %s removed", record.plate_number)

        return report
