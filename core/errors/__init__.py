"""Error types raised by the camera allow-list client.

Every error is recoverable by the caller; nothing in `core` or `adapters`
terminates the process.
"""
from typing import List, Optional

from core.entities import PlateRecord


class CameraError(Exception):
    """Base class for all camera client failures."""


class TransportError(CameraError):
    """Connection, DNS or timeout failure before an HTTP status was received."""


class Unauthorized(CameraError):
    """The device answered 401 to the supplied Basic credentials."""


class DeviceError(CameraError):
    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"device returned HTTP {status_code}: {body.strip()}")


class MalformedResponse(CameraError):
    """The list body violates the indexed `Key<N>=Value` format."""


class ClearAborted(CameraError):
    def __init__(
        self,
        target_date: str,
        failed: PlateRecord,
        removed: List[PlateRecord],
        error: Optional[CameraError] = None,
        response: Optional[str] = None,
    ):
        self.target_date = target_date
        self.failed = failed
        self.removed = removed
        self.error = error
        self.response = response
        reason = str(error) if error is not None else f"device replied {response!r}"
        super().__init__(
            f"clearing {target_date} stopped at {failed.plate_number} "
            f"after {len(removed)} removal(s): {reason}"
        )
