"""Command handlers for the `ward` CLI.

Each handler takes the camera client and parsed arguments, prints its result
and returns the process exit code.
"""
import sys

from cli.viewmodels.plates import TABLE_HEADER, ClearResultVM, CommandResultVM, PlateRowVM
from core.errors import CameraError, ClearAborted, DeviceError, MalformedResponse, TransportError, Unauthorized
from core.ports.plate_list import PlateListPort
from core.usecases.plate_service import build_record, today_iso, validate_date

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

VALIDATION_MESSAGES = {
    "invalid_plate_number": "plate number may only contain A B C E H K M O P T X Y and digits",
    "invalid_date": "dates must be calendar dates in YYYY-MM-DD form",
    "missing_dates": "both BEGIN and END dates are required",
}


def _error(message: str) -> None:
    print(f"error: {message}", file=sys.stderr)


def describe_error(exc: CameraError) -> str:
    if isinstance(exc, Unauthorized):
        return f"not authorized, check CAMERA_USERNAME/CAMERA_PASSWORD ({exc})"
    if isinstance(exc, TransportError):
        return f"camera unreachable ({exc})"
    if isinstance(exc, DeviceError):
        return f"camera reported an error ({exc})"
    if isinstance(exc, MalformedResponse):
        return f"unexpected list format from camera ({exc})"
    return str(exc)


def _report_write(response: str) -> int:
    result = CommandResultVM(success=response == "OK", message=response)
    if result.success:
        print(result.message)
        return EXIT_OK
    _error(f"camera did not confirm the change: {result.message!r}")
    return EXIT_FAILURE


def cmd_list(client: PlateListPort, args) -> int:
    records = client.list()
    print(TABLE_HEADER)
    for position, record in enumerate(records, start=1):
        print(PlateRowVM.from_record(position, record).render())
    return EXIT_OK


def cmd_add(client: PlateListPort, args) -> int:
    if bool(args.begin) != bool(args.end):
        raise ValueError("missing_dates")
    record = build_record(args.plate, args.begin or "", args.end or "")
    return _report_write(client.add(record))


def cmd_edit(client: PlateListPort, args) -> int:
    record = build_record(args.plate, args.begin, args.end, require_dates=True)
    return _report_write(client.edit(record))


def cmd_remove(client: PlateListPort, args) -> int:
    record = build_record(args.plate)
    return _report_write(client.remove(record))


def cmd_clear(client: PlateListPort, args) -> int:
    target_date = validate_date(args.date) if args.date else today_iso()
    try:
        report = client.clear_by_date(target_date)
    except ClearAborted as exc:
        for record in exc.removed:
            print(f"Plate {record.plate_number} removed")
        if exc.error is not None:
            _error(f"{exc} [{describe_error(exc.error)}]")
        else:
            _error(str(exc))
        return EXIT_FAILURE

    result = ClearResultVM.from_report(report)
    for plate in result.removed:
        print(f"Plate {plate} removed")
    print(result.message)
    return EXIT_OK if result.success else EXIT_FAILURE


def run_command(handler, client: PlateListPort, args) -> int:
    try:
        return handler(client, args)
    except ValueError as exc:
        code = str(exc)
        _error(VALIDATION_MESSAGES.get(code, code))
        return EXIT_USAGE
    except CameraError as exc:
        _error(describe_error(exc))
        return EXIT_FAILURE
