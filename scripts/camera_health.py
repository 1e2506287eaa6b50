"""Simple camera health-check script.

Prints JSON-like status: reachability, authorization, record count.

Run with project venv:
  .venv/bin/python3 scripts/camera_health.py
"""
import json

from cli.dependencies import get_camera_client
from config import get_camera_settings
from core.errors import CameraError, TransportError, Unauthorized
from core.ports.plate_list import PlateListPort


def collect_health(client: PlateListPort, host: str) -> dict:
    out = {"host": host, "reachable": False, "authorized": False, "records": None}
    try:
        records = client.list()
    except TransportError as e:
        out["error"] = str(e)
        return out
    except Unauthorized as e:
        out["reachable"] = True
        out["error"] = str(e)
        return out
    except CameraError as e:
        # The device answered, so it is reachable and accepted the credentials
        out["reachable"] = True
        out["authorized"] = True
        out["error"] = str(e)
        return out

    out["reachable"] = True
    out["authorized"] = True
    out["records"] = len(records)
    return out


def main():
    settings = get_camera_settings()
    out = collect_health(get_camera_client(settings), settings.host)
    print(json.dumps(out, indent=2))


if __name__ == "__main__":
    main()
