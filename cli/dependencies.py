import requests

from adapters.camera.lnpr_client import CameraClient
from config import CameraSettings, get_camera_settings
from core.ports.plate_list import PlateListPort


def get_camera_client(settings: CameraSettings | None = None) -> PlateListPort:
    settings = settings or get_camera_settings()
    return CameraClient(settings, session=requests.Session())
