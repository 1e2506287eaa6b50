"""Project configuration helpers (loads .env and builds camera settings).

Usage:
  - Set `CAMERA_IP`, `CAMERA_USERNAME`, `CAMERA_PASSWORD` in the environment
    or in one of `.env`, `.env.local`, `.env.app`.
  - Optionally set `CAMERA_TIMEOUT_SECONDS` (default 3) and
    `CAMERA_CLEAR_DELAY_MS` (default 500, never lower).

This module exposes `get_camera_settings()` which returns an immutable
`CameraSettings` value for the camera client.
"""
from __future__ import annotations
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TIMEOUT_SECONDS = 3.0
MIN_CLEAR_DELAY_MS = 500
REQUIRED_ENV_VARS = ("CAMERA_IP", "CAMERA_USERNAME", "CAMERA_PASSWORD")


def _env_file_candidates() -> list[Path]:
    return [Path(".env"), Path(".env.local"), Path(".env.app")]


def _first_existing_env_file() -> Path | None:
    for path in _env_file_candidates():
        if path.exists() and path.is_file():
            return path
    return None


def load_env() -> None:
    env_file = _first_existing_env_file()
    if env_file is not None:
        load_dotenv(dotenv_path=env_file)
    else:
        load_dotenv()


class CameraSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str
    username: str
    password: str = Field(repr=False)
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    clear_delay_ms: int = MIN_CLEAR_DELAY_MS

    @field_validator("host")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        host = value.strip().rstrip("/")
        if not host:
            raise ValueError("host must not be empty")
        return host

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value

    @field_validator("clear_delay_ms")
    @classmethod
    def _min_clear_delay(cls, value: int) -> int:
        return max(MIN_CLEAR_DELAY_MS, value)


def get_camera_settings() -> CameraSettings:
    """Build CameraSettings from env vars.

    Priority:
    1. Real environment variables
    2. Values from the first existing `.env*` file (never override 1)
    3. Raise error if any of CAMERA_IP, CAMERA_USERNAME, CAMERA_PASSWORD is missing
    """
    load_env()

    missing = [name for name in REQUIRED_ENV_VARS if not os.getenv(name)]
    if missing:
        raise RuntimeError(
            "Camera configuration missing. Set "
            + ", ".join(missing)
            + " in environment/.env.local."
        )

    return CameraSettings(
        host=os.environ["CAMERA_IP"],
        username=os.environ["CAMERA_USERNAME"],
        password=os.environ["CAMERA_PASSWORD"],
        timeout=float(os.getenv("CAMERA_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))),
        clear_delay_ms=int(os.getenv("CAMERA_CLEAR_DELAY_MS", str(MIN_CLEAR_DELAY_MS))),
    )


__all__ = ["CameraSettings", "get_camera_settings"]
