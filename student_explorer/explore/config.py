from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


def _env_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


@dataclass(frozen=True)
class GeolocationConfig:
    device_latitude: float | None = _env_float("DEVICE_LATITUDE")
    device_longitude: float | None = _env_float("DEVICE_LONGITUDE")


DEFAULT_GEOLOCATION_CONFIG = GeolocationConfig()
