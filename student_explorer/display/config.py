from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class DisplayConfig:
    map_module: str = os.getenv("MAP_MODULE", "folium")
    # Cluj-Napoca city centre
    default_latitude: float = 46.7712
    default_longitude: float = 23.6236
    default_delta: float = 0.05
    tiles: str = "OpenStreetMap"


DEFAULT_DISPLAY_CONFIG = DisplayConfig()
