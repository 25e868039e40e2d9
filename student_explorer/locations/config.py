from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_JSON = Path(__file__).resolve().parent.parent / "data" / "locations.json"


@dataclass(frozen=True)
class CatalogueConfig:
    data_path: Path = Path(os.getenv("LOCATIONS_DATA_PATH", str(_BUNDLED_JSON)))
    load_delay: float = float(os.getenv("LOCATIONS_LOAD_DELAY", "0"))


DEFAULT_CATALOGUE_CONFIG = CatalogueConfig()
