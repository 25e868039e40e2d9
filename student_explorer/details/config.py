from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class ReservationConfig:
    # "link" hands the URL back to the client, "browser" opens it on this host
    launcher: str = os.getenv("RESERVATION_LAUNCHER", "link")
    messaging_url: str = "https://wa.me/"
    message_template: str = "Rezervare pentru {name}"


DEFAULT_RESERVATION_CONFIG = ReservationConfig()
