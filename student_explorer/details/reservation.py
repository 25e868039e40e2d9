from __future__ import annotations

import logging
import webbrowser
from enum import Enum
from urllib.parse import quote

from pydantic import BaseModel

from ..locations.models import Location
from .config import DEFAULT_RESERVATION_CONFIG, ReservationConfig

logger = logging.getLogger(__name__)

APP_NOT_INSTALLED = "WhatsApp nu este instalat pe acest dispozitiv."
COULD_NOT_OPEN = "Nu s-a putut deschide WhatsApp."


class ReservationStatus(str, Enum):
    opened = "opened"
    unavailable = "unavailable"
    failed = "failed"


class ReservationResult(BaseModel):
    status: ReservationStatus
    url: str
    notice: str | None = None


class Launcher:
    def can_open(self, url: str) -> bool:
        raise NotImplementedError

    def open(self, url: str) -> None:
        raise NotImplementedError


class LinkLauncher(Launcher):
    """The client follows the returned URL itself."""

    def can_open(self, url: str) -> bool:
        return True

    def open(self, url: str) -> None:
        return None


class BrowserLauncher(Launcher):
    """Opens the link with the browser registered on this host."""

    def can_open(self, url: str) -> bool:
        try:
            webbrowser.get()
        except webbrowser.Error:
            return False
        return True

    def open(self, url: str) -> None:
        if not webbrowser.open(url):
            raise RuntimeError(f"browser refused to open {url}")


def get_launcher(config: ReservationConfig = DEFAULT_RESERVATION_CONFIG) -> Launcher:
    if config.launcher == "browser":
        return BrowserLauncher()
    return LinkLauncher()


def build_reservation_url(
    location: Location,
    config: ReservationConfig = DEFAULT_RESERVATION_CONFIG,
) -> str:
    message = config.message_template.format(name=location.name)
    text = quote(message, safe="!~*'()")
    return f"{config.messaging_url}?text={text}"


def hand_off_reservation(
    location: Location,
    launcher: Launcher,
    config: ReservationConfig = DEFAULT_RESERVATION_CONFIG,
) -> ReservationResult:
    """
    Open the messaging app pre-filled with a reservation message.

    When the app cannot be opened a single notice is returned and nothing
    else happens.
    """
    url = build_reservation_url(location, config)
    try:
        if not launcher.can_open(url):
            return ReservationResult(
                status=ReservationStatus.unavailable, url=url, notice=APP_NOT_INSTALLED,
            )
        launcher.open(url)
    except Exception:
        logger.warning("Error opening messaging app for %s", location.id, exc_info=True)
        return ReservationResult(status=ReservationStatus.failed, url=url, notice=COULD_NOT_OPEN)
    return ReservationResult(status=ReservationStatus.opened, url=url)
