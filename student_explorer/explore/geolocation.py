from __future__ import annotations

from ..locations.models import Coordinates
from .config import DEFAULT_GEOLOCATION_CONFIG, GeolocationConfig


class PositionUnavailable(RuntimeError):
    pass


class GeolocationProvider:
    async def request_permission(self) -> bool:
        raise NotImplementedError

    async def current_position(self) -> Coordinates:
        raise NotImplementedError


class DeniedGeolocation(GeolocationProvider):
    async def request_permission(self) -> bool:
        return False

    async def current_position(self) -> Coordinates:
        raise PositionUnavailable("location permission denied")


class ConfiguredGeolocation(GeolocationProvider):
    """Device position taken from configuration; unset means permission denied."""

    def __init__(self, config: GeolocationConfig = DEFAULT_GEOLOCATION_CONFIG) -> None:
        self._config = config

    async def request_permission(self) -> bool:
        return self._config.device_latitude is not None and self._config.device_longitude is not None

    async def current_position(self) -> Coordinates:
        if self._config.device_latitude is None or self._config.device_longitude is None:
            raise PositionUnavailable("no device position configured")
        return Coordinates(
            latitude=self._config.device_latitude,
            longitude=self._config.device_longitude,
        )
