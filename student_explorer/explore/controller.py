from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from ..display.models import DisplayResult, Viewport
from ..display.providers import DisplayProvider, SelectHandler, get_display_provider
from ..locations.config import DEFAULT_CATALOGUE_CONFIG, CatalogueConfig
from ..locations.data_store import get_locations
from ..locations.filtering import RATING_FILTER_THRESHOLD, filter_locations
from ..locations.models import Location
from .geolocation import ConfiguredGeolocation, GeolocationProvider
from .models import ExploreState, ViewMode

logger = logging.getLogger(__name__)


class ExploreController:
    """Browsing state and actions of one client's explore screen."""

    def __init__(
        self,
        loader: Callable[[], tuple[Location, ...]] = get_locations,
        geolocation: GeolocationProvider | None = None,
        display: DisplayProvider | None = None,
        config: CatalogueConfig = DEFAULT_CATALOGUE_CONFIG,
    ) -> None:
        self.state = ExploreState()
        self._loader = loader
        self._geolocation = geolocation or ConfiguredGeolocation()
        self._display = display
        self._config = config
        self._mounted = False

    async def mount(self) -> None:
        """Load the catalogue and locate the device. Runs once per controller."""
        if self._mounted:
            return
        self._mounted = True
        await asyncio.gather(self._load_locations(), self._locate_device())

    async def _load_locations(self) -> None:
        try:
            if self._config.load_delay > 0:
                await asyncio.sleep(self._config.load_delay)
            self.state.locations = tuple(await asyncio.to_thread(self._loader))
        except Exception:
            logger.exception("Error loading locations")
        finally:
            self.state.loading = False

    async def _locate_device(self) -> None:
        try:
            if not await self._geolocation.request_permission():
                logger.info("Location permission not granted, keeping default viewport")
                return
            position = await self._geolocation.current_position()
        except Exception:
            logger.warning("Error getting device location", exc_info=True)
            return
        self.set_position(position.latitude, position.longitude)

    def set_position(self, latitude: float, longitude: float) -> None:
        viewport = self.state.viewport
        self.state.viewport = Viewport(
            latitude=latitude,
            longitude=longitude,
            latitude_delta=viewport.latitude_delta,
            longitude_delta=viewport.longitude_delta,
        )

    def set_query(self, query: str) -> None:
        self.state.query = query

    def toggle_rating_filter(self) -> float:
        self.state.min_rating = RATING_FILTER_THRESHOLD if self.state.min_rating == 0 else 0.0
        return self.state.min_rating

    def clear_filters(self) -> None:
        self.state.query = ""
        self.state.min_rating = 0.0

    def set_view_mode(self, mode: ViewMode) -> None:
        self.state.view_mode = mode

    def filtered(self) -> list[Location]:
        return filter_locations(self.state.locations, self.state.query, self.state.min_rating)

    def render_map(self, on_select: SelectHandler) -> DisplayResult:
        display = self._display or get_display_provider()
        return display.render(self.filtered(), on_select, self.state.viewport)
