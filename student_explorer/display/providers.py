from __future__ import annotations

import html
import importlib
import logging
import math
from collections.abc import Callable, Sequence
from types import ModuleType

from ..locations.models import Location
from .config import DEFAULT_DISPLAY_CONFIG, DisplayConfig
from .models import (
    DisplayMode,
    DisplayNotice,
    DisplayResult,
    ListRow,
    MapMarker,
    Viewport,
)

logger = logging.getLogger(__name__)

SelectHandler = Callable[[Location], str]

UNAVAILABLE_NOTICE = DisplayNotice(
    title="Hartă indisponibilă în acest mediu",
    text="Pentru a folosi hărțile, instalează aplicația cu suport pentru hărți.",
)
NO_RESULTS_NOTICE = DisplayNotice(
    title="Nicio locație pentru filtrele curente",
    text="Revino la vizualizarea listă pentru a ajusta căutarea sau filtrele.",
)


def _zoom_for_span(latitude_delta: float) -> int:
    """Map a latitude span in degrees to the closest web-map zoom level."""
    return max(1, min(18, round(math.log2(360.0 / latitude_delta))))


def _notice_page(notice: DisplayNotice, rows: Sequence[ListRow] = ()) -> str:
    items = "".join(
        f'<li><a href="{html.escape(row.select_url)}">{html.escape(row.name)}</a>'
        f"<br><small>{html.escape(row.address)}</small></li>"
        for row in rows
    )
    listing = f"<ul>{items}</ul>" if rows else ""
    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\"></head><body>"
        f"<h2>{html.escape(notice.title)}</h2><p>{html.escape(notice.text)}</p>"
        f"{listing}</body></html>"
    )


class DisplayProvider:
    mode: DisplayMode

    def render(
        self,
        locations: Sequence[Location],
        on_select: SelectHandler,
        viewport: Viewport | None = None,
    ) -> DisplayResult:
        raise NotImplementedError


class MapDisplay(DisplayProvider):
    """Interactive map with one marker per location that has coordinates."""

    mode = DisplayMode.map

    def __init__(self, maps: ModuleType, config: DisplayConfig = DEFAULT_DISPLAY_CONFIG) -> None:
        self._maps = maps
        self._config = config

    def render(
        self,
        locations: Sequence[Location],
        on_select: SelectHandler,
        viewport: Viewport | None = None,
    ) -> DisplayResult:
        viewport = viewport or Viewport()

        if not locations:
            return DisplayResult(
                mode=self.mode,
                viewport=viewport,
                notice=NO_RESULTS_NOTICE,
                html=_notice_page(NO_RESULTS_NOTICE),
            )

        fmap = self._maps.Map(
            location=[viewport.latitude, viewport.longitude],
            zoom_start=_zoom_for_span(viewport.latitude_delta),
            tiles=self._config.tiles,
        )
        markers: list[MapMarker] = []
        for location in locations:
            if location.coordinates is None:
                continue
            marker = MapMarker(
                location_id=location.id,
                name=location.name,
                address=location.address,
                latitude=location.coordinates.latitude,
                longitude=location.coordinates.longitude,
                select_url=on_select(location),
            )
            popup = (
                f'<a href="{html.escape(marker.select_url)}" target="_top">'
                f"{html.escape(marker.name)}</a><br>{html.escape(marker.address)}"
            )
            self._maps.Marker(
                [marker.latitude, marker.longitude],
                tooltip=marker.name,
                popup=popup,
            ).add_to(fmap)
            markers.append(marker)

        return DisplayResult(
            mode=self.mode,
            viewport=viewport,
            markers=markers,
            html=fmap.get_root().render(),
        )


class ListDisplay(DisplayProvider):
    """Fallback used when no map library is installed. Never reads coordinates."""

    mode = DisplayMode.list

    def render(
        self,
        locations: Sequence[Location],
        on_select: SelectHandler,
        viewport: Viewport | None = None,
    ) -> DisplayResult:
        rows = [
            ListRow(
                location_id=location.id,
                name=location.name,
                address=location.address,
                select_url=on_select(location),
            )
            for location in locations
        ]
        return DisplayResult(
            mode=self.mode,
            rows=rows,
            notice=UNAVAILABLE_NOTICE,
            html=_notice_page(UNAVAILABLE_NOTICE, rows),
        )


_provider: DisplayProvider | None = None


def detect_map_capability(module_name: str) -> ModuleType | None:
    """Import the map library, or return ``None`` if it is missing or unusable."""
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        return None
    except Exception:
        logger.warning("Map module %r failed to load", module_name, exc_info=True)
        return None
    if not (hasattr(module, "Map") and hasattr(module, "Marker")):
        return None
    return module


def resolve_display_provider(config: DisplayConfig = DEFAULT_DISPLAY_CONFIG) -> DisplayProvider:
    maps = detect_map_capability(config.map_module)
    if maps is None:
        logger.info("Map module %r not available, locations will be shown as a list", config.map_module)
        return ListDisplay()
    logger.info("Map module %r available, locations will be shown on a map", config.map_module)
    return MapDisplay(maps, config)


def get_display_provider() -> DisplayProvider:
    """Return the process-wide display provider, checking on first call only."""
    global _provider
    if _provider is None:
        _provider = resolve_display_provider()
    return _provider


def reset_display_provider() -> None:
    global _provider
    _provider = None
