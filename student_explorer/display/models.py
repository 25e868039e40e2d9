from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from .config import DEFAULT_DISPLAY_CONFIG


class Viewport(BaseModel):
    latitude: float = Field(default=DEFAULT_DISPLAY_CONFIG.default_latitude, ge=-90.0, le=90.0)
    longitude: float = Field(default=DEFAULT_DISPLAY_CONFIG.default_longitude, ge=-180.0, le=180.0)
    latitude_delta: float = Field(default=DEFAULT_DISPLAY_CONFIG.default_delta, gt=0.0)
    longitude_delta: float = Field(default=DEFAULT_DISPLAY_CONFIG.default_delta, gt=0.0)


class DisplayMode(str, Enum):
    map = "map"
    list = "list"


class DisplayNotice(BaseModel):
    title: str
    text: str


class MapMarker(BaseModel):
    location_id: str
    name: str
    address: str
    latitude: float
    longitude: float
    select_url: str


class ListRow(BaseModel):
    location_id: str
    name: str
    address: str
    select_url: str


class DisplayResult(BaseModel):
    mode: DisplayMode
    viewport: Viewport | None = None
    markers: list[MapMarker] = Field(default_factory=list)
    rows: list[ListRow] = Field(default_factory=list)
    notice: DisplayNotice | None = None
    html: str = ""
