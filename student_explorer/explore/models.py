from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..display.models import Viewport
from ..locations.filtering import has_active_filters
from ..locations.models import Location


class ViewMode(str, Enum):
    list = "list"
    map = "map"


class ExploreState(BaseModel):
    loading: bool = True
    locations: tuple[Location, ...] = ()
    query: str = ""
    min_rating: float = 0.0
    view_mode: ViewMode = ViewMode.list
    viewport: Viewport = Field(default_factory=Viewport)

    @property
    def has_active_filters(self) -> bool:
        return has_active_filters(self.query, self.min_rating)


class SearchRequest(BaseModel):
    query: str = Field(default="", max_length=200)


class ViewModeRequest(BaseModel):
    mode: ViewMode


class PositionRequest(BaseModel):
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


class ExploreResponse(BaseModel):
    loading: bool
    query: str
    min_rating: float
    view_mode: ViewMode
    viewport: Viewport
    has_active_filters: bool
    locations: list[Location]
    total: int
