from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


class Location(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str = Field(..., min_length=1)
    name: str
    address: str
    rating: float = Field(..., ge=0.0, le=5.0)
    short_description: str = ""
    image_url: str = ""
    coordinates: Coordinates | None = None


class LocationListResponse(BaseModel):
    locations: list[Location]
    total: int
    has_active_filters: bool
