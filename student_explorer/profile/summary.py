from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel

from ..locations.models import Location

AVATAR_URL = "https://images.unsplash.com/photo-1535713875002-d1d0cf377fde?w=400"


class ProfileResponse(BaseModel):
    name: str
    email: str
    avatar_url: str
    locations_count: int
    average_rating: float


def build_profile(locations: Sequence[Location]) -> ProfileResponse:
    average = round(sum(loc.rating for loc in locations) / len(locations), 1) if locations else 0.0
    return ProfileResponse(
        name="Student Explorer",
        email="student@universitate.ro",
        avatar_url=AVATAR_URL,
        locations_count=len(locations),
        average_rating=average,
    )
