from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from ..locations.models import Location


class GenerationStatus(str, Enum):
    idle = "idle"
    generating = "generating"
    done = "done"
    failed = "failed"


class DetailState(BaseModel):
    location: Location
    description: str
    status: GenerationStatus = GenerationStatus.idle

    @property
    def is_generating(self) -> bool:
        return self.status is GenerationStatus.generating


class DetailViewResponse(BaseModel):
    view_id: str
    location: Location
    description: str
    status: GenerationStatus
