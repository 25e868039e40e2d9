from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config import DEFAULT_CATALOGUE_CONFIG
from .models import Location

logger = logging.getLogger(__name__)

_locations: tuple[Location, ...] | None = None


def parse_locations(records: list[dict[str, Any]]) -> tuple[Location, ...]:
    """
    Validate raw records into ``Location`` models.

    Malformed records and records repeating an already seen ``id`` are
    skipped with a warning; the remaining records keep their file order.
    """
    parsed: list[Location] = []
    seen: set[str] = set()
    for index, record in enumerate(records):
        try:
            location = Location.model_validate(record)
        except ValidationError as exc:
            logger.warning("Skipping malformed location record #%d: %s", index, exc)
            continue
        if location.id in seen:
            logger.warning("Skipping duplicate location id %r (record #%d)", location.id, index)
            continue
        seen.add(location.id)
        parsed.append(location)
    return tuple(parsed)


def load_locations(path: Path) -> tuple[Location, ...]:
    with path.open(encoding="utf-8") as fh:
        records = json.load(fh)
    if not isinstance(records, list):
        raise ValueError(f"{path} must contain a JSON array of locations")
    return parse_locations(records)


def get_locations() -> tuple[Location, ...]:
    """Return the in-memory location catalogue, loading it on first call."""
    global _locations
    if _locations is None:
        _locations = load_locations(DEFAULT_CATALOGUE_CONFIG.data_path)
        logger.info("Loaded %d locations from %s", len(_locations), DEFAULT_CATALOGUE_CONFIG.data_path)
    return _locations


def get_location(location_id: str) -> Location | None:
    for location in get_locations():
        if location.id == location_id:
            return location
    return None
