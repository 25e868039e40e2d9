import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from student_explorer.locations.data_store import (
    get_location,
    get_locations,
    load_locations,
    parse_locations,
)


def _record(**overrides):
    record = {
        "id": "1",
        "name": "Olivo",
        "address": "Piața Muzeului 4",
        "rating": 4.6,
        "short_description": "Cafenea",
        "image_url": "https://example.com/olivo.jpg",
        "coordinates": {"latitude": 46.77, "longitude": 23.59},
    }
    record.update(overrides)
    return record


def test_parse_locations_keeps_order():
    locations = parse_locations([_record(id="2"), _record(id="1")])
    assert [loc.id for loc in locations] == ["2", "1"]


def test_parse_locations_skips_malformed_records():
    records = [_record(id="1"), {"id": "2", "name": "No rating"}, _record(id="3", rating=7.5)]
    locations = parse_locations(records)
    assert [loc.id for loc in locations] == ["1"]


def test_parse_locations_skips_duplicate_ids():
    locations = parse_locations([_record(id="1", name="First"), _record(id="1", name="Second")])
    assert len(locations) == 1
    assert locations[0].name == "First"


def test_parse_locations_accepts_numeric_ids_and_missing_coordinates():
    (location,) = parse_locations([_record(id=7, coordinates=None)])
    assert location.id == "7"
    assert location.coordinates is None


def test_locations_are_immutable():
    (location,) = parse_locations([_record()])
    with pytest.raises(ValidationError):
        location.name = "Changed"


def test_load_locations_from_file(tmp_path: Path):
    path = tmp_path / "locations.json"
    path.write_text(json.dumps([_record(id="a"), _record(id="b")]), encoding="utf-8")
    assert [loc.id for loc in load_locations(path)] == ["a", "b"]


def test_load_locations_rejects_non_array(tmp_path: Path):
    path = tmp_path / "locations.json"
    path.write_text(json.dumps({"id": "1"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_locations(path)


def test_bundled_catalogue_loads_once():
    first = get_locations()
    assert len(first) > 0
    assert get_locations() is first
    assert len({loc.id for loc in first}) == len(first)


def test_get_location():
    first = get_locations()[0]
    assert get_location(first.id) is first
    assert get_location("does-not-exist") is None
