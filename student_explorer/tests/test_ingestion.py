import json
from pathlib import Path

import pandas as pd
import pytest

from student_explorer.data_ingestion.config import IngestionConfig
from student_explorer.data_ingestion.ingest import CANONICAL_FIELDS, _normalize_rating, run_ingestion
from student_explorer.locations.data_store import load_locations


def _write_raw(path: Path, rows: list[dict]) -> Path:
    pd.DataFrame(rows).to_csv(path, index=False)
    return path


def test_run_ingestion_writes_loadable_locations(tmp_path: Path):
    raw = _write_raw(tmp_path / "venues.csv", [
        {"venue": "Olivo", "street": "Piața Muzeului 4", "rate": "4.63/5",
         "description": "Cafenea", "image": "https://example.com/o.jpg", "lat": 46.77, "lng": 23.59},
        {"venue": "Pop-up", "street": "Unknown", "rate": 9, "description": "", "image": "", "lat": None, "lng": None},
        {"venue": "", "street": "No name", "rate": 4, "description": "", "image": "", "lat": None, "lng": None},
        {"venue": "Broken", "street": "Somewhere", "rate": "n/a", "description": "", "image": "", "lat": None, "lng": None},
    ])
    cfg = IngestionConfig(raw_csv_path=raw, processed_data_dir=tmp_path / "processed")

    output_path = run_ingestion(config=cfg)

    assert output_path.is_file(), "Locations JSON should be created"
    records = json.loads(output_path.read_text(encoding="utf-8"))
    assert [r["name"] for r in records] == ["Olivo", "Pop-up"]
    assert list(records[0].keys()) == CANONICAL_FIELDS
    assert records[0]["rating"] == 4.6
    assert records[0]["coordinates"] == {"latitude": 46.77, "longitude": 23.59}
    assert records[1]["rating"] == 5.0
    assert records[1]["coordinates"] is None

    locations = load_locations(output_path)
    assert [loc.id for loc in locations] == ["1", "2"]


def test_run_ingestion_requires_name_and_rating(tmp_path: Path):
    raw = _write_raw(tmp_path / "venues.csv", [{"street": "Main St"}])
    cfg = IngestionConfig(raw_csv_path=raw, processed_data_dir=tmp_path / "processed")
    with pytest.raises(ValueError):
        run_ingestion(config=cfg)


def test_normalize_rating():
    assert _normalize_rating("4.1/5") == 4.1
    assert _normalize_rating(-1) == 0.0
    assert _normalize_rating(None) is None
    assert _normalize_rating("new") is None


def test_run_ingestion_numeric_ids_with_blanks(tmp_path: Path):
    raw = _write_raw(tmp_path / "venues.csv", [
        {"id": 10, "name": "Olivo", "rating": 4.6},
        {"id": None, "name": "No id", "rating": 4.0},
        {"id": 12, "name": "Flying Circus", "rating": 4.3},
    ])
    cfg = IngestionConfig(raw_csv_path=raw, processed_data_dir=tmp_path / "processed")

    records = json.loads(run_ingestion(config=cfg).read_text(encoding="utf-8"))

    assert [r["id"] for r in records] == ["10", "12"]
    assert [r["name"] for r in records] == ["Olivo", "Flying Circus"]
