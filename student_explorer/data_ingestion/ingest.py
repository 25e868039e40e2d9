from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

import pandas as pd

from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig


CANONICAL_FIELDS: List[str] = [
    "id",
    "name",
    "address",
    "rating",
    "short_description",
    "image_url",
    "coordinates",
]


def _normalize_rating(rating: float | int | str | None) -> float | None:
    if rating is None:
        return None
    raw = str(rating).strip()
    # Handle "X/5" format (e.g. "4.1/5")
    if "/" in raw:
        raw = raw.split("/")[0].strip()
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if value != value:  # NaN
        return None

    # Clamp to [0, 5], one decimal
    return round(max(0.0, min(5.0, value)), 1)


def _coordinates(latitude: Any, longitude: Any) -> dict[str, float] | None:
    if pd.isna(latitude) or pd.isna(longitude):
        return None
    return {"latitude": float(latitude), "longitude": float(longitude)}


def _text(value: Any) -> str:
    return "" if pd.isna(value) else str(value).strip()


def _identifier(value: Any) -> str:
    # numeric id columns with blanks are read as floats
    if isinstance(value, float) and not pd.isna(value) and value.is_integer():
        return str(int(value))
    return _text(value)


def run_ingestion(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Path:
    """
    Build the bundled locations file from a raw venue export.

    Steps:
    - Read the raw CSV.
    - Map raw columns into the canonical Location schema.
    - Drop rows without an id, a name or a usable rating.
    - Persist the records as a JSON array.
    """

    config.processed_data_dir.mkdir(parents=True, exist_ok=True)

    df = pd.read_csv(config.raw_csv_path)

    # Exports from different spreadsheets spell the columns differently.
    def _first_present(columns: List[str]) -> str | None:
        for col in columns:
            if col in df.columns:
                return col
        return None

    col_id = _first_present(["id", "venue_id"])
    col_name = _first_present(["name", "venue", "venue_name"])
    col_address = _first_present(["address", "full_address", "street"])
    col_rating = _first_present(["rating", "rate", "stars"])
    col_description = _first_present(["short_description", "description", "about"])
    col_image = _first_present(["image_url", "image", "photo_url"])
    col_lat = _first_present(["latitude", "lat"])
    col_lon = _first_present(["longitude", "lon", "lng"])

    if not col_name or not col_rating:
        raise ValueError(f"{config.raw_csv_path} needs a name and a rating column")

    canonical = pd.DataFrame()
    canonical["id"] = df[col_id].apply(_identifier) if col_id else (df.index + 1).astype(str)
    canonical["name"] = df[col_name].apply(_text)
    canonical["address"] = df[col_address].apply(_text) if col_address else ""
    canonical["rating"] = df[col_rating].apply(_normalize_rating)
    canonical["short_description"] = df[col_description].apply(_text) if col_description else ""
    canonical["image_url"] = df[col_image].apply(_text) if col_image else ""
    if col_lat and col_lon:
        canonical["coordinates"] = [
            _coordinates(lat, lon) for lat, lon in zip(df[col_lat], df[col_lon])
        ]
    else:
        canonical["coordinates"] = None

    canonical = canonical[
        (canonical["id"] != "") & (canonical["name"] != "") & canonical["rating"].notna()
    ]
    canonical = canonical.drop_duplicates(subset="id", keep="first")
    canonical = canonical[CANONICAL_FIELDS]

    output_path = config.processed_path
    records = canonical.to_dict(orient="records")
    with output_path.open("w", encoding="utf-8") as fh:
        json.dump(records, fh, ensure_ascii=False, indent=2)
    return output_path


if __name__ == "__main__":
    path = run_ingestion()
    print(f"Ingestion complete. Locations saved to: {path}")
