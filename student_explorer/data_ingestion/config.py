"""
Configuration for turning a raw venue export into the bundled dataset.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for the location ingestion script.
    """

    raw_csv_path: Path = Path("student_explorer/data/raw/venues.csv")
    processed_data_dir: Path = Path("student_explorer/data")
    processed_filename: str = "locations.json"

    @property
    def processed_path(self) -> Path:
        return self.processed_data_dir / self.processed_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
