"""
Dataset ingestion.

Responsibilities:
- Read a raw venue spreadsheet export (CSV).
- Normalize it into the canonical Location schema.
- Write the JSON array bundled with the service.
"""
