"""
Location catalogue.

Responsibilities:
- Load the bundled location dataset once and keep it in memory.
- Validate records into immutable ``Location`` models.
- Filter the catalogue by free-text query and minimum rating.
"""
