"""Student Explorer API."""
