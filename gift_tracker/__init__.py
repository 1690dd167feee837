"""Gift Tracker API."""
