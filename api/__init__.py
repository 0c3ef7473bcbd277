"""Quiz practice HTTP API."""
