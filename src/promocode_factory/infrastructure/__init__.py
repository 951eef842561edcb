"""Infrastructure adapters: persistence and HTTP API."""
