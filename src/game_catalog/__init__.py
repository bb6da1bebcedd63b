"""Game catalog HTTP API."""
