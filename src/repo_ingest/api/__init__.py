"""HTTP API for Repo-Ingest."""
