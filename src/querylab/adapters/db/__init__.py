"""Database plumbing: engine setup, shared metadata and migrations."""
