"""Application layer: commands, queries, services and request context."""
