"""Persistence: engine/session factory, safe query execution and source repositories."""
