"""Persistence backends, file loading, and runtime logging."""
