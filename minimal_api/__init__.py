"""Minimal API — CRUD scaffold for an in-memory Todo resource."""
