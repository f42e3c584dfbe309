"""Persistence adapters and repositories."""
