"""Allergy use cases."""
