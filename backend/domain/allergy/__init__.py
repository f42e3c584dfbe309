"""Allergy domain (global catalog)."""
