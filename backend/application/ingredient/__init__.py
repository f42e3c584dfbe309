"""Ingredient use cases."""
