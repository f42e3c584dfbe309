"""Ingredient domain: entity, filters and allergy derivation."""
