"""Read-time enrichment of ingredients, menu items and recipes."""
