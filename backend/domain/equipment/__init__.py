"""Kitchen equipment domain (global catalog)."""
