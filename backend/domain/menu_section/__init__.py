"""Menu section domain."""
