"""Menu item domain."""
