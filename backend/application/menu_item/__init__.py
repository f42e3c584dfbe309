"""Menu item use cases."""
