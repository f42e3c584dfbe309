"""Menu use cases."""
