"""Menu domain."""
