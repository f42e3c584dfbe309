"""Menu section use cases."""
