"""Restaurant use cases."""
