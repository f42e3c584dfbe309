"""Equipment use cases."""
