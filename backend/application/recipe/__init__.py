"""Recipe use cases."""
