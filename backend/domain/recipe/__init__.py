"""Recipe domain."""
