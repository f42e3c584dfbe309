"""Restaurant (tenant) domain."""
