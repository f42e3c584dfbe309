"""Restaurant membership and access policy."""
