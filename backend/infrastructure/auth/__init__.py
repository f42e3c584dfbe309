"""Identity provider integration (JWT verification, request middleware)."""
