"""Infrastructure layer: persistence adapters, identity provider, config."""
