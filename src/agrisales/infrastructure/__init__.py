"""Infrastructure layer: adapters for application ports."""
