"""Domain layer of the reporting engine."""
