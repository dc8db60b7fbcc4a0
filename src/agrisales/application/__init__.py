"""Application layer: DTOs, ports and queries."""
