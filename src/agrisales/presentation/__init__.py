"""Presentation layer: CLI and display formatting."""
