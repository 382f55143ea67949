"""Presentation layer: test framework integrations."""
