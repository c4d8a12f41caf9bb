"""Concrete implementations of the core ports."""
