"""Module catalog extractors."""
