"""Export tools for normalizing RADIUS dictionaries."""

from .export import export_dictionary

__all__ = ["export_dictionary"]
