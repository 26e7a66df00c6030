"""Chained hash table of trip records, with a menu front end and a trip file generator."""

__version__ = "0.1.0"
__all__ = ["chained_list", "table", "generator", "cli"]