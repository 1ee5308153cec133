"""Fuzzy, breadcrumb-driven navigation of JSON-like documents."""

__version__ = "0.1.0"
