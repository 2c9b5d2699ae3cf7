"""Catalog browser service: product listing, category browsing and line-item totals."""

__version__ = "1.0.0"
