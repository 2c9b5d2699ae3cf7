"""HTTP surface for the catalog browser."""
