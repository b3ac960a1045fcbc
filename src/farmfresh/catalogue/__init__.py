"""Catalogue: products and categories."""

from farmfresh.catalogue import category, product  # noqa: F401
