"""Catalog components for the vowels package."""

from vowels.store.catalog import VowelCatalog, VOWEL_TABLE, CATALOG_SIZE, catalog

__all__ = [
    "VowelCatalog",
    "VOWEL_TABLE",
    "CATALOG_SIZE",
    "catalog",
]
