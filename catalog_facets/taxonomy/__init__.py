"""
Type -> category taxonomies.
"""
from catalog_facets.taxonomy.registry import ALL, CategoryEntry, TaxonomyEntry, TaxonomyRegistry
from catalog_facets.taxonomy.catalogs import PET_TAXONOMY, PRODUCT_TAXONOMY

__all__ = [
    "ALL",
    "CategoryEntry",
    "TaxonomyEntry",
    "TaxonomyRegistry",
    "PET_TAXONOMY",
    "PRODUCT_TAXONOMY",
]
