"""
catalog_facets - faceted filtering for the pet and product catalog.

A filter system per entity kind provides:
- Validation of untrusted filter input into a canonical state
- In-memory filtering and single-pass facet counts
- Query-string encoding/decoding
- Translation into storage predicates
"""

from catalog_facets.core.config import FacetConfig, get_config, set_config
from catalog_facets.exceptions import CatalogFacetsError, UnknownEntityKindError
from catalog_facets.factory import (
    FilterSystem,
    build_filter_system,
    create_filter_config,
    get_filter_system,
    list_kinds,
    reset_filter_systems,
)

__all__ = [
    'FacetConfig',
    'get_config',
    'set_config',
    'CatalogFacetsError',
    'UnknownEntityKindError',
    'FilterSystem',
    'build_filter_system',
    'create_filter_config',
    'get_filter_system',
    'list_kinds',
    'reset_filter_systems',
]

__version__ = '0.1.0'
