"""
Filter schema: dimensions, options and per-kind configuration.
"""
from catalog_facets.schema.dimensions import (
    AVAILABLE,
    CATEGORY,
    FEATURED,
    SEARCH,
    SORT,
    TYPE,
    Dimension,
    DimensionKind,
    FilterOption,
    FilterSchema,
    FilterValue,
)
from catalog_facets.schema.kinds import (
    PET_KIND,
    PRODUCT_KIND,
    EntityKindConfig,
    SuggestedFilter,
    build_schema,
    cross_cutting_dimensions,
)

__all__ = [
    "AVAILABLE",
    "CATEGORY",
    "FEATURED",
    "SEARCH",
    "SORT",
    "TYPE",
    "Dimension",
    "DimensionKind",
    "FilterOption",
    "FilterSchema",
    "FilterValue",
    "PET_KIND",
    "PRODUCT_KIND",
    "EntityKindConfig",
    "SuggestedFilter",
    "build_schema",
    "cross_cutting_dimensions",
]
