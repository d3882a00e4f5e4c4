"""
Entity-kind configurations and the generic schema builder.

Each kind (pets, products) is described by an EntityKindConfig. build_schema()
turns a config into a FilterSchema by templating the category/type dimensions
from the kind's taxonomy, appending the kind-specific dimensions, and then the
cross-cutting dimensions that are identical in shape for every kind.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

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
)
from catalog_facets.taxonomy import ALL, PET_TAXONOMY, PRODUCT_TAXONOMY, TaxonomyRegistry

SortKeys = Tuple[Tuple[str, int], ...]


class SuggestedFilter(BaseModel):
    """A labelled quick-filter preset (e.g. "Top Rated")."""
    model_config = ConfigDict(frozen=True)

    label: str
    filters: Dict[str, Any] = Field(..., description="Raw filter selections, validated on use")
    icon: Optional[str] = None


@dataclass(frozen=True)
class EntityKindConfig:
    """Everything that differs between entity kinds."""
    kind: str
    display_name: str
    taxonomy: TaxonomyRegistry
    category_label: str
    type_label: str
    # Entity fields holding the specific type, in lookup order
    type_fields: Tuple[str, ...]
    # Storage field the category/type predicates are written against
    backend_type_field: str
    dimensions: Tuple[Dimension, ...]
    search_fields: Tuple[str, ...]
    backend_search_fields: Tuple[str, ...]
    search_placeholder: str = "Search..."
    sort_options: Tuple[FilterOption, ...] = ()
    sort_keys: Dict[str, SortKeys] = field(default_factory=dict)
    featured_label: str = "Featured Only"
    unavailable_label: str = "Unavailable"
    suggested_filters: Tuple[SuggestedFilter, ...] = ()


def _all_option(label: str) -> FilterOption:
    return FilterOption(value=ALL, label=label)


def _select(name: str, label: str, all_label: str, options: Tuple[Tuple[str, str], ...],
            kind: DimensionKind = DimensionKind.SELECT, entity_field: Optional[str] = None) -> Dimension:
    return Dimension(
        name=name,
        label=label,
        kind=kind,
        options=(_all_option(all_label),) + tuple(FilterOption(value=v, label=l) for v, l in options),
        default=ALL,
        catch_all=ALL,
        field=entity_field or name,
    )


# ============================================================================
# Shared sort options
# ============================================================================

BASE_SORT_OPTIONS: Tuple[FilterOption, ...] = (
    FilterOption(value="newest", label="Newest First"),
    FilterOption(value="oldest", label="Oldest First"),
    FilterOption(value="name", label="Name A-Z"),
    FilterOption(value="name-desc", label="Name Z-A"),
    FilterOption(value="featured", label="Featured First"),
)

BASE_SORT_KEYS: Dict[str, SortKeys] = {
    "newest": (("createdAt", -1),),
    "oldest": (("createdAt", 1),),
    "name": (("name", 1),),
    "name-desc": (("name", -1),),
    "featured": (("featured", -1), ("createdAt", -1)),
}

PRICE_SORT_OPTIONS: Tuple[FilterOption, ...] = (
    FilterOption(value="price-low", label="Price: Low to High"),
    FilterOption(value="price-high", label="Price: High to Low"),
)

PRICE_SORT_KEYS: Dict[str, SortKeys] = {
    "price-low": (("price", 1),),
    "price-high": (("price", -1),),
}


# ============================================================================
# Kind Definitions
# ============================================================================

# 1. Pets
PET_KIND = EntityKindConfig(
    kind="pets",
    display_name="Pets",
    taxonomy=PET_TAXONOMY,
    category_label="Pet Category",
    type_label="Pet Type",
    type_fields=("type", "species"),
    backend_type_field="type",
    dimensions=(
        _select("size", "Size", "All Sizes", (
            ("small", "Small"),
            ("medium", "Medium"),
            ("large", "Large"),
            ("extra-large", "Extra Large"),
        )),
        _select("gender", "Gender", "All Genders", (
            ("male", "Male"),
            ("female", "Female"),
            ("unknown", "Unknown"),
        )),
        _select("age", "Age", "All Ages", (
            ("puppy/kitten", "Puppy/Kitten"),
            ("young", "Young"),
            ("adult", "Adult"),
            ("senior", "Senior"),
        )),
    ),
    search_fields=("name", "type", "breed", "description"),
    backend_search_fields=("name", "breed", "description", "type"),
    search_placeholder="Search by name, breed...",
    sort_options=BASE_SORT_OPTIONS + PRICE_SORT_OPTIONS + (
        FilterOption(value="popular", label="Most Viewed"),
    ),
    sort_keys={
        **BASE_SORT_KEYS,
        **PRICE_SORT_KEYS,
        "popular": (("views", -1),),
    },
    featured_label="Featured Pets",
    unavailable_label="Adopted / Unavailable",
    suggested_filters=(
        SuggestedFilter(label="Dogs", filters={"category": "dogs"}, icon="🐕"),
        SuggestedFilter(label="Cats", filters={"category": "cats"}, icon="🐱"),
        SuggestedFilter(label="Puppies & Kittens", filters={"age": "puppy/kitten"}, icon="🍼"),
        SuggestedFilter(label="Small Pets", filters={"size": "small"}, icon="🐹"),
        SuggestedFilter(label="Featured Pets", filters={"featured": True}, icon="🏆"),
    ),
)

# 2. Products
PRODUCT_KIND = EntityKindConfig(
    kind="products",
    display_name="Products",
    taxonomy=PRODUCT_TAXONOMY,
    category_label="Product Category",
    type_label="Product Type",
    type_fields=("type", "category"),
    backend_type_field="category",
    dimensions=(
        _select("price", "Price Range", "Any Price", (
            ("0-15", "Under $15"),
            ("15-30", "$15 - $30"),
            ("30-50", "$30 - $50"),
            ("50-100", "$50 - $100"),
            ("100+", "$100+"),
        ), kind=DimensionKind.RANGE),
        # Free text; the options are suggestions for the sidebar
        _select("brand", "Brand", "All Brands", (
            ("kong", "KONG"),
            ("purina", "Purina"),
            ("royal-canin", "Royal Canin"),
            ("petmate", "Petmate"),
            ("blue-buffalo", "Blue Buffalo"),
        ), kind=DimensionKind.TEXT),
        _select("rating", "Customer Rating", "Any Rating", (
            ("4+", "4+ Stars"),
            ("3+", "3+ Stars"),
            ("2+", "2+ Stars"),
        ), kind=DimensionKind.RANGE),
    ),
    search_fields=("name", "type", "category", "brand", "description"),
    backend_search_fields=("name", "brand", "description", "category"),
    search_placeholder="Search products...",
    sort_options=BASE_SORT_OPTIONS + PRICE_SORT_OPTIONS,
    sort_keys={**BASE_SORT_KEYS, **PRICE_SORT_KEYS},
    featured_label="Featured Items",
    suggested_filters=(
        SuggestedFilter(label="Dog Food", filters={"category": "food", "search": "dog"}, icon="🥘"),
        SuggestedFilter(label="Cat Toys", filters={"category": "toys", "search": "cat"}, icon="🧩"),
        SuggestedFilter(label="Under $15", filters={"price": "0-15"}, icon="💰"),
        SuggestedFilter(label="Top Rated", filters={"rating": "4+"}, icon="⭐"),
        SuggestedFilter(label="Featured Items", filters={"featured": True}, icon="🏆"),
        SuggestedFilter(label="KONG Products", filters={"brand": "kong"}, icon="🦴"),
    ),
)


# ============================================================================
# Schema Builder
# ============================================================================

def _category_dimension(config: EntityKindConfig) -> Dimension:
    options = (_all_option(f"All {config.display_name}"),) + tuple(
        FilterOption(value=c.value, label=c.label) for c in config.taxonomy.categories()
    )
    return Dimension(
        name=CATEGORY,
        label=config.category_label,
        kind=DimensionKind.SELECT,
        options=options,
        default=ALL,
        catch_all=ALL,
    )


def _type_dimension(config: EntityKindConfig) -> Dimension:
    options = (_all_option("All Types"),) + tuple(
        FilterOption(value=e.type_key, label=e.label, icon=e.icon or None, category=e.category)
        for e in config.taxonomy.types()
    )
    return Dimension(
        name=TYPE,
        label=config.type_label,
        kind=DimensionKind.SELECT,
        options=options,
        default=ALL,
        catch_all=ALL,
        field=config.type_fields[0],
    )


def cross_cutting_dimensions(config: EntityKindConfig, default_sort: str = "newest",
                             status_field: str = "status") -> Tuple[Dimension, ...]:
    """search, featured, available and sort: the same shape for every kind."""
    sort_values = [o.value for o in config.sort_options]
    if default_sort not in sort_values:
        default_sort = sort_values[0] if sort_values else "newest"

    return (
        Dimension(
            name=SEARCH,
            label="Search",
            kind=DimensionKind.TEXT,
            default="",
            placeholder=config.search_placeholder,
            faceted=False,
        ),
        Dimension(
            name=FEATURED,
            label="Featured",
            kind=DimensionKind.BOOLEAN,
            options=(
                _all_option("All Items"),
                FilterOption(value="true", label=config.featured_label),
            ),
            default=None,
            field="featured",
        ),
        Dimension(
            name=AVAILABLE,
            label="Availability",
            kind=DimensionKind.BOOLEAN,
            options=(
                FilterOption(value="true", label="Available"),
                FilterOption(value="false", label=config.unavailable_label),
                _all_option("All"),
            ),
            default=True,
            field=status_field,
        ),
        Dimension(
            name=SORT,
            label="Sort By",
            kind=DimensionKind.SELECT,
            options=config.sort_options,
            default=default_sort,
            faceted=False,
        ),
    )


def build_schema(config: EntityKindConfig, default_sort: str = "newest",
                 status_field: str = "status") -> FilterSchema:
    """Assemble the full, ordered schema for an entity kind."""
    return FilterSchema(
        kind=config.kind,
        dimensions=(
            _category_dimension(config),
            _type_dimension(config),
            *config.dimensions,
            *cross_cutting_dimensions(config, default_sort=default_sort, status_field=status_field),
        ),
    )
