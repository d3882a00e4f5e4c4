"""
Facet counting.

count_facets() makes one pass over a base collection and, for every faceted
dimension, tallies each entity under its own value ("how many results would I
get if I picked this option"). The "all" tally is accumulated in the same
pass. An entity with no value for a dimension is skipped for that dimension
only.
"""
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from catalog_facets.filtering.ranges import Bounds, in_bucket, parse_range, to_number
from catalog_facets.filtering.values import EntityReader, slugify
from catalog_facets.schema.dimensions import (
    AVAILABLE,
    CATEGORY,
    FEATURED,
    TYPE,
    Dimension,
    DimensionKind,
    FilterSchema,
)
from catalog_facets.taxonomy import ALL
from catalog_facets.utils.logger import get_logger

logger = get_logger("filtering.facets")

FacetCounts = Dict[str, Dict[str, int]]

# Maps an entity to the option keys it counts toward, or None when the entity
# has no value for the dimension
Keyer = Callable[[Mapping[str, Any]], Optional[List[str]]]


def _single(key: Optional[str]) -> Optional[List[str]]:
    return [key] if key else None


def _bool_key(value: Optional[bool]) -> Optional[List[str]]:
    if value is None:
        return None
    return ["true" if value else "false"]


class FacetCounter:
    """Single-pass facet aggregation for one entity kind."""

    def __init__(self, schema: FilterSchema, reader: EntityReader):
        self.schema = schema
        self.reader = reader
        self._dimensions: Tuple[Dimension, ...] = tuple(d for d in schema if d.faceted)
        self._keyers: Dict[str, Keyer] = {d.name: self._keyer(d) for d in self._dimensions}

    @staticmethod
    def _range_buckets(dimension: Dimension) -> List[Tuple[str, Bounds]]:
        buckets = []
        for option in dimension.options:
            bounds = parse_range(option.value)
            if bounds is not None:
                buckets.append((option.value, bounds))
        return buckets

    def _keyer(self, dimension: Dimension) -> Keyer:
        name = dimension.name
        field_name = dimension.field or name
        reader = self.reader

        if name == CATEGORY:
            def keys(entity):
                category = reader.category_of(entity)
                return None if category == ALL else [category]
            return keys

        if name == TYPE:
            return lambda entity: _single(reader.type_of(entity))

        if name == FEATURED:
            return lambda entity: _bool_key(reader.is_featured(entity))

        if name == AVAILABLE:
            return lambda entity: _bool_key(reader.is_available(entity))

        if dimension.kind == DimensionKind.RANGE:
            buckets = self._range_buckets(dimension)

            def keys(entity):
                value = entity.get(field_name)
                if to_number(value) is None:
                    return None
                return [option for option, bounds in buckets if in_bucket(value, bounds)]
            return keys

        if dimension.kind == DimensionKind.TEXT:
            return lambda entity: _single(slugify(entity.get(field_name)))

        return lambda entity: _single(reader.select_value(entity, field_name))

    def empty_counts(self) -> FacetCounts:
        """Zeroed tallies for every declared option (and 'all')."""
        counts: FacetCounts = {}
        for dimension in self._dimensions:
            tally = {option.value: 0 for option in dimension.options}
            tally[ALL] = 0
            counts[dimension.name] = tally
        return counts

    def count_facets(self, entities: Iterable[Any]) -> FacetCounts:
        counts = self.empty_counts()
        skipped = 0

        for entity in entities:
            if not isinstance(entity, Mapping):
                skipped += 1
                continue
            for dimension in self._dimensions:
                keys = self._keyers[dimension.name](entity)
                if keys is None:
                    continue
                tally = counts[dimension.name]
                for key in keys:
                    if key != ALL:
                        tally[key] = tally.get(key, 0) + 1
                tally[ALL] += 1

        if skipped:
            logger.debug(f"[{self.schema.kind}] Skipped {skipped} non-mapping entities while counting facets")
        return counts

    __call__ = count_facets
