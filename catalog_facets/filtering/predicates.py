"""
In-memory predicate evaluation.

matches() tests a single entity against a canonical filter state; every
constrained dimension must hold (AND). filter_collection() applies it over a
collection and keeps the input order; sorting is a separate, explicit step.
"""
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from catalog_facets.filtering.ranges import in_range, parse_range, to_number
from catalog_facets.filtering.values import EntityReader, normalize_token, slugify
from catalog_facets.schema.dimensions import (
    AVAILABLE,
    CATEGORY,
    FEATURED,
    SEARCH,
    SORT,
    TYPE,
    Dimension,
    DimensionKind,
    FilterSchema,
)
from catalog_facets.schema.kinds import EntityKindConfig, SortKeys
from catalog_facets.utils.logger import get_logger

logger = get_logger("filtering.predicates")


def _sort_value(value: Any) -> Optional[Tuple[int, Any]]:
    """Comparable key for mixed-type fields; None when the value is missing."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return (0, int(value))
    if isinstance(value, datetime):
        return (0, value.timestamp())
    if isinstance(value, date):
        return (0, datetime(value.year, value.month, value.day).timestamp())
    number = to_number(value)
    if number is not None:
        return (0, number)
    if isinstance(value, str):
        return (1, value.casefold())
    return (1, str(value).casefold())


class PredicateEvaluator:
    """Evaluates canonical filter states against entities of one kind."""

    def __init__(self, kind: EntityKindConfig, schema: FilterSchema, reader: EntityReader):
        self.kind = kind
        self.schema = schema
        self.reader = reader

    # ------------------------------------------------------------------
    # Single dimension tests
    # ------------------------------------------------------------------

    def _matches_dimension(self, entity: Mapping[str, Any], dimension: Dimension, value: Any) -> bool:
        name = dimension.name

        if name == CATEGORY:
            return self.reader.category_of(entity) == value

        if name == TYPE:
            return self.reader.type_of(entity) == value

        if name == SEARCH:
            needle = value.strip().lower() if isinstance(value, str) else ""
            return not needle or needle in self.reader.search_text(entity)

        if name == FEATURED:
            return bool(self.reader.is_featured(entity)) is value

        if name == AVAILABLE:
            return self.reader.is_available(entity) is value

        if dimension.kind == DimensionKind.RANGE:
            bounds = parse_range(value)
            if bounds is None:
                return True
            return in_range(entity.get(dimension.field or name), bounds)

        if dimension.kind == DimensionKind.TEXT:
            # Partial slug match; "royal-canin" finds "Royal Canin Ltd"
            needle = slugify(value)
            haystack = slugify(entity.get(dimension.field or name))
            return not needle or (haystack is not None and needle in haystack)

        return self.reader.select_value(entity, dimension.field or name) == normalize_token(value)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def active_dimensions(self, state: Mapping[str, Any]) -> List[Tuple[Dimension, Any]]:
        """Dimensions of the state that actually constrain results."""
        active = []
        for dimension in self.schema:
            if dimension.name == SORT or dimension.name not in state:
                continue
            value = state[dimension.name]
            if dimension.is_unconstrained(value):
                continue
            active.append((dimension, value))
        return active

    def matches(self, entity: Any, state: Mapping[str, Any]) -> bool:
        if not isinstance(entity, Mapping):
            return False
        return all(
            self._matches_dimension(entity, dimension, value)
            for dimension, value in self.active_dimensions(state)
        )

    def filter_collection(self, entities: Iterable[Any], state: Mapping[str, Any]) -> List[Any]:
        """Entities matching the state, in their original order."""
        active = self.active_dimensions(state)
        results = [
            entity for entity in entities
            if isinstance(entity, Mapping)
            and all(self._matches_dimension(entity, d, v) for d, v in active)
        ]
        logger.debug(
            f"[{self.kind.kind}] {len(results)} entities matched "
            f"{[d.name for d, _ in active] or 'no constraints'}"
        )
        return results

    def active_filter_count(self, state: Mapping[str, Any]) -> int:
        """Number of dimensions (sort excluded) set to something other than the default."""
        return sum(
            1 for dimension in self.schema
            if dimension.name != SORT
            and dimension.name in state
            and not dimension.is_default(state[dimension.name])
        )

    def sort_keys(self, sort: Any) -> SortKeys:
        keys = self.kind.sort_keys.get(sort) if isinstance(sort, str) else None
        if keys is None:
            sort_dimension = self.schema.get(SORT)
            keys = self.kind.sort_keys.get(sort_dimension.default, ()) if sort_dimension else ()
        return keys

    def sort_collection(self, entities: Sequence[Any], sort: Any) -> List[Any]:
        """
        Sort entities by a sort option (e.g. 'newest', 'price-low').

        Entities missing a sort field go last for that key regardless of
        direction; ties keep their relative order.
        """
        items = [e for e in entities if isinstance(e, Mapping)]
        for field_name, direction in reversed(self.sort_keys(sort)):
            present = [(e, _sort_value(e.get(field_name))) for e in items]
            keyed = [(e, k) for e, k in present if k is not None]
            missing = [e for e, k in present if k is None]
            keyed.sort(key=lambda pair: pair[1], reverse=direction < 0)
            items = [e for e, _ in keyed] + missing
        return items
