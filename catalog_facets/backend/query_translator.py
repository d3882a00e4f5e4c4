"""
Canonical filter state -> storage predicate.

The predicate is a plain dict using Mongo-style operators ($in, $nin, $gte, $lte,
$ne, $regex, $or); executing it is the storage layer's job. The translation
mirrors the in-memory evaluator so both paths select the same entities:

- category            -> {type_field: {"$in": [types of the category]}}
- type                -> literal type, narrowed by the category
- range dimensions    -> {"$gte": min} plus "$lte" when the range is bounded
- brand (free text)   -> case-insensitive regex
- search              -> "$or" of case-insensitive regexes over search fields
- featured            -> True, or {"$ne": True} so records without the field match False
- available           -> status == available (baseline), $ne when False,
                         nothing when unset; $in / $nin with null when records
                         without a status count as available
"""
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple

from catalog_facets.core.config import FacetConfig
from catalog_facets.filtering.ranges import parse_range
from catalog_facets.schema.dimensions import (
    AVAILABLE,
    CATEGORY,
    FEATURED,
    SEARCH,
    SORT,
    TYPE,
    DimensionKind,
    FilterSchema,
)
from catalog_facets.schema.kinds import EntityKindConfig
from catalog_facets.taxonomy import ALL
from catalog_facets.utils.logger import get_logger

logger = get_logger("backend.query_translator")


def _regex(text: str) -> Dict[str, str]:
    return {"$regex": re.escape(text), "$options": "i"}


def _brand_pattern(text: str) -> str:
    # "royal-canin" should also find "Royal Canin"
    return r"[\s-]+".join(re.escape(part) for part in re.split(r"[\s-]+", text.strip()) if part)


def _number(value: float) -> Any:
    return int(value) if float(value).is_integer() else value


class BackendQueryTranslator:
    """Translates canonical states of one kind into storage predicates."""

    def __init__(self, kind: EntityKindConfig, schema: FilterSchema, config: FacetConfig,
                 search_fields: Optional[Tuple[str, ...]] = None):
        self.kind = kind
        self.schema = schema
        self.config = config
        self.search_fields = tuple(search_fields or kind.backend_search_fields)

    def _status_predicate(self, available: bool) -> Any:
        status = self.config.available_status
        if self.config.missing_status_is_available:
            # A null status matches records that have no status field at all
            return {"$in": [status, None]} if available else {"$nin": [status, None]}
        return status if available else {"$ne": status}

    def _type_predicate(self, state: Mapping[str, Any]) -> Optional[Any]:
        taxonomy = self.kind.taxonomy
        category = state.get(CATEGORY, ALL)
        selected_type = state.get(TYPE, ALL)
        has_category = isinstance(category, str) and category not in ("", ALL)
        has_type = isinstance(selected_type, str) and selected_type not in ("", ALL)

        if has_type:
            if has_category and selected_type not in taxonomy.types_of(category):
                logger.debug(
                    f"[{self.kind.kind}] Type '{selected_type}' is outside category '{category}'; "
                    f"predicate matches nothing"
                )
                return {"$in": []}
            return selected_type
        if has_category:
            return {"$in": sorted(taxonomy.types_of(category))}
        return None

    def to_backend_query(self, state: Mapping[str, Any]) -> Dict[str, Any]:
        query: Dict[str, Any] = {}

        availability = state.get(AVAILABLE, True)
        if availability is not None:
            query[self.config.status_field] = self._status_predicate(availability)

        type_predicate = self._type_predicate(state)
        if type_predicate is not None:
            query[self.kind.backend_type_field] = type_predicate

        for dimension in self.schema:
            name = dimension.name
            if name in (CATEGORY, TYPE, AVAILABLE, SORT) or name not in state:
                continue
            value = state[name]
            if dimension.is_unconstrained(value):
                continue
            field_name = dimension.field or name

            if name == SEARCH:
                text = value.strip() if isinstance(value, str) else ""
                if text:
                    query["$or"] = [{f: _regex(text)} for f in self.search_fields]
            elif name == FEATURED:
                # Records without the field are not featured
                query[field_name] = True if value is True else {"$ne": True}
            elif dimension.kind == DimensionKind.RANGE:
                bounds = parse_range(value)
                if bounds is None:
                    continue
                predicate = {"$gte": _number(bounds.lower)}
                if bounds.upper is not None:
                    predicate["$lte"] = _number(bounds.upper)
                query[field_name] = predicate
            elif dimension.kind == DimensionKind.TEXT:
                if isinstance(value, str) and value.strip():
                    query[field_name] = {"$regex": _brand_pattern(value), "$options": "i"}
            else:
                query[field_name] = value

        logger.debug(f"[{self.kind.kind}] Backend query: {query}")
        return query

    def to_backend_sort(self, state: Mapping[str, Any]) -> List[Tuple[str, int]]:
        """Storage sort keys for the state's sort option, e.g. [('createdAt', -1)]."""
        sort = state.get(SORT)
        keys = self.kind.sort_keys.get(sort) if isinstance(sort, str) else None
        if keys is None:
            dimension = self.schema.get(SORT)
            keys = self.kind.sort_keys.get(dimension.default, ()) if dimension else ()
        return list(keys)

    __call__ = to_backend_query
