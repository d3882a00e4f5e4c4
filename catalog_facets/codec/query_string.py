"""
URL query-string codec for filter states.

encode() writes only the dimensions that differ from their default (and are
not the catch-all), in schema order. decode() is purely syntactic: the result
is an untrusted string map that must go through the validator before use.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

from catalog_facets.filtering.values import encodable
from catalog_facets.schema.dimensions import DimensionKind, FilterSchema
from catalog_facets.taxonomy import ALL


def _to_param(value: Any) -> Optional[str]:
    if value is None:
        return ALL
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str) and encodable(value):
        return value
    return None


class QueryCodec:
    """Filter state <-> query string for one schema."""

    def __init__(self, schema: FilterSchema):
        self.schema = schema

    def params(self, state: Mapping[str, Any]) -> List[Tuple[str, str]]:
        """The (dimension, value) pairs encode() would emit."""
        pairs: List[Tuple[str, str]] = []
        for dimension in self.schema:
            if dimension.name not in state:
                continue
            value = state[dimension.name]
            if dimension.is_default(value):
                continue
            if dimension.kind != DimensionKind.BOOLEAN and dimension.is_unconstrained(value):
                continue
            param = _to_param(value)
            if param is None:
                continue
            pairs.append((dimension.name, param))
        return pairs

    def encode(self, state: Mapping[str, Any]) -> str:
        return urlencode(self.params(state))

    @staticmethod
    def decode(query: Any) -> Dict[str, str]:
        """Parse a query string into a raw string map (no defaults applied)."""
        if not isinstance(query, str):
            return {}
        query = query.strip()
        if query.startswith("?"):
            query = query[1:]
        raw: Dict[str, str] = {}
        for key, value in parse_qsl(query, keep_blank_values=True):
            raw[key] = value
        return raw
