"""
Reading dimension values out of entity records.

Entities are plain mappings (API payloads / storage documents). This module is
the single place that knows which field a dimension reads, so the predicate
evaluator and the facet counter can never disagree about an entity's value.
Reads that the storage predicate also performs (status, featured) compare
values exactly, the way a storage engine would.
"""
import re
from typing import Any, Iterable, List, Mapping, Optional

from catalog_facets.core.config import FacetConfig
from catalog_facets.schema.kinds import EntityKindConfig
from catalog_facets.taxonomy import ALL

_SEPARATORS = re.compile(r"[\s-]+")


def slugify(value: Any) -> Optional[str]:
    """'Royal Canin' -> 'royal-canin'. Non-strings and blanks give None."""
    if not isinstance(value, str):
        return None
    slug = _SEPARATORS.sub("-", value.strip().lower()).strip("-")
    return slug or None


def encodable(text: str) -> bool:
    """False for strings that cannot be written to a URL (e.g. lone surrogates)."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def normalize_token(value: Any) -> Optional[str]:
    """Lower-cased, trimmed string, or None for non-strings / blanks."""
    if not isinstance(value, str):
        return None
    token = value.strip().lower()
    return token or None


class EntityReader:
    """Field access for one entity kind."""

    def __init__(self, kind: EntityKindConfig, config: FacetConfig,
                 search_fields: Optional[Iterable[str]] = None):
        self.kind = kind
        self.config = config
        self.search_fields = tuple(search_fields or kind.search_fields)

    def type_candidates(self, entity: Mapping[str, Any]) -> List[str]:
        """Populated type fields, in lookup order."""
        candidates = []
        for field_name in self.kind.type_fields:
            token = normalize_token(entity.get(field_name))
            if token:
                candidates.append(token)
        return candidates

    def type_of(self, entity: Mapping[str, Any]) -> Optional[str]:
        """
        The entity's specific type.

        The first type field holding a type the taxonomy knows wins; when none
        does, the first populated field is used so unknown types still count.
        """
        candidates = self.type_candidates(entity)
        for token in candidates:
            if token in self.kind.taxonomy:
                return token
        return candidates[0] if candidates else None

    def category_of(self, entity: Mapping[str, Any]) -> str:
        """Category derived from the type through the taxonomy; ALL if unknown."""
        type_key = self.type_of(entity)
        return self.kind.taxonomy.category_of(type_key) if type_key else ALL

    def select_value(self, entity: Mapping[str, Any], field_name: str) -> Optional[str]:
        return normalize_token(entity.get(field_name))

    def is_featured(self, entity: Mapping[str, Any]) -> Optional[bool]:
        """True only for a literal True; None when the field is absent."""
        value = entity.get("featured")
        if value is None:
            return None
        return value is True

    def is_available(self, entity: Mapping[str, Any]) -> bool:
        status = entity.get(self.config.status_field)
        if status is None:
            return self.config.missing_status_is_available
        return status == self.config.available_status

    def search_text(self, entity: Mapping[str, Any]) -> str:
        parts = []
        for field_name in self.search_fields:
            value = entity.get(field_name)
            if isinstance(value, (str, int, float)) and not isinstance(value, bool):
                parts.append(str(value))
        return " ".join(parts).lower()
