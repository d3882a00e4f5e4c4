"""
Taxonomy registry: the fixed mapping from specific types to broader categories.

A registry is built once from a list of entries and never mutated, so a single
instance can be shared by every request handler.
"""
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

ALL = "all"


class TaxonomyEntry(BaseModel):
    """A specific type and the category it belongs to."""
    model_config = ConfigDict(frozen=True)

    type_key: str = Field(..., description="Specific type key (e.g. 'guinea-pig')")
    label: str = Field(..., description="Human-readable label (e.g. 'Guinea Pigs')")
    category: str = Field(..., description="Category key the type rolls up to")
    icon: str = Field(default="", description="Display icon")


class CategoryEntry(BaseModel):
    """A browsable category."""
    model_config = ConfigDict(frozen=True)

    value: str
    label: str


def _normalize_key(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    key = value.strip().lower()
    return key or None


class TaxonomyRegistry:
    """
    Immutable type -> category lookup.

    Every registered type maps to exactly one category, and every category
    referenced by an entry must be declared. Violations are programming errors
    in the static tables and raise ValueError at construction time.
    """

    def __init__(self, name: str, categories: Iterable[CategoryEntry], entries: Iterable[TaxonomyEntry]):
        self.name = name
        self._categories: Tuple[CategoryEntry, ...] = tuple(categories)
        self._entries: Tuple[TaxonomyEntry, ...] = tuple(entries)

        category_keys = [c.value for c in self._categories]
        if ALL in category_keys:
            raise ValueError(f"{name}: '{ALL}' is implicit and must not be declared")

        by_type: Dict[str, TaxonomyEntry] = {}
        for entry in self._entries:
            if entry.type_key in by_type:
                raise ValueError(f"{name}: duplicate type '{entry.type_key}'")
            if entry.category not in category_keys:
                raise ValueError(
                    f"{name}: type '{entry.type_key}' references undeclared category '{entry.category}'"
                )
            by_type[entry.type_key] = entry
        self._by_type = by_type

        members: Dict[str, List[str]] = {key: [] for key in category_keys}
        for entry in self._entries:
            members[entry.category].append(entry.type_key)
        self._members: Dict[str, FrozenSet[str]] = {k: frozenset(v) for k, v in members.items()}
        self._all_types: FrozenSet[str] = frozenset(by_type)

    def category_of(self, type_key: Any) -> str:
        """Return the category of a type, or ALL when the type is unknown."""
        key = _normalize_key(type_key)
        entry = self._by_type.get(key) if key else None
        return entry.category if entry else ALL

    def types_of(self, category: Any) -> FrozenSet[str]:
        """Return every type in a category. ALL returns every known type."""
        key = _normalize_key(category)
        if key == ALL:
            return self._all_types
        return self._members.get(key, frozenset())

    def entry(self, type_key: Any) -> Optional[TaxonomyEntry]:
        key = _normalize_key(type_key)
        return self._by_type.get(key) if key else None

    def label_of(self, type_key: Any) -> str:
        entry = self.entry(type_key)
        return entry.label if entry else str(type_key)

    def is_type(self, type_key: Any) -> bool:
        return self.entry(type_key) is not None

    def is_category(self, category: Any) -> bool:
        key = _normalize_key(category)
        return key == ALL or key in self._members

    def categories(self) -> Tuple[CategoryEntry, ...]:
        """Declared categories in display order (ALL is not included)."""
        return self._categories

    def types(self) -> Tuple[TaxonomyEntry, ...]:
        """Registered types in display order."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, type_key: Any) -> bool:
        return self.is_type(type_key)

    def __repr__(self) -> str:
        return f"TaxonomyRegistry({self.name!r}, types={len(self._entries)}, categories={len(self._categories)})"
