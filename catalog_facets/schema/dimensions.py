"""
Filter dimensions and the generic filter schema.

A schema is an ordered, closed set of dimensions. The same FilterSchema class
serves every entity kind; kind-specific content is supplied by an
EntityKindConfig (see catalog_facets.schema.kinds).
"""
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

FilterValue = Union[bool, str, None]

# Dimension names shared by every entity kind
CATEGORY = "category"
TYPE = "type"
SEARCH = "search"
FEATURED = "featured"
AVAILABLE = "available"
SORT = "sort"


class DimensionKind(str, Enum):
    """How a dimension's values are entered and validated."""
    TEXT = "text"        # Free text (search, brand)
    SELECT = "select"    # One value out of an enumerated option list
    RANGE = "range"      # One "min-max" / "min+" token out of an option list
    BOOLEAN = "boolean"  # Tri-state: True, False, or None ("don't care")


class FilterOption(BaseModel):
    """A single selectable option of a dimension."""
    model_config = ConfigDict(frozen=True)

    value: str = Field(..., description="Value carried in filter state and URLs")
    label: str = Field(..., description="Human-readable label")
    count: int = Field(default=0, ge=0, description="Number of entities matching this option")
    icon: Optional[str] = None
    category: Optional[str] = None


class Dimension(BaseModel):
    """
    Definition of one filterable dimension.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Key in filter state and query strings")
    label: str = Field(..., description="Human-readable name")
    kind: DimensionKind
    options: Tuple[FilterOption, ...] = Field(default_factory=tuple)
    default: FilterValue = Field(default=None, description="Value used when input is missing or invalid")
    catch_all: Optional[str] = Field(default=None, description="Value meaning 'no constraint' (e.g. 'all')")
    field: Optional[str] = Field(default=None, description="Entity field the dimension reads")
    placeholder: Optional[str] = None
    faceted: bool = Field(default=True, description="Whether facet counts are computed for this dimension")

    def option_values(self) -> Tuple[str, ...]:
        return tuple(option.value for option in self.options)

    def is_unconstrained(self, value: Any) -> bool:
        """True when the value places no constraint on results."""
        if self.kind == DimensionKind.BOOLEAN:
            return value is None
        if value is None or value == "":
            return True
        return self.catch_all is not None and value == self.catch_all

    def is_default(self, value: Any) -> bool:
        if self.kind == DimensionKind.BOOLEAN:
            return value is self.default
        return value == self.default

    def render(self) -> Dict[str, Any]:
        """Render-ready description used by UI collaborators."""
        rendered: Dict[str, Any] = {
            "label": self.label,
            "type": "text" if self.kind == DimensionKind.TEXT else "select",
        }
        if self.placeholder:
            rendered["placeholder"] = self.placeholder
        if self.options:
            rendered["options"] = [option.model_dump(exclude_none=True) for option in self.options]
        return rendered


class FilterSchema(BaseModel):
    """
    Ordered, closed set of dimensions for one entity kind.
    """
    model_config = ConfigDict(frozen=True)

    kind: str = Field(..., description="Entity kind identifier (e.g. 'pets')")
    dimensions: Tuple[Dimension, ...]

    def model_post_init(self, __context: Any) -> None:
        names = [d.name for d in self.dimensions]
        duplicates = {n for n in names if names.count(n) > 1}
        if duplicates:
            raise ValueError(f"{self.kind}: duplicate dimensions {sorted(duplicates)}")

    def names(self) -> Tuple[str, ...]:
        return tuple(d.name for d in self.dimensions)

    def get(self, name: str) -> Optional[Dimension]:
        for dimension in self.dimensions:
            if dimension.name == name:
                return dimension
        return None

    def __contains__(self, name: object) -> bool:
        return any(d.name == name for d in self.dimensions)

    def __iter__(self):
        return iter(self.dimensions)

    def defaults(self) -> Dict[str, FilterValue]:
        """DEFAULT_FILTERS for this kind, in dimension order."""
        return {d.name: d.default for d in self.dimensions}

    def as_mapping(self) -> Dict[str, Dict[str, Any]]:
        """Ordered mapping dimension-name -> render description."""
        return {d.name: d.render() for d in self.dimensions}

    def with_counts(self, counts: Mapping[str, Mapping[str, int]]) -> "FilterSchema":
        """Return a copy whose option counts are filled in from facet counts."""
        dimensions: List[Dimension] = []
        for dimension in self.dimensions:
            tally = counts.get(dimension.name)
            if not tally or not dimension.options:
                dimensions.append(dimension)
                continue
            options = tuple(
                option.model_copy(update={"count": int(tally.get(option.value, 0))})
                for option in dimension.options
            )
            dimensions.append(dimension.model_copy(update={"options": options}))
        return self.model_copy(update={"dimensions": tuple(dimensions)})
