"""
Entity Filter Factory.

Composition root: selects the taxonomy, schema, validator, evaluator, facet
counter, codec and backend translator for a registered entity kind. Systems
are built once per kind and shared; every component is read-only.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from catalog_facets.backend.query_translator import BackendQueryTranslator
from catalog_facets.codec.query_string import QueryCodec
from catalog_facets.core.config import FacetConfig, get_config
from catalog_facets.exceptions import UnknownEntityKindError
from catalog_facets.filtering.facets import FacetCounter, FacetCounts
from catalog_facets.filtering.predicates import PredicateEvaluator
from catalog_facets.filtering.validator import FilterValidator, ValidationReport
from catalog_facets.filtering.values import EntityReader
from catalog_facets.schema.dimensions import FilterSchema, FilterValue
from catalog_facets.schema.kinds import PET_KIND, PRODUCT_KIND, EntityKindConfig, build_schema
from catalog_facets.taxonomy import TaxonomyRegistry
from catalog_facets.utils.logger import get_logger

logger = get_logger("factory")


# ============================================================================
# Registry Access
# ============================================================================

ENTITY_KINDS: Dict[str, EntityKindConfig] = {
    PET_KIND.kind: PET_KIND,
    PRODUCT_KIND.kind: PRODUCT_KIND,
}


def list_kinds() -> List[str]:
    """Returns a list of registered entity kinds."""
    return list(ENTITY_KINDS.keys())


def get_kind_config(kind: str) -> EntityKindConfig:
    config = ENTITY_KINDS.get(kind) if isinstance(kind, str) else None
    if config is None:
        raise UnknownEntityKindError(kind)
    return config


@dataclass(frozen=True)
class FilterSystem:
    """The filter components for one entity kind."""
    kind: str
    kind_config: EntityKindConfig
    taxonomy: TaxonomyRegistry
    schema: FilterSchema
    validator: FilterValidator
    evaluator: PredicateEvaluator
    counter: FacetCounter
    codec: QueryCodec
    translator: BackendQueryTranslator

    # Convenience entry points used by HTTP / UI collaborators

    def validate(self, raw: Any) -> Dict[str, FilterValue]:
        return self.validator.validate(raw)

    def inspect(self, raw: Any) -> ValidationReport:
        return self.validator.inspect(raw)

    def default_filters(self) -> Dict[str, FilterValue]:
        return self.schema.defaults()

    def matches(self, entity: Any, state: Mapping[str, Any]) -> bool:
        return self.evaluator.matches(entity, state)

    def filter_collection(self, entities: Iterable[Any], state: Mapping[str, Any]) -> List[Any]:
        return self.evaluator.filter_collection(entities, state)

    def sort_collection(self, entities: Sequence[Any], sort: Any) -> List[Any]:
        return self.evaluator.sort_collection(entities, sort)

    def count_facets(self, entities: Iterable[Any]) -> FacetCounts:
        return self.counter.count_facets(entities)

    def encode(self, state: Mapping[str, Any]) -> str:
        return self.codec.encode(state)

    def decode(self, query: Any) -> Dict[str, str]:
        return self.codec.decode(query)

    def from_query_string(self, query: Any) -> Dict[str, FilterValue]:
        """decode() followed by validate(): the only safe way to read a URL."""
        return self.validator.validate(self.codec.decode(query))

    def to_backend_query(self, state: Mapping[str, Any]) -> Dict[str, Any]:
        return self.translator.to_backend_query(state)

    def suggested_filters(self) -> List[Dict[str, Any]]:
        """Quick-filter presets as canonical states with their query strings."""
        presets = []
        for preset in self.kind_config.suggested_filters:
            report = self.validator.inspect(preset.filters)
            if not report.clean:
                logger.warning(
                    f"[{self.kind}] Suggested filter '{preset.label}' has invalid selections: "
                    f"unknown={report.unknown_keys} replaced={report.replaced}"
                )
            presets.append({
                "label": preset.label,
                "icon": preset.icon,
                "filters": report.state,
                "query_string": self.codec.encode(report.state),
            })
        return presets


def build_filter_system(kind: str, config: Optional[FacetConfig] = None) -> FilterSystem:
    """Build a fresh filter system for a kind (uncached)."""
    kind_config = get_kind_config(kind)
    config = config or get_config()

    schema = build_schema(kind_config, default_sort=config.default_sort, status_field=config.status_field)
    reader = EntityReader(kind_config, config, search_fields=config.search_fields.get(kind))
    backend_fields = config.backend_search_fields.get(kind)

    logger.info(f"Built filter system for '{kind}' with dimensions {list(schema.names())}")
    return FilterSystem(
        kind=kind,
        kind_config=kind_config,
        taxonomy=kind_config.taxonomy,
        schema=schema,
        validator=FilterValidator(schema),
        evaluator=PredicateEvaluator(kind_config, schema, reader),
        counter=FacetCounter(schema, reader),
        codec=QueryCodec(schema),
        translator=BackendQueryTranslator(
            kind_config, schema, config,
            search_fields=tuple(backend_fields) if backend_fields else None,
        ),
    )


# Systems built with the global config, one per kind
_systems: Dict[str, FilterSystem] = {}


def get_filter_system(kind: str) -> FilterSystem:
    """
    Get the shared filter system for a registered entity kind.

    Raises:
        UnknownEntityKindError: if the kind is not registered
    """
    system = _systems.get(kind) if isinstance(kind, str) else None
    if system is None:
        system = build_filter_system(kind)
        _systems[kind] = system
    return system


def reset_filter_systems() -> None:
    """Drop cached systems (e.g. after set_config())."""
    _systems.clear()


def create_filter_config(kind: str, counts: Optional[FacetCounts] = None) -> Dict[str, Any]:
    """
    Render-ready filter configuration for a kind.

    Kind-specific dimensions are merged with the cross-cutting ones (search,
    featured, available, sort) and the kind's quick-filter presets. When facet
    counts are given, option counts are filled in.
    """
    system = get_filter_system(kind)
    schema = system.schema.with_counts(counts) if counts else system.schema
    return {
        "kind": kind,
        "display_name": system.kind_config.display_name,
        "filters": schema.as_mapping(),
        "default_filters": schema.defaults(),
        "suggested_filters": system.suggested_filters(),
    }
