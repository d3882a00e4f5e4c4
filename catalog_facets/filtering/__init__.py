"""
Validation, in-memory evaluation and facet counting.
"""
from catalog_facets.filtering.facets import FacetCounter, FacetCounts
from catalog_facets.filtering.predicates import PredicateEvaluator
from catalog_facets.filtering.ranges import Bounds, in_bucket, in_range, parse_range
from catalog_facets.filtering.validator import FilterValidator, ValidationReport
from catalog_facets.filtering.values import EntityReader

__all__ = [
    "FacetCounter",
    "FacetCounts",
    "PredicateEvaluator",
    "Bounds",
    "in_bucket",
    "in_range",
    "parse_range",
    "FilterValidator",
    "ValidationReport",
    "EntityReader",
]
