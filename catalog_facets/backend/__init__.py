"""
Storage predicate translation.
"""
from catalog_facets.backend.query_translator import BackendQueryTranslator

__all__ = ["BackendQueryTranslator"]
