"""
Query-string codec.
"""
from catalog_facets.codec.query_string import QueryCodec

__all__ = ["QueryCodec"]
