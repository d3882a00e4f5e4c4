"""
Exception types shared across catalog_facets.
"""


class CatalogFacetsError(Exception):
    """Base class for errors raised by the filter engine."""


class UnknownEntityKindError(CatalogFacetsError, LookupError):
    """Raised when a filter system is requested for an unregistered entity kind."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Unknown entity kind: {kind!r}")
