"""
API module for catalog_facets.

Provides REST API endpoints for UI integration.
"""
from catalog_facets.api.models import (
    ApplyRequest,
    ApplyResponse,
    BackendQueryResponse,
    DecodeResponse,
    EncodeResponse,
    FilterConfigResponse,
    FilterStateRequest,
    HealthResponse,
    ValidateResponse,
)

__all__ = [
    "ApplyRequest",
    "ApplyResponse",
    "BackendQueryResponse",
    "DecodeResponse",
    "EncodeResponse",
    "FilterConfigResponse",
    "FilterStateRequest",
    "HealthResponse",
    "ValidateResponse",
]
