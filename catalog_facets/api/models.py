"""
Pydantic models for the filter API requests and responses.
"""
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List, Tuple


class FilterStateRequest(BaseModel):
    """Request carrying raw (untrusted) filter input."""
    filters: Dict[str, Any] = Field(default_factory=dict, description="Raw filter selections")


class ValidateResponse(BaseModel):
    """Response model for validation."""
    kind: str
    filters: Dict[str, Any] = Field(description="Canonical filter state")
    unknown_keys: List[str] = Field(default_factory=list, description="Input keys that are not dimensions")
    replaced: List[str] = Field(default_factory=list, description="Dimensions reset to their default")
    query_string: str = Field(description="URL query string for the canonical state")
    active_filter_count: int = Field(default=0, description="Dimensions set to a non-default value")


class BackendQueryResponse(BaseModel):
    """Response model for storage predicate translation."""
    kind: str
    filters: Dict[str, Any]
    query: Dict[str, Any] = Field(description="Storage predicate")
    sort: List[Tuple[str, int]] = Field(default_factory=list, description="Storage sort keys")


class EncodeResponse(BaseModel):
    kind: str
    query_string: str


class DecodeResponse(BaseModel):
    kind: str
    raw: Dict[str, str] = Field(description="Decoded, unvalidated parameters")
    filters: Dict[str, Any] = Field(description="Canonical state after validation")


class ApplyRequest(BaseModel):
    """Request model for in-memory filtering over a supplied collection."""
    filters: Dict[str, Any] = Field(default_factory=dict, description="Raw filter selections")
    entities: List[Dict[str, Any]] = Field(default_factory=list, description="Base entity collection")
    sort: bool = Field(default=False, description="Apply the state's sort option to the results")


class ApplyResponse(BaseModel):
    kind: str
    filters: Dict[str, Any]
    results: List[Dict[str, Any]]
    total_results: int
    facets: Dict[str, Dict[str, int]] = Field(description="Facet counts over the base collection")
    active_filter_count: int


class FilterConfigResponse(BaseModel):
    kind: str
    display_name: str
    filters: Dict[str, Any]
    default_filters: Dict[str, Any]
    suggested_filters: List[Dict[str, Any]] = Field(default_factory=list, description="Quick-filter presets")


class HealthResponse(BaseModel):
    """Response model for health check."""
    status: str
    service: str
    version: str
    kinds: List[str]
    config: Dict[str, Any]
