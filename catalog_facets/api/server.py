"""
FastAPI server exposing the filter engine to UI collaborators.

Usage:
    uvicorn catalog_facets.api.server:app --reload --port 8000
"""
from dataclasses import asdict
from typing import Optional

from fastapi import FastAPI, HTTPException, Query

from dotenv import load_dotenv
load_dotenv()

import catalog_facets
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
from catalog_facets.core.config import get_config
from catalog_facets.exceptions import UnknownEntityKindError
from catalog_facets.factory import FilterSystem, create_filter_config, get_filter_system, list_kinds
from catalog_facets.utils.logger import get_logger

logger = get_logger("api.server")


# Initialize FastAPI app
app = FastAPI(
    title="Catalog Facets API",
    description="Filter validation, query-string codec, facet counts and storage predicates",
    version=catalog_facets.__version__,
)


def _system(kind: str) -> FilterSystem:
    try:
        return get_filter_system(kind)
    except UnknownEntityKindError as e:
        logger.warning(f"Rejected request for unknown entity kind: {kind!r}")
        raise HTTPException(status_code=404, detail=str(e))


@app.get("/", response_model=HealthResponse)
async def root():
    """Health check."""
    return HealthResponse(
        status="ok",
        service="catalog-facets",
        version=catalog_facets.__version__,
        kinds=list_kinds(),
        config=asdict(get_config()),
    )


@app.get("/filters")
async def kinds():
    """List registered entity kinds and the kind UIs should open with."""
    return {"kinds": list_kinds(), "default_kind": get_config().default_kind}


@app.get("/filters/{kind}/config", response_model=FilterConfigResponse)
async def filter_config(kind: str):
    """Render-ready filter configuration (dimensions, options, defaults)."""
    _system(kind)
    return FilterConfigResponse(**create_filter_config(kind))


@app.post("/filters/{kind}/validate", response_model=ValidateResponse)
async def validate(kind: str, request: FilterStateRequest):
    """Validate raw filter input into a canonical state."""
    system = _system(kind)
    report = system.inspect(request.filters)
    return ValidateResponse(
        kind=kind,
        filters=report.state,
        unknown_keys=report.unknown_keys,
        replaced=report.replaced,
        query_string=system.encode(report.state),
        active_filter_count=system.evaluator.active_filter_count(report.state),
    )


@app.post("/filters/{kind}/query", response_model=BackendQueryResponse)
async def backend_query(kind: str, request: FilterStateRequest):
    """Translate raw filter input into a storage predicate and sort keys."""
    system = _system(kind)
    state = system.validate(request.filters)
    return BackendQueryResponse(
        kind=kind,
        filters=state,
        query=system.to_backend_query(state),
        sort=system.translator.to_backend_sort(state),
    )


@app.post("/filters/{kind}/encode", response_model=EncodeResponse)
async def encode(kind: str, request: FilterStateRequest):
    """Encode (validated) filter input as a URL query string."""
    system = _system(kind)
    return EncodeResponse(kind=kind, query_string=system.encode(system.validate(request.filters)))


@app.get("/filters/{kind}/decode", response_model=DecodeResponse)
async def decode(kind: str, qs: Optional[str] = Query(default="", description="URL query string")):
    """Decode a URL query string and validate it."""
    system = _system(kind)
    raw = system.decode(qs or "")
    return DecodeResponse(kind=kind, raw=raw, filters=system.validate(raw))


@app.post("/filters/{kind}/apply", response_model=ApplyResponse)
async def apply(kind: str, request: ApplyRequest):
    """Filter a supplied collection in memory and count facets over it."""
    system = _system(kind)
    state = system.validate(request.filters)
    results = system.filter_collection(request.entities, state)
    if request.sort:
        results = system.sort_collection(results, state.get("sort"))
    logger.info(f"[{kind}] apply: {len(results)}/{len(request.entities)} entities matched")
    return ApplyResponse(
        kind=kind,
        filters=state,
        results=results,
        total_results=len(results),
        facets=system.count_facets(request.entities),
        active_filter_count=system.evaluator.active_filter_count(state),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
