# src/leadcalc/api/http.py
from __future__ import annotations

from fastapi import FastAPI, HTTPException

from leadcalc.adapters.weights_io import resolve_market_weights
from leadcalc.domain.weights import (
    COMMON_ROLES,
    COMPANY_SIZES,
    DATA_SOURCES,
    GEOGRAPHIC_FILTERS,
    INDUSTRIES,
)
from leadcalc.services.estimator import estimate_roi, estimate_tam
from .schemas import CatalogResponse, ROIRequest, ROIResponse, TAMRequest, TAMResponse

app = FastAPI(title="leadcalc")

# -------------------------------------------------------------------
# Weight tables (single load at startup; a bad LEADCALC_WEIGHTS_PATH
# should stop the app rather than silently use defaults)
# -------------------------------------------------------------------
_weights = resolve_market_weights()


@app.get("/catalog", response_model=CatalogResponse)
def catalog() -> CatalogResponse:
    return CatalogResponse(
        industries=INDUSTRIES,
        roles=COMMON_ROLES,
        company_sizes=COMPANY_SIZES,
        geographic_filters=GEOGRAPHIC_FILTERS,
        data_sources=DATA_SOURCES,
        weights=_weights.model_dump(),
    )


@app.post("/tam", response_model=TAMResponse)
def tam_endpoint(payload: TAMRequest) -> TAMResponse:
    try:
        report = estimate_tam(payload.model_dump(), weights=_weights)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return TAMResponse(**report)


@app.post("/roi", response_model=ROIResponse)
def roi_endpoint(payload: ROIRequest) -> ROIResponse:
    try:
        report = estimate_roi(payload.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return ROIResponse(**report)


@app.post("/roi/batch", response_model=list[ROIResponse])
def roi_batch_endpoint(payloads: list[ROIRequest]) -> list[ROIResponse]:
    """
    Evaluate several campaign scenarios in one call (e.g. side-by-side
    comparisons). Fails as a whole when any scenario is invalid.
    """
    out: list[ROIResponse] = []
    for idx, payload in enumerate(payloads):
        try:
            report = estimate_roi(payload.model_dump())
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"scenario {idx}: {e}") from e
        out.append(ROIResponse(**report))
    return out
