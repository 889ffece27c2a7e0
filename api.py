# api.py
from typing import List, Dict, Any, Optional
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from core.config import settings, configure_logging
from core.context import ALL, FilterSet
from core.load import to_records
from features.filters import apply_filters
from features.metrics import compute_discount_metrics, compute_hero_metrics
from features.drilldown import build_drill_down
from features.breakdown import group_totals

configure_logging()

app = FastAPI(title="Descuentos & Promociones API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

class FilterIn(BaseModel):
    transactions: List[Dict[str, Any]] = []
    filters: Dict[str, Any] = {}      # llaves camelCase: soldBy, minDiscountAmount, dateRange, ...
    location: str = ALL

class DrillDownIn(BaseModel):
    transactions: List[Dict[str, Any]] = []
    label: str
    include_rows: bool = True

class BreakdownIn(FilterIn):
    by: str = "category"

def _filtered(body: FilterIn):
    try:
        filters = FilterSet.from_mapping(body.filters)
    except ValueError as e:
        raise HTTPException(422, str(e))
    return apply_filters(body.transactions, filters, location=body.location)

@app.get("/health")
def health():
    return {"ok": True}

@app.post("/discounts/filter")
def filter_transactions(body: FilterIn):
    rows = _filtered(body)
    return {"count": len(rows), "transactions": to_records(rows)}

@app.post("/discounts/metrics")
def discount_metrics(body: FilterIn):
    return compute_discount_metrics(_filtered(body)).to_dict()

@app.post("/discounts/hero")
def hero_metrics(body: FilterIn):
    return compute_hero_metrics(_filtered(body)).to_dict()

@app.post("/discounts/drilldown")
def drill_down(body: DrillDownIn):
    return build_drill_down(body.transactions, body.label).to_dict(include_rows=body.include_rows)

@app.post("/discounts/breakdown")
def breakdown(body: BreakdownIn, limit: Optional[int] = None):
    try:
        totals = group_totals(_filtered(body), body.by)
    except ValueError as e:
        raise HTTPException(422, str(e))
    if limit is not None:
        totals = totals.head(max(1, limit))
    return {"by": body.by, "groups": totals.to_dict(orient="records")}
